"""
lib/fs/Inode.py

Purpose:
Defines the namespace record (INode) that describes exactly one file or one directory, together with the block and sub-block references that locate a file's content.

Place in Architecture:
The unit of storage for every NamespaceStore. The StrataFS facade reads and writes whole INodes; it never patches single fields. Renames copy the INode to the new path and delete the old one.

Interface:

	INodeType: DIRECTORY or FILE.
	SubBlock(id, offset, length): One stored content chunk. offset is relative to its Block.
	Block(id, offset, length, subBlocks): One advisory block of a file.
	INode(user, group, permission, fileType, blocks=None, blockSize=0)
		IsFile(), IsDirectory(), GetLength(), GetSubBlocks()
		ToDict() / FromDict(data): JSON-compatible conversion used by the stores.

TODOs/FIXMEs:
None.
"""

from enum import Enum


class INodeType(Enum):
	DIRECTORY = 0
	FILE = 1

	def __str__(this):
		return this.name


class SubBlock(object):
	def __init__(this, id, offset, length):
		this.id = id
		this.offset = offset
		this.length = length

	def __eq__(this, other):
		if (not isinstance(other, SubBlock)):
			return NotImplemented
		return (this.id, this.offset, this.length) == (other.id, other.offset, other.length)

	def __repr__(this):
		return f"<SubBlock {this.id} @{this.offset}+{this.length}>"

	def ToDict(this):
		return {'id': this.id, 'offset': this.offset, 'length': this.length}

	@classmethod
	def FromDict(cls, data):
		return cls(data['id'], data['offset'], data['length'])


class Block(object):
	def __init__(this, id, offset, length, subBlocks=None):
		this.id = id
		this.offset = offset
		this.length = length
		this.subBlocks = list(subBlocks or [])

	def __eq__(this, other):
		if (not isinstance(other, Block)):
			return NotImplemented
		return (this.id, this.offset, this.length, this.subBlocks) == (other.id, other.offset, other.length, other.subBlocks)

	def __repr__(this):
		return f"<Block {this.id} @{this.offset}+{this.length} ({len(this.subBlocks)} sub-blocks)>"

	def ToDict(this):
		return {
			'id': this.id,
			'offset': this.offset,
			'length': this.length,
			'subBlocks': [s.ToDict() for s in this.subBlocks],
		}

	@classmethod
	def FromDict(cls, data):
		return cls(
			data['id'],
			data['offset'],
			data['length'],
			[SubBlock.FromDict(s) for s in data.get('subBlocks', [])]
		)


# Directories never carry blocks. Files always carry a (possibly empty) list of blocks.
class INode(object):
	def __init__(this, user, group, permission, fileType, blocks=None, blockSize=0):
		this.user = user
		this.group = group
		this.permission = permission
		this.fileType = fileType
		this.blockSize = blockSize

		if (fileType == INodeType.DIRECTORY):
			if (blocks):
				raise ValueError("A directory INode can't reference content")
			this.blocks = None
		else:
			this.blocks = list(blocks or [])

	def __eq__(this, other):
		if (not isinstance(other, INode)):
			return NotImplemented
		return this.ToDict() == other.ToDict()

	def __repr__(this):
		return f"<INode {this.fileType} {this.user}:{this.group} {oct(this.permission)}>"

	def IsFile(this):
		return this.fileType == INodeType.FILE

	def IsDirectory(this):
		return this.fileType == INodeType.DIRECTORY

	def GetLength(this):
		if (not this.blocks):
			return 0
		return sum(block.length for block in this.blocks)

	# RETURNS every SubBlock of *this in content order.
	def GetSubBlocks(this):
		ret = []
		for block in this.blocks or []:
			ret.extend(block.subBlocks)
		return ret

	def ToDict(this):
		ret = {
			'user': this.user,
			'group': this.group,
			'permission': this.permission,
			'fileType': this.fileType.name,
			'blockSize': this.blockSize,
			'blocks': None,
		}
		if (this.blocks is not None):
			ret['blocks'] = [b.ToDict() for b in this.blocks]
		return ret

	@classmethod
	def FromDict(cls, data):
		blocks = data.get('blocks')
		if (blocks is not None):
			blocks = [Block.FromDict(b) for b in blocks]
		return cls(
			data['user'],
			data['group'],
			data['permission'],
			INodeType[data['fileType']],
			blocks,
			data.get('blockSize', 0)
		)
