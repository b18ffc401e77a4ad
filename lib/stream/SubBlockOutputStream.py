"""
lib/stream/SubBlockOutputStream.py

Purpose:
Writes a file's content into the namespace store as fixed-size sub-blocks, grouped into (advisory) blocks, and records the FILE INode when closed.

Place in Architecture:
Returned (wrapped in io.BufferedWriter) by StrataFS.Create. The INode only becomes visible once the stream is closed; until then the path holds no record.

Interface:

	SubBlockOutputStream(store, path, inode, blockSize, subBlockSize)
	write(data), close(), plus the usual io.RawIOBase surface.

TODOs/FIXMEs:
None.
"""

import io
import uuid
import logging

from ..fs.Inode import Block, SubBlock


def NewId():
	return uuid.uuid4().hex


class SubBlockOutputStream(io.RawIOBase):
	def __init__(this, store, path, inode, blockSize, subBlockSize):
		super().__init__()

		if (blockSize < 1 or subBlockSize < 1):
			raise ValueError(f"Invalid block size {blockSize} / sub-block size {subBlockSize}")

		this.store = store
		this.path = path
		this.inode = inode
		this.blockSize = blockSize
		this.subBlockSize = subBlockSize

		this.position = 0 # Bytes accepted so far.

		# The block being filled.
		this.blockOffset = 0
		this.blockFill = 0 # Bytes already committed to sub-blocks of the current block.
		this.subBlocks = []

		# The sub-block being filled.
		this.pending = bytearray()

	def writable(this):
		return True

	def tell(this):
		return this.position

	def write(this, data):
		if (this.closed):
			raise ValueError("write to closed file")

		data = memoryview(data).cast('B')
		written = len(data)
		while (len(data)):
			room = min(
				this.subBlockSize - len(this.pending),
				this.blockSize - this.blockFill - len(this.pending)
			)
			take = min(room, len(data))
			this.pending += data[:take]
			data = data[take:]

			if (len(this.pending) == this.subBlockSize or this.blockFill + len(this.pending) == this.blockSize):
				this.CommitSubBlock()
			if (this.blockFill == this.blockSize):
				this.CommitBlock()

		this.position += written
		return written

	def CommitSubBlock(this):
		if (not this.pending):
			return
		subBlock = SubBlock(NewId(), this.blockFill, len(this.pending))
		this.store.StoreSubBlock(subBlock.id, bytes(this.pending))
		this.subBlocks.append(subBlock)
		this.blockFill += len(this.pending)
		this.pending = bytearray()

	def CommitBlock(this):
		if (not this.subBlocks):
			return
		this.inode.blocks.append(Block(NewId(), this.blockOffset, this.blockFill, this.subBlocks))
		this.blockOffset += this.blockFill
		this.blockFill = 0
		this.subBlocks = []

	def close(this):
		if (this.closed):
			return
		try:
			this.CommitSubBlock()
			this.CommitBlock()
			this.store.StoreINode(this.path, this.inode)
			logging.debug(f"Stored {this.path} ({this.position} bytes in {len(this.inode.blocks)} blocks)")
		finally:
			super().close()
