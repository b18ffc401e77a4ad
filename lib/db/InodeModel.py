"""
lib/db/InodeModel.py

Purpose:
Defines the SQLAlchemy ORM models behind SQLStore: one row per namespace record, keyed by absolute path, and one row per stored sub-block.

Place in Architecture:
Provides persistent storage for INode metadata and file content used by the StrataFS layer when the store URI is a SQL database.

Interface:

	PathKey(path): The fixed-length key a path is stored under.
	InodeModel: columns id, path, parent, user, group, permission, kind, block_size, blocks.
	SubBlockModel: columns id, data.
	ToInode() / FromInode(): Conversion to and from lib.fs.Inode.INode.

TODOs/FIXMEs:
None.
"""

import hashlib
import sqlalchemy as sql
import sqlalchemy.orm as orm

from ..fs.Inode import INode

Base = orm.declarative_base()

# Index keys are bounded (3072 bytes on MySQL); paths are not.
def PathKey(path):
	return hashlib.sha256(str(path).encode('utf-8')).hexdigest()


# The table is flat: the path is the only identity a record has.
# parent holds the PathKey of the parent so direct children can be listed without string matching.
class InodeModel(Base):
	__tablename__ = 'inodes'

	# Lookup info.
	id = sql.Column(sql.String(64), primary_key=True) # PathKey(path)
	path = sql.Column(sql.Text, nullable=False)
	parent = sql.Column(sql.String(64), nullable=True, index=True) # NULL only for the root.

	# Filesystem data.
	user = sql.Column(sql.String(255), nullable=False)
	group = sql.Column(sql.String(255), nullable=False)
	permission = sql.Column(sql.Integer, nullable=False)
	kind = sql.Column(sql.String(16), nullable=False) # INodeType name.
	block_size = sql.Column(sql.BigInteger, default=0)
	blocks = sql.Column(sql.JSON) # Only for files.

	def __repr__(this):
		return f"<{this.kind} @ {this.path}>"

	def ToInode(this):
		return INode.FromDict({
			'user': this.user,
			'group': this.group,
			'permission': this.permission,
			'fileType': this.kind,
			'blockSize': this.block_size or 0,
			'blocks': this.blocks,
		})

	# Overwrite every column of *this with the given INode.
	def FromInode(this, inode):
		data = inode.ToDict()
		this.user = data['user']
		this.group = data['group']
		this.permission = data['permission']
		this.kind = data['fileType']
		this.block_size = data['blockSize']
		this.blocks = data['blocks']


class SubBlockModel(Base):
	__tablename__ = 'subblocks'

	id = sql.Column(sql.String(64), primary_key=True)
	data = sql.Column(sql.LargeBinary, nullable=False)

	def __repr__(this):
		return f"<SubBlock {this.id} ({len(this.data)} bytes)>"
