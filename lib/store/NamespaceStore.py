"""
lib/store/NamespaceStore.py

Purpose:
Defines the contract for the flat, key-addressed persistence underneath the namespace. A store knows records by absolute path and nothing more: it has no notion of directories, emptiness or subtrees beyond enumerating paths that share a prefix.

Place in Architecture:
The only collaborator the StrataFS facade talks to for metadata and content. Backends (SQLStore, RedisStore) implement every method as a single blocking round-trip.

Interface:

	Initialize(uri, config) / Shutdown(): Lifecycle.
	RetrieveINode(path), StoreINode(path, inode), DeleteINode(path): Single-record get / full overwrite / remove.
	DeleteSubBlocks(inode): Release the content chunks of a FILE record.
	ListSubPaths(path), ListDeepSubPaths(path): Direct children and all descendants.
	StoreSubBlock(subBlockId, data), RetrieveSubBlock(subBlockId): Content chunk persistence for the streams.

TODOs/FIXMEs:
None.
"""

from abc import ABC, abstractmethod


# Stores do not enforce any hierarchy invariants.
# It is legal (from the store's point of view) to put a record whose parent does not exist, or to put children under a FILE record.
# Keeping the namespace well-formed is the facade's job.
class NamespaceStore(ABC):

	# One-time setup before first use.
	# uri is backend specific; config is a dict of tunables.
	@abstractmethod
	def Initialize(this, uri, config):
		pass

	# Release any connections. Calling it twice is harmless.
	def Shutdown(this):
		pass

	# RETURNS the INode at path or None.
	@abstractmethod
	def RetrieveINode(this, path):
		pass

	# Replace whatever is at path with inode.
	@abstractmethod
	def StoreINode(this, path, inode):
		pass

	# Remove the record at path. Removing nothing is not an error.
	@abstractmethod
	def DeleteINode(this, path):
		pass

	# Release every sub-block the given FILE INode references.
	@abstractmethod
	def DeleteSubBlocks(this, inode):
		pass

	# RETURNS a set of the UniversalPaths directly below path.
	@abstractmethod
	def ListSubPaths(this, path):
		pass

	# RETURNS a set of every UniversalPath below path, at any depth.
	@abstractmethod
	def ListDeepSubPaths(this, path):
		pass

	@abstractmethod
	def StoreSubBlock(this, subBlockId, data):
		pass

	# RETURNS the bytes of the sub-block or None if it is not stored.
	@abstractmethod
	def RetrieveSubBlock(this, subBlockId):
		pass
