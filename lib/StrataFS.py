"""
lib/StrataFS.py

Purpose:
Implements StrataFS, a hierarchical (POSIX-like) namespace of directories and files emulated on top of a flat, key-addressed NamespaceStore.

Place in Architecture:
The orchestrator. Every public operation normalizes its path arguments against the working directory and then issues single-record store calls. All of the hierarchy lives here: auto-created ancestors, directory emptiness, recursive delete, listing and full subtree rename.

Interface:

	StrataFS(store=None, user=None, group=None)
	Lifecycle: Initialize(uri, config), Shutdown(), ForSession(workingDirectory).
	Files: Create(), Open(), Append() (unsupported), CheckFile().
	Namespace: Delete(), Rename(), MakeDirectories(), ListStatus(), GetFileStatus(), IsFile(), IsDirectory(), Exists().
	Context: GetWorkingDirectory(), SetWorkingDirectory(), GetUri(), GetName().

TODOs/FIXMEs:

	NOTE: Multi-record operations (Delete, MakeDirectories, Rename) are not atomic. When one fails partway, whatever already happened stays in place; nothing is rolled back.
	NOTE: Nothing here locks. Two callers mutating overlapping paths get whatever interleaving the store serializes.
"""

import io
import copy
import errno
import getpass
import logging
from urllib.parse import urlparse

from .FilesystemProvider import FilesystemProvider
from .Upath import UniversalPath, normalize
from .Utils import parse_size
from .Errors import PathNotFound, PathAlreadyExists, TypeMismatch, DirectoryNotEmpty, Unsupported, InconsistentNamespace
from .fs.Inode import INode, INodeType
from .fs.FileStatus import FileStatus
from .store import StoreFor
from .stream import SubBlockOutputStream, SubBlockInputStream

DEFAULT_SUBBLOCK_SIZE = 256 * 1024
DEFAULT_BLOCK_SIZE = 64 * 1024 * 1024
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_FILE_PERMISSION = 0o644
DEFAULT_DIRECTORY_PERMISSION = 0o755


def GetUserName():
	try:
		return getpass.getuser()
	except (KeyError, OSError):
		return "none"


class StrataFS(FilesystemProvider):
	def __init__(this, store=None, user=None, group=None):
		this.store = store
		this.uri = None
		this.user = user or GetUserName()
		this.group = group or this.user
		this.workingDir = UniversalPath("/user").Join(this.user)
		this.subBlockSize = DEFAULT_SUBBLOCK_SIZE

	def Initialize(this, uri, config=None):
		config = config or {}

		parsed = urlparse(str(uri))
		this.uri = f"{parsed.scheme}://{parsed.netloc}"

		this.subBlockSize = parse_size(config.get('subblock_size', DEFAULT_SUBBLOCK_SIZE))
		if (this.subBlockSize < 1):
			raise ValueError(f"Invalid sub-block size {this.subBlockSize}")

		if (this.store is None):
			this.store = StoreFor(uri)
		this.store.Initialize(uri, config)

		logging.info(f"{this.GetName()} working directory: {this.workingDir}")
		return this

	def Shutdown(this):
		if (this.store is not None):
			this.store.Shutdown()

	# RETURNS a new StrataFS sharing the store and configuration of *this, with its own working directory.
	def ForSession(this, workingDirectory=None):
		ret = copy.copy(this)
		if (workingDirectory is not None):
			ret.workingDir = this.MakeAbsolute(workingDirectory)
		return ret

	def GetUri(this):
		return this.uri

	def GetName(this):
		return str(this.uri)

	def GetWorkingDirectory(this):
		return this.workingDir

	def SetWorkingDirectory(this, path):
		this.workingDir = this.MakeAbsolute(path)

	def MakeAbsolute(this, path):
		return normalize(path, this.workingDir)

	def Append(this, path, bufferSize=DEFAULT_BUFFER_SIZE):
		raise Unsupported("append")

	# RETURNS a writable, buffered stream. The file's record is stored when the stream is closed.
	def Create(this, path, permission=DEFAULT_FILE_PERMISSION, overwrite=True, bufferSize=DEFAULT_BUFFER_SIZE, blockSize=DEFAULT_BLOCK_SIZE):
		if (blockSize < 1 or bufferSize < 1):
			raise ValueError(f"Invalid block size {blockSize} / buffer size {bufferSize}")

		absolutePath = this.MakeAbsolute(path)
		if (absolutePath.IsRoot()):
			raise TypeMismatch.IsADirectory(absolutePath)

		inode = this.store.RetrieveINode(absolutePath)
		if (inode is not None):
			if (inode.IsDirectory()):
				raise TypeMismatch.IsADirectory(absolutePath)
			if (not overwrite):
				raise PathAlreadyExists(absolutePath)
			this.Delete(absolutePath)
		else:
			parent = absolutePath.GetParent()
			if (parent is not None):
				if (not this.MakeDirectories(parent)):
					raise IOError(errno.EIO, f"Mkdirs failed to create {parent}")

		inode = INode(this.user, this.group, permission, INodeType.FILE, [], blockSize)
		stream = SubBlockOutputStream(this.store, absolutePath, inode, blockSize, this.subBlockSize)
		return io.BufferedWriter(stream, bufferSize)

	def Open(this, path, bufferSize=DEFAULT_BUFFER_SIZE):
		absolutePath = this.MakeAbsolute(path)
		inode = this.CheckFile(absolutePath)
		return io.BufferedReader(SubBlockInputStream(this.store, inode, absolutePath), bufferSize)

	# RETURNS False if there was nothing to delete or a child could not be deleted.
	# Children deleted before a failure stay deleted.
	def Delete(this, path, recursive=True):
		logging.debug(f"Deleting {path}, recursive flag: {recursive}")

		absolutePath = this.MakeAbsolute(path)
		inode = this.store.RetrieveINode(absolutePath)
		if (inode is None):
			return False

		if (inode.IsFile()):
			this.store.DeleteINode(absolutePath)
			this.store.DeleteSubBlocks(inode)
			return True

		contents = this.ListStatus(absolutePath)
		if (contents is None):
			return False
		if (len(contents) and not recursive):
			raise DirectoryNotEmpty(absolutePath)

		for status in contents:
			if (not this.Delete(status.GetPath(), recursive)):
				return False

		this.store.DeleteINode(absolutePath)
		return True

	def GetFileStatus(this, path):
		absolutePath = this.MakeAbsolute(path)
		inode = this.store.RetrieveINode(absolutePath)
		if (inode is None):
			raise PathNotFound(absolutePath)
		return FileStatus(absolutePath, inode)

	# RETURNS None if nothing exists at path.
	def ListStatus(this, path):
		absolutePath = this.MakeAbsolute(path)
		inode = this.store.RetrieveINode(absolutePath)
		if (inode is None):
			return None
		if (inode.IsFile()):
			return [FileStatus(absolutePath, inode)]

		ret = []
		for child in sorted(this.store.ListSubPaths(absolutePath)):
			# we shouldn't list ourselves
			if (child == absolutePath):
				continue

			try:
				ret.append(this.GetFileStatus(child))
			except PathNotFound:
				logging.warning(f"No file found for: {child}")
		return ret

	def MakeDirectories(this, path, permission=DEFAULT_DIRECTORY_PERMISSION):
		absolutePath = this.MakeAbsolute(path)

		paths = []
		while (absolutePath is not None):
			paths.insert(0, absolutePath)
			absolutePath = absolutePath.GetParent()

		for p in paths:
			if (not this.Mkdir(p, permission)):
				return False
		return True

	def Mkdir(this, path, permission):
		inode = this.store.RetrieveINode(path)
		if (inode is None):
			inode = INode(this.user, this.group, permission, INodeType.DIRECTORY)
			this.store.StoreINode(path, inode)
		elif (inode.IsFile()):
			raise TypeMismatch.NotADirectory(path)
		return True

	def CheckFile(this, path):
		absolutePath = this.MakeAbsolute(path)
		inode = this.store.RetrieveINode(absolutePath)
		if (inode is None):
			raise PathNotFound(absolutePath)
		if (inode.IsDirectory()):
			raise TypeMismatch.IsADirectory(absolutePath)
		return inode

	def IsFile(this, path):
		inode = this.store.RetrieveINode(this.MakeAbsolute(path))
		if (inode is None):
			return False
		return inode.IsFile()

	def IsDirectory(this, path):
		inode = this.store.RetrieveINode(this.MakeAbsolute(path))
		if (inode is None):
			return False
		return inode.IsDirectory()

	def Exists(this, path):
		return this.store.RetrieveINode(this.MakeAbsolute(path)) is not None

	# RETURNS False, without raising, when the rename can't be performed.
	# If dst is an existing directory, src is moved into it.
	def Rename(this, src, dst):
		logging.debug(f"Renaming {src} to {dst}")

		absoluteSrc = this.MakeAbsolute(src)
		if (absoluteSrc.IsRoot()):
			return False

		srcINode = this.store.RetrieveINode(absoluteSrc)
		if (srcINode is None):
			# src path doesn't exist
			return False

		absoluteDst = this.MakeAbsolute(dst)
		dstINode = this.store.RetrieveINode(absoluteDst)
		if (dstINode is not None and dstINode.IsDirectory()):
			absoluteDst = absoluteDst.Join(absoluteSrc.GetName())
			dstINode = this.store.RetrieveINode(absoluteDst)
		if (dstINode is not None):
			# dst path already exists - can't overwrite
			return False

		if (absoluteDst.IsUnder(absoluteSrc)):
			# can't move a directory into itself
			return False

		dstParent = absoluteDst.GetParent()
		if (dstParent is not None):
			dstParentINode = this.store.RetrieveINode(dstParent)
			if (dstParentINode is None or dstParentINode.IsFile()):
				# dst parent doesn't exist or is a file
				return False

		try:
			this.RenameRecursive(absoluteSrc, absoluteDst)
		except InconsistentNamespace as e:
			logging.warning(f"Rename of {absoluteSrc} to {absoluteDst} stopped partway: {e}")
			return False
		return True

	# Copy src and every descendant to the same relative place under dst, deleting each original after its copy is written.
	def RenameRecursive(this, src, dst):
		srcINode = this.store.RetrieveINode(src)
		if (srcINode is None):
			raise InconsistentNamespace(src)

		paths = this.store.ListDeepSubPaths(src)

		this.store.StoreINode(dst, srcINode)

		for oldPath in sorted(paths):
			if (not oldPath.IsUnder(src)):
				raise InconsistentNamespace(oldPath, f"Listed as a descendant of {src} but isn't one")

			inode = this.store.RetrieveINode(oldPath)
			if (inode is None):
				raise InconsistentNamespace(oldPath)

			newPath = oldPath.Relocate(src, dst)
			this.store.StoreINode(newPath, inode)
			this.store.DeleteINode(oldPath)

		if (src not in paths):
			this.store.DeleteINode(src)
