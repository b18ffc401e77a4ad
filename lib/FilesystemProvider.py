"""
lib/FilesystemProvider.py

Purpose:
The abstract surface of a hierarchical filesystem: explicit lifecycle plus the file and directory operations callers rely on.

Place in Architecture:
StrataFS implements it. The command layer (stratafs) depends only on this surface.

Interface:

	Initialize(uri, config), Shutdown()
	Create, Open, Append, Delete, Rename, MakeDirectories, ListStatus, GetFileStatus, IsFile, IsDirectory, Exists
	GetWorkingDirectory, SetWorkingDirectory, MakeAbsolute

TODOs/FIXMEs:
None.
"""

from abc import ABC, abstractmethod


class FilesystemProvider(ABC):

	@abstractmethod
	def Initialize(this, uri, config):
		pass

	@abstractmethod
	def Shutdown(this):
		pass

	@abstractmethod
	def Create(this, path, permission, overwrite, bufferSize, blockSize):
		pass

	@abstractmethod
	def Open(this, path, bufferSize):
		pass

	@abstractmethod
	def Append(this, path, bufferSize):
		pass

	@abstractmethod
	def Delete(this, path, recursive=True):
		pass

	@abstractmethod
	def Rename(this, src, dst):
		pass

	@abstractmethod
	def MakeDirectories(this, path, permission):
		pass

	@abstractmethod
	def ListStatus(this, path):
		pass

	@abstractmethod
	def GetFileStatus(this, path):
		pass

	@abstractmethod
	def IsFile(this, path):
		pass

	@abstractmethod
	def IsDirectory(this, path):
		pass

	@abstractmethod
	def Exists(this, path):
		pass

	@abstractmethod
	def GetWorkingDirectory(this):
		pass

	@abstractmethod
	def SetWorkingDirectory(this, path):
		pass

	# RETURNS path resolved against the working directory.
	@abstractmethod
	def MakeAbsolute(this, path):
		pass
