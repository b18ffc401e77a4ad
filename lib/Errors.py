"""
lib/Errors.py

Purpose:
Typed namespace failures. Each one is an OSError carrying the POSIX errno that a mounted filesystem would report for it.

Place in Architecture:
Raised by the StrataFS facade and the content streams; translated back to errno values by the command layer.

Interface:

	PathNotFound, PathAlreadyExists, TypeMismatch, DirectoryNotEmpty, Unsupported, InconsistentNamespace.

TODOs/FIXMEs:
None.
"""

import errno


class PathNotFound(FileNotFoundError):
	def __init__(this, path, message="No such file or directory"):
		super().__init__(errno.ENOENT, message, str(path))


class PathAlreadyExists(FileExistsError):
	def __init__(this, path, message="File already exists"):
		super().__init__(errno.EEXIST, message, str(path))


# A directory used where a file is required (EISDIR), or a file found where a directory is required (ENOTDIR).
class TypeMismatch(OSError):
	def __init__(this, path, code, message):
		super().__init__(code, message, str(path))

	@classmethod
	def IsADirectory(cls, path):
		return cls(path, errno.EISDIR, "Path is a directory")

	@classmethod
	def NotADirectory(cls, path):
		return cls(path, errno.ENOTDIR, "Can't make directory since path is a file")


class DirectoryNotEmpty(OSError):
	def __init__(this, path):
		super().__init__(errno.ENOTEMPTY, "Directory is not empty", str(path))


class Unsupported(OSError):
	def __init__(this, operation):
		super().__init__(errno.ENOTSUP, f"{operation} is not supported")


# A record enumerated a moment ago is gone (concurrent mutation or store damage).
class InconsistentNamespace(OSError):
	def __init__(this, path, message="Record vanished while in use"):
		super().__init__(errno.EIO, message, str(path))
