import stat

from ..Upath import UniversalPath


# Read-only view of one namespace entry, as returned by GetFileStatus and ListStatus.
class FileStatus(object):
	def __init__(this, path, inode):
		this.path = UniversalPath(path)
		this.isDir = inode.IsDirectory()
		this.length = inode.GetLength()
		this.blockSize = inode.blockSize
		this.owner = inode.user
		this.group = inode.group
		this.permission = inode.permission

	def __repr__(this):
		kind = "dir" if this.isDir else "file"
		return f"<FileStatus {this.path} {kind} {this.length}B {this.owner}:{this.group} {oct(this.permission)}>"

	def IsDirectory(this):
		return this.isDir

	def IsFile(this):
		return not this.isDir

	def GetPath(this):
		return this.path

	def GetLength(this):
		return this.length

	# RETURNS an ls-style mode string, e.g. "drwxr-xr-x".
	def GetModeString(this):
		kind = stat.S_IFDIR if this.isDir else stat.S_IFREG
		return stat.filemode(kind | this.permission)
