"""
src/Commands.py

Purpose:
The command line operations of stratafs. Each command is a plain function of (fs, out, **args) so it can be driven by the STRATAFS executor or called directly.

Place in Architecture:
Sits between the STRATAFS executor and a FilesystemProvider (normally StrataFS). Every command is wrapped with CommandMethod and RETURNS an exit code.

Interface:

	ls, stat, mkdir, rm, mv, put, get, cat
	COMMANDS: name -> command.

TODOs/FIXMEs:
None.
"""

import errno
import shutil

from libstratafs import PathNotFound

from .CommandMethod import CommandMethod


def FormatStatus(status):
	return f"{status.GetModeString()} {status.owner} {status.group} {status.GetLength():>12} {status.GetPath()}\n"


@CommandMethod
def ls(fs, out, path=".", **kw):
	statuses = fs.ListStatus(path)
	if (statuses is None):
		raise PathNotFound(fs.MakeAbsolute(path))
	for status in statuses:
		out.write(FormatStatus(status))


@CommandMethod
def stat(fs, out, path=".", **kw):
	out.write(FormatStatus(fs.GetFileStatus(path)))


@CommandMethod
def mkdir(fs, out, path=".", **kw):
	if (not fs.MakeDirectories(path)):
		raise IOError(errno.EIO, f"Mkdirs failed to create {path}")


@CommandMethod
def rm(fs, out, path=".", recursive=False, **kw):
	if (not fs.Exists(path)):
		raise PathNotFound(fs.MakeAbsolute(path))
	if (not fs.Delete(path, recursive)):
		raise IOError(errno.EIO, f"Could not completely delete {path}")


@CommandMethod
def mv(fs, out, path=".", dst=None, **kw):
	if (dst is None):
		raise IOError(errno.EINVAL, "mv requires a destination")
	if (not fs.Rename(path, dst)):
		raise IOError(errno.EINVAL, f"Can't rename {path} to {dst}")


# Copy a local file (input) into the namespace.
@CommandMethod
def put(fs, out, path=".", input=None, overwrite=False, **kw):
	if (input is None):
		raise IOError(errno.EINVAL, "put requires an input file")
	with open(input, 'rb') as source:
		with fs.Create(path, overwrite=overwrite) as target:
			shutil.copyfileobj(source, target)


# Copy a file out of the namespace to a local file (output).
@CommandMethod
def get(fs, out, path=".", output=None, **kw):
	if (output is None):
		raise IOError(errno.EINVAL, "get requires an output file")
	with fs.Open(path) as source:
		with open(output, 'wb') as target:
			shutil.copyfileobj(source, target)


@CommandMethod
def cat(fs, out, path=".", **kw):
	with fs.Open(path) as source:
		binary = getattr(out, 'buffer', None)
		if (binary is not None):
			shutil.copyfileobj(source, binary)
			binary.flush()
		else:
			out.write(source.read().decode('utf-8', errors='replace'))


COMMANDS = {
	'ls': ls,
	'stat': stat,
	'mkdir': mkdir,
	'rm': rm,
	'mv': mv,
	'put': put,
	'get': get,
	'cat': cat,
}
