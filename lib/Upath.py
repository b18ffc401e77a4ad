"""
lib/Upath.py

Purpose:
Implements a universal path class that normalizes namespace paths (upaths) into a sequence of segments.

Place in Architecture:
Used throughout the code so that paths are compared, sorted, split and relocated segment by segment instead of as raw strings.

Interface:

	UniversalPath(path=""): Constructs a path from a string or another UniversalPath.
	__str__(): Returns the normalized path, "/" rooted when absolute.
	IsAbsolute(), GetParent(), GetName(), Join(*parts).
	IsUnder(ancestor): Segment-wise prefix test.
	Relocate(src, dst): Swaps the src prefix for dst, keeping the suffix segments.
	normalize(path, base): Resolves a possibly-relative path against a base.

TODOs/FIXMEs:
None noted.
"""

import posixpath


class UniversalPath:
	def __init__(this, path=""):
		if (isinstance(path, UniversalPath)):
			this.absolute = path.absolute
			this.segments = path.segments
		elif (isinstance(path, str)):
			this.FromPath(path)
		else:
			raise TypeError(f"Cannot build a path from {type(path).__name__}")

	def __str__(this):
		joined = "/".join(this.segments)
		if (this.absolute):
			return "/" + joined
		return joined

	def __repr__(this):
		return f"UniversalPath({str(this)!r})"

	def __eq__(this, other):
		if (not isinstance(other, UniversalPath)):
			return NotImplemented
		return this.absolute == other.absolute and this.segments == other.segments

	def __hash__(this):
		return hash((this.absolute, this.segments))

	def __lt__(this, other):
		return (not this.absolute, this.segments) < (not other.absolute, other.segments)

	def __len__(this):
		return len(this.segments)

	def FromPath(this, path):
		this.absolute = path.startswith("/")
		if (not path):
			this.segments = ()
			return

		path = posixpath.normpath(path)

		# normpath keeps "//" as a distinct root; we don't.
		this.segments = tuple(s for s in path.split("/") if s and s != ".")

		# ".." can't climb above the root.
		if (this.absolute):
			while (this.segments and this.segments[0] == ".."):
				this.segments = this.segments[1:]

	@classmethod
	def FromSegments(cls, segments, absolute=True):
		ret = cls.__new__(cls)
		ret.absolute = absolute
		ret.segments = tuple(segments)
		return ret

	def IsAbsolute(this):
		return this.absolute

	def IsRoot(this):
		return this.absolute and not this.segments

	# RETURNS the path with the last segment removed, or None for the root.
	def GetParent(this):
		if (not this.segments):
			return None
		return UniversalPath.FromSegments(this.segments[:-1], this.absolute)

	def GetName(this):
		if (not this.segments):
			return ""
		return this.segments[-1]

	def Join(this, *parts):
		ret = str(this)
		for part in parts:
			ret = posixpath.join(ret, str(part).lstrip("/"))
		return UniversalPath(ret)

	# A path is under itself.
	def IsUnder(this, ancestor):
		ancestor = UniversalPath(ancestor)
		if (this.absolute != ancestor.absolute):
			return False
		size = len(ancestor.segments)
		return this.segments[:size] == ancestor.segments

	def Relocate(this, src, dst):
		src = UniversalPath(src)
		dst = UniversalPath(dst)
		if (not this.IsUnder(src)):
			raise ValueError(f"{this} is not under {src}")
		suffix = this.segments[len(src.segments):]
		return UniversalPath.FromSegments(dst.segments + suffix, dst.absolute)


def normalize(path, base):
	path = UniversalPath(path)
	if (path.IsAbsolute()):
		return path
	return UniversalPath(base).Join(path)
