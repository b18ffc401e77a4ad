import sys
import errno
import logging


# Turn a command into something that RETURNS a process exit code.
# Namespace errors carry their errno; anything else is reported as EIO.
def CommandMethod(func):
	def wrapper(*a, **kw):
		try:
			ret = func(*a, **kw)
			return 0 if ret is None else ret
		except (IOError, OSError) as e:
			if (isinstance(e, FileNotFoundError)):
				logging.debug("Failed operation", exc_info=True)
			else:
				logging.info("Failed operation", exc_info=True)
			print(f"error: {e}", file=sys.stderr)

			if hasattr(e, 'errno') and isinstance(e.errno, int):
				# Standard operation
				return e.errno
			return errno.EACCES

		except Exception:
			logging.warning("Unexpected exception", exc_info=True)
			return errno.EIO

	wrapper.__name__ = func.__name__
	wrapper.__doc__ = func.__doc__
	return wrapper
