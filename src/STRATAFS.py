import eons
import sys
import logging

from libstratafs import StrataFS
from libstratafs.Utils import parse_size

from .Utils import *
from .Commands import COMMANDS

# STRATAFS runs one namespace command against a store.
# Name is caps to make it executable per eons weirdness.
#
# e.g. stratafs --store sqlite:///namespace.db --command put --path /data/report.csv --input report.csv
class STRATAFS(eons.Executor):
	def __init__(this, name="StrataFS"):
		super(STRATAFS, this).__init__(name)

		this.arg.kw.required.append("store") # Store uri, e.g. sqlite:///namespace.db or redis://localhost:6379/0
		this.arg.kw.required.append("command")

		this.arg.kw.optional["path"] = "."
		this.arg.kw.optional["dst"] = None
		this.arg.kw.optional["input"] = None
		this.arg.kw.optional["output"] = None
		this.arg.kw.optional["recursive"] = False
		this.arg.kw.optional["overwrite"] = False
		this.arg.kw.optional["working_dir"] = None
		this.arg.kw.optional["subblock_size"] = "256KiB"
		this.arg.kw.optional["log_level"] = "warning"

		this.fs = None
		this.exitCode = 0

	# ValidateArgs is automatically called before Function, per eons.Functor.
	def ValidateArgs(this):
		super().ValidateArgs()

		if (this.command not in COMMANDS):
			raise eons.MissingArgumentError(f"error: --command {this.command} is not one of {', '.join(COMMANDS)}")

		try:
			this.subblock_size = parse_size(str(this.subblock_size))
		except ValueError:
			raise eons.MissingArgumentError(f"error: --subblock-size {this.subblock_size} is not a valid size specifier")

		try:
			this.log_level = parse_log_level(this.log_level)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --log-level {this.log_level} is not a valid log level")

		try:
			this.recursive = parse_bool(this.recursive)
			this.overwrite = parse_bool(this.overwrite)
		except ValueError:
			raise eons.MissingArgumentError("error: --recursive and --overwrite take true or false")

	def BeforeFunction(this):
		SetupLogging(this.log_level)

		this.fs = StrataFS()
		this.fs.Initialize(this.store, {'subblock_size': this.subblock_size})
		if (this.working_dir):
			this.fs.SetWorkingDirectory(this.working_dir)

	def Function(this):
		try:
			this.exitCode = COMMANDS[this.command](
				this.fs,
				sys.stdout,
				path=this.path,
				dst=this.dst,
				input=this.input,
				output=this.output,
				recursive=this.recursive,
				overwrite=this.overwrite
			)
		finally:
			this.fs.Shutdown()

		if (this.exitCode):
			logging.debug(f"{this.command} exited with {this.exitCode}")
		return this.exitCode


def main():
	executor = STRATAFS()
	executor()
	sys.exit(executor.exitCode)
