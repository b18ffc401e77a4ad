import logging


def parse_log_level(log_level):
	try:
		return {'error': logging.ERROR,
				'warning': logging.WARNING,
				'info': logging.INFO,
				'debug': logging.DEBUG}[str(log_level).lower()]
	except KeyError:
		raise ValueError("invalid log level specifier")


def parse_bool(value):
	if (isinstance(value, bool)):
		return value
	if (str(value).lower() in ('1', 'true', 'yes', 'on')):
		return True
	if (str(value).lower() in ('0', 'false', 'no', 'off', 'none', '')):
		return False
	raise ValueError("invalid boolean specifier")


# Console logging for the command line tool.
def SetupLogging(log_level):
	logger = logging.getLogger('')
	handler = logging.StreamHandler()
	fmt = logging.Formatter(fmt="%(asctime)s stratafs[%(process)d]: %(levelname)s: %(message)s")
	handler.setFormatter(fmt)
	logger.addHandler(handler)
	logger.setLevel(log_level)
	return handler
