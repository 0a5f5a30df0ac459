import logging

_DEFAULT_FORMAT: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DATEFMT: str = "%Y-%m-%d %H:%M:%S"
_ROOT: str = "poly_regression"


def get_logger(name: str = _ROOT) -> logging.Logger:
	# every module logger hangs below the package logger, which owns the handler
	root: logging.Logger = logging.getLogger(_ROOT)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DATEFMT))
		root.addHandler(handler)
		root.setLevel(logging.WARNING)
		root.propagate = False

	return logging.getLogger(name)


def set_verbosity(verbosity: int) -> None:
	level: int = logging.WARNING
	if verbosity >= 5:
		level = logging.DEBUG
	elif verbosity >= 3:
		level = logging.INFO
	get_logger().setLevel(level)
