from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# uvicorn installs its own handlers on these when given a log config; we pass
# log_config=None and route them through the root handler instead.
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(level: str = "info") -> None:
	numeric = logging.getLevelName(level.upper())
	if not isinstance(numeric, int):
		numeric = logging.INFO

	handler = logging.StreamHandler(sys.stderr)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))

	root = logging.getLogger()
	root.handlers.clear()
	root.addHandler(handler)
	root.setLevel(numeric)

	for name in _UVICORN_LOGGERS:
		uv = logging.getLogger(name)
		uv.handlers.clear()
		uv.propagate = True
		uv.setLevel(numeric)
