from __future__ import annotations
import argparse
import logging
import signal
import socket
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from .errors import StartupError
from .logging_config import configure_logging
from .main import create_app
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 2048


def bind_listener(host: str, port: int) -> socket.socket:
	"""Bind and listen on ``host:port``, raising StartupError on any OS failure.

	Binding happens here rather than inside uvicorn so a busy port or bad
	address surfaces as an exception we can report before serving starts.
	"""
	try:
		infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE)
	except OSError as e:
		raise StartupError(host, port, e) from e
	family, sock_type, proto, _, address = infos[0]
	sock = socket.socket(family, sock_type, proto)
	try:
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
		if family == socket.AF_INET6:
			sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
		sock.bind(address)
		sock.listen(LISTEN_BACKLOG)
	except OSError as e:
		sock.close()
		raise StartupError(host, port, e) from e
	sock.set_inheritable(True)
	return sock


class Server(uvicorn.Server):
	def handle_exit(self, sig, frame) -> None:
		# uvicorn records the signal and re-raises it once serving ends, which
		# kills the process; a termination signal here means a clean stop.
		if self.should_exit and sig == signal.SIGINT:
			self.force_exit = True
		else:
			self.should_exit = True


def build_server(settings: Settings) -> Server:
	# log_config=None keeps uvicorn from replacing our handlers
	config = uvicorn.Config(create_app(settings), log_config=None, lifespan="on")
	return Server(config)


def serve(settings: Optional[Settings] = None) -> None:
	"""Run until SIGINT/SIGTERM. uvicorn stops accepting, drains in-flight requests, then returns."""
	settings = settings or get_settings()
	configure_logging(settings.log_level)
	sock = bind_listener(settings.host, settings.port)
	try:
		server = build_server(settings)
		host, port = sock.getsockname()[:2]
		logger.info("Server listening on http://%s:%d", host, port)
		server.run(sockets=[sock])
	finally:
		sock.close()
	logger.info("Server stopped")


def _parser() -> argparse.ArgumentParser:
	return argparse.ArgumentParser(
		prog="thinkaroo-server",
		description="Run the Thinkaroo server. Configure with HOST, PORT, LOG_LEVEL, "
		"STATIC_DIR and PROMPTS_DIR (environment or .env).",
	)


def main(argv: Optional[List[str]] = None) -> int:
	_parser().parse_args(argv)
	try:
		settings = get_settings()
	except ValidationError as e:
		configure_logging()
		logger.error("Startup failed: invalid configuration: %s", e)
		return 1
	try:
		serve(settings)
	except StartupError as e:
		logger.error("Startup failed: %s", e)
		return 1
	return 0
