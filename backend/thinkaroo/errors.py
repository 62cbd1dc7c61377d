from __future__ import annotations


class ThinkarooError(Exception):
	"""Base class for errors raised by the server itself."""


class StartupError(ThinkarooError):
	"""The listener could not be bound; the process cannot serve anything."""

	def __init__(self, host: str, port: int, cause: OSError) -> None:
		self.host = host
		self.port = port
		self.cause = cause
		super().__init__(f"cannot bind {host}:{port}: {cause}")
