"""Raised when the static file server cannot listen."""

from .LinkCheckError import LinkCheckError


class ServerBindError(LinkCheckError):
    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        super().__init__(f"Failed to start static server on {host or '*'}:{port}: {reason}")
