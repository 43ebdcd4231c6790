"""Serve a local directory over HTTP for the duration of one check."""

import logging
import socket
import socketserver
import threading
from contextlib import suppress
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import urlsplit

from ..config.normalize_base_url import normalize_base_url
from .ServerBindError import ServerBindError

logger = logging.getLogger(__name__)


class _StaticRequestHandler(SimpleHTTPRequestHandler):
    """Read-only file handler that only answers below the server's base url."""

    server: "_StaticHTTPServer"

    def _base_prefix(self) -> str:
        return self.server.base_url.rstrip("/")

    def send_head(self):
        prefix = self._base_prefix()
        path = urlsplit(self.path).path
        if prefix and path != prefix and not path.startswith(prefix + "/"):
            self.send_error(HTTPStatus.NOT_FOUND, "File not found")
            return None
        return super().send_head()

    def translate_path(self, path: str) -> str:
        prefix = self._base_prefix()
        if prefix and path.startswith(prefix):
            path = path[len(prefix):] or "/"
        return super().translate_path(path)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


class _StaticHTTPServer(ThreadingHTTPServer):
    def __init__(self, address: tuple[str, int], handler, base_url: str, address_family: int):
        self.base_url = base_url
        self.address_family = address_family
        super().__init__(address, handler)

    def server_bind(self) -> None:
        # dual-stack: IPv4 clients are accepted on the IPv6 socket
        if self.address_family == socket.AF_INET6:
            with suppress(OSError, AttributeError):
                self.socket.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        # skip the reverse DNS lookup of HTTPServer.server_bind
        socketserver.TCPServer.server_bind(self)
        self.server_name = "localhost"
        self.server_port = self.server_address[1]


class StaticServer:
    """Static file server on an ephemeral port.

    Example:
        >>> with StaticServer("./site", "/docs/") as server:
        ...     server.url
        'http://localhost:53127/docs/'
    """

    def __init__(self, directory: str | Path, base_url: str = "/", host: str | None = None, port: int = 0):
        self.directory = Path(directory)
        self.base_url = normalize_base_url(base_url)
        if host is None:
            host = "::" if socket.has_dualstack_ipv6() else ""
        self.host = host
        self.requested_port = port
        self._server: _StaticHTTPServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        if self._server is None:
            raise RuntimeError("Static server is not running")
        return self._server.server_address[1]

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}{self.base_url}"

    def is_running(self) -> bool:
        thread = self._thread
        return bool(thread and thread.is_alive())

    def start(self) -> int:
        """Bind, start serving on a background thread, and return the bound port.

        Raises:
            ServerBindError: If the address cannot be bound
        """
        if self._server is not None:
            return self.port

        logger.debug("starting server on path: %s", self.directory)
        if self.base_url != "/":
            logger.debug("using base url: %s", self.base_url)

        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        handler = partial(_StaticRequestHandler, directory=str(self.directory))
        try:
            server = _StaticHTTPServer((self.host, self.requested_port), handler, self.base_url, family)
        except OSError as exc:
            raise ServerBindError(self.host, self.requested_port, str(exc)) from exc

        self._server = server
        self._thread = threading.Thread(target=server.serve_forever, name="wlc-static-server", daemon=True)
        self._thread.start()
        logger.debug("server listening on port %s", self.port)
        return self.port

    def stop(self, timeout: float = 5.0) -> None:
        """Stop serving and release the port. Safe to call more than once."""
        server = self._server
        if server is None:
            return
        logger.debug("closing server")
        server.shutdown()
        server.server_close()
        if self._thread is not None:
            self._thread.join(timeout)
        self._server = None
        self._thread = None

    def __enter__(self) -> "StaticServer":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
