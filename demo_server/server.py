"""Server lifecycle: bind the listener, run uvicorn on it, shut down gracefully.

Uvicorn normally binds its own socket and calls ``sys.exit(1)`` when the
port is taken. Binding here first lets us report that case ourselves and
hand the already-bound socket to uvicorn.
"""

import errno
import logging
import socket
from pathlib import Path
from typing import Callable, Optional

import uvicorn

logger = logging.getLogger(__name__)

ErrorHook = Callable[[OSError], None]


class _UvicornServer(uvicorn.Server):
    """uvicorn.Server that logs the start and end of shutdown."""

    def handle_exit(self, sig, frame) -> None:
        if not self.should_exit:
            logger.info("Shutting down server...")
        super().handle_exit(sig, frame)

    async def shutdown(self, sockets=None) -> None:
        await super().shutdown(sockets=sockets)
        logger.info("Server stopped successfully")


class StaticServer:
    """Owns the listening socket and the uvicorn server for one process."""

    def __init__(
        self,
        app,
        host: str = "0.0.0.0",
        port: int = 8080,
        root: Optional[Path] = None,
        site_name: str = "Rapid Mixer Demo",
        on_error: Optional[ErrorHook] = None,
        log_level: str = "info",
    ):
        self.host = host
        self.requested_port = port
        self.root = root
        self.site_name = site_name
        self.on_error = on_error
        self._socket: Optional[socket.socket] = None
        self._server = _UvicornServer(
            uvicorn.Config(app, host=host, port=port, log_level=log_level.lower())
        )

    @property
    def port(self) -> int:
        """The bound port (differs from the requested one when binding port 0)."""
        if self._socket is not None:
            return self._socket.getsockname()[1]
        return self.requested_port

    @property
    def started(self) -> bool:
        return self._server.started

    def bind(self) -> socket.socket:
        # Address family follows the host, so "::" and "::1" bind IPv6
        family, socktype, proto, _, sockaddr = socket.getaddrinfo(
            self.host or None,
            self.requested_port,
            type=socket.SOCK_STREAM,
            flags=socket.AI_PASSIVE,
        )[0]
        sock = socket.socket(family, socktype, proto)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(sockaddr)
        except OSError:
            sock.close()
            raise
        sock.set_inheritable(True)
        self._socket = sock
        return sock

    def start(self) -> int:
        """
        Bind and serve until shutdown.

        Returns the process exit status: 0 after a clean or interrupt-driven
        shutdown, 1 if the listener could not be bound.
        """
        try:
            sock = self.bind()
        except OSError as e:
            self._report_bind_error(e)
            return 1

        self._log_banner()
        try:
            self._server.run(sockets=[sock])
        except KeyboardInterrupt:
            # uvicorn re-raises the captured SIGINT once shutdown has finished
            pass
        finally:
            sock.close()
            self._socket = None
        return 0

    def stop(self) -> None:
        """Ask the server to stop accepting connections and finish in-flight requests."""
        if not self._server.should_exit:
            logger.info("Shutting down server...")
        self._server.should_exit = True

    def _report_bind_error(self, exc: OSError) -> None:
        if exc.errno == errno.EADDRINUSE:
            logger.error(f"Port {self.requested_port} is already in use. Please try a different port.")
        else:
            logger.error(f"Server error: {exc}")
        if self.on_error is not None:
            self.on_error(exc)

    def _log_banner(self) -> None:
        logger.info(f"{self.site_name} Web Server")
        logger.info(f"Server running at: http://localhost:{self.port}")
        if self.root is not None:
            logger.info(f"Serving files from: {self.root}")
        logger.info("Press Ctrl+C to stop the server")
