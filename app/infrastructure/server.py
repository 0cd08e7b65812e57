"""TCP listener and uvicorn serve loop for the greeting service."""

from __future__ import annotations

import socket
from collections.abc import Callable
from typing import Final

import uvicorn
from fastapi import FastAPI

from app.config import DEFAULT_HOST, IPV4_ANY_HOST, Settings
from app.infrastructure.log import get_logger

# The missing "//" is part of the established log format; scrapers match it as is.
STARTUP_MESSAGE: Final[str] = "App listning at http:localhost:{port}"


class ServiceError(RuntimeError):
    """Base class for errors raised by the greeting service."""


class StartupBindError(ServiceError):
    """Error raised when the listener cannot acquire its address."""

    def __init__(self, host: str, port: int, reason: OSError) -> None:
        super().__init__(f"Could not bind listener on {host}:{port}: {reason}")
        self.host = host
        self.port = port


def format_startup_message(port: int) -> str:
    """Return the line announcing that the listener is ready."""

    return STARTUP_MESSAGE.format(port=port)


def _open_socket(host: str) -> tuple[socket.socket, str]:
    """Return an unbound TCP socket for ``host`` and the address to bind it to.

    The ``"::"`` wildcard gets a dual-stack socket that also accepts IPv4
    clients. Hosts without IPv6 fall back to the IPv4 wildcard.
    """

    if host == DEFAULT_HOST:
        if not socket.has_ipv6:
            return socket.socket(socket.AF_INET, socket.SOCK_STREAM), IPV4_ANY_HOST
        try:
            sock = socket.socket(socket.AF_INET6, socket.SOCK_STREAM)
        except OSError:
            return socket.socket(socket.AF_INET, socket.SOCK_STREAM), IPV4_ANY_HOST
        try:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        except OSError:
            sock.close()
            return socket.socket(socket.AF_INET, socket.SOCK_STREAM), IPV4_ANY_HOST
        return sock, host

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.socket(family, socket.SOCK_STREAM), host


class _AnnouncingServer(uvicorn.Server):
    """uvicorn server that reports once it has finished starting up."""

    def __init__(self, config: uvicorn.Config, on_started: Callable[[], None]) -> None:
        super().__init__(config)
        self._on_started = on_started

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            self._on_started()


class GreetingServer:
    """Owns the listening socket and the uvicorn server bound to it.

    The server moves from *not started* to *listening* the first time
    :meth:`bind` succeeds. There is no way back short of ending the process.
    """

    def __init__(self, app: FastAPI, settings: Settings) -> None:
        self.app = app
        self.settings = settings
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None

    @property
    def listening(self) -> bool:
        return self._socket is not None

    @property
    def port(self) -> int | None:
        """Port actually bound, which differs from the setting when it is ``0``."""

        if self._socket is None:
            return None
        return self._socket.getsockname()[1]

    @property
    def server(self) -> uvicorn.Server:
        if self._server is None:
            config = uvicorn.Config(
                self.app,
                log_level=self.settings.log_level,
                access_log=self.settings.access_log,
            )
            self._server = _AnnouncingServer(config, self._announce)
        return self._server

    def _announce(self) -> None:
        get_logger().info(format_startup_message(self.port))

    def bind(self) -> socket.socket:
        """Open the passive socket on the configured address.

        Raises :class:`StartupBindError` when the address is already in use or
        the process lacks permission to bind it. No retry is attempted.
        Nothing is logged here; the ready line is written by
        :meth:`serve_forever` once uvicorn accepts connections.
        """

        if self._socket is not None:
            return self._socket

        sock, host = _open_socket(self.settings.host)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, self.settings.port))
            sock.listen(socket.SOMAXCONN)
        except OSError as exc:
            sock.close()
            raise StartupBindError(host, self.settings.port, exc) from exc

        self._socket = sock
        return sock

    def serve_forever(self) -> None:
        """Bind if needed and serve requests until the process ends.

        The startup line goes to stdout only after uvicorn finished its own
        startup, so a failing application lifespan never reports readiness.
        """

        sock = self.bind()
        self.server.run(sockets=[sock])


__all__ = [
    "GreetingServer",
    "STARTUP_MESSAGE",
    "ServiceError",
    "StartupBindError",
    "format_startup_message",
]
