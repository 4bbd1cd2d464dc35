"""A non-blocking UDP socket bound to a local address."""

from __future__ import annotations

import abc
import socket

from .tcp_socket import SocketNotCreatedError, _os_errors

DEFAULT_SYSTEM_BUFFER_SIZE = 8192


class UdpSocket(abc.ABC):
    """A datagram socket; subclasses react to readiness through ``on_*``.

    ``send_buffer_size_hint`` and ``receive_buffer_size_hint`` are applied to
    the kernel buffers when the socket is created.
    """

    def __init__(
        self,
        send_buffer_size: int = DEFAULT_SYSTEM_BUFFER_SIZE,
        receive_buffer_size: int = DEFAULT_SYSTEM_BUFFER_SIZE,
    ) -> None:
        self._sock: socket.socket | None = None
        self.send_buffer_size_hint = send_buffer_size
        self.receive_buffer_size_hint = receive_buffer_size
        self.error_code = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _require(self) -> socket.socket:
        if self._sock is None:
            raise SocketNotCreatedError()
        return self._sock

    def create(self, host: str, port: int) -> None:
        """Create a non-blocking datagram socket bound to ``host``:``port``.

        On failure the socket is closed again and :class:`SocketError` raised.
        """
        self.close()
        with _os_errors(self):
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            try:
                sock.setblocking(False)
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_SNDBUF, self.send_buffer_size_hint)
                sock.setsockopt(
                    socket.SOL_SOCKET, socket.SO_RCVBUF, self.receive_buffer_size_hint
                )
                sock.bind((host, port & 0xFFFF))
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except BaseException:
                sock.close()
                raise
        self._sock = sock

    def close(self) -> None:
        """Close and forget the underlying socket; closing twice is harmless."""
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None

    def connect(self, host: str, port: int) -> None:
        """Set the default peer for datagrams."""
        sock = self._require()
        with _os_errors(self):
            sock.connect((host, port))

    def bind(self, host: str, port: int) -> None:
        """Bind the socket to a local address."""
        sock = self._require()
        with _os_errors(self):
            sock.bind((host, port))

    def send_to(self, data, address) -> int:
        """Send one datagram to ``address`` (a ``(host, port)`` pair)."""
        sock = self._require()
        with _os_errors(self):
            return sock.sendto(bytes(data), tuple(address))

    def recv_from(self, size: int):
        """Receive one datagram; return ``(data, (host, port))``."""
        sock = self._require()
        with _os_errors(self):
            return sock.recvfrom(size)

    def send_buffer_size(self) -> int:
        """Return the kernel send buffer size."""
        sock = self._require()
        with _os_errors(self):
            return sock.getsockopt(socket.SOL_SOCKET, socket.SO_SNDBUF)

    def receive_buffer_size(self) -> int:
        """Return the kernel receive buffer size."""
        sock = self._require()
        with _os_errors(self):
            return sock.getsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF)

    def local_address(self):
        """Return the bound ``(host, port)``, or None without a socket."""
        if self._sock is None:
            return None
        try:
            return self._sock.getsockname()
        except OSError:
            return None

    def fileno(self) -> int:
        """Return the socket's descriptor, or -1 without a socket."""
        return -1 if self._sock is None else self._sock.fileno()

    @abc.abstractmethod
    def on_recv(self, error_code: int) -> None:
        """A datagram can be read."""

    @abc.abstractmethod
    def on_send(self, error_code: int) -> None:
        """A datagram can be written."""