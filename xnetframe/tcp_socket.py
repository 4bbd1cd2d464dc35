"""A TCP socket with error-raising operations and event callbacks."""

from __future__ import annotations

import abc
import contextlib
import errno
import select
import socket
import struct

try:
    import fcntl
    import termios
except ImportError:  # pragma: no cover - platforms without ioctl
    fcntl = None
    termios = None


class SocketError(OSError):
    """A socket operation failed; ``errno`` holds the system error code."""


class SocketNotCreatedError(SocketError):
    """The operation needs a socket, but none has been created."""

    def __init__(self, message: str = "socket not created") -> None:
        super().__init__(message)


@contextlib.contextmanager
def _os_errors(owner):
    """Turn ``OSError`` into :class:`SocketError` and record the code on ``owner``."""
    try:
        yield
    except SocketError:
        raise
    except OSError as exc:
        code = exc.errno if exc.errno is not None else errno.EIO
        owner.error_code = code
        raise SocketError(code, exc.strerror or str(exc)) from exc


def _pending_bytes(sock: socket.socket) -> int:
    """Return how many bytes can be read from ``sock`` without blocking."""
    if fcntl is not None and termios is not None:
        raw = fcntl.ioctl(sock.fileno(), termios.FIONREAD, b"\0\0\0\0")
        return struct.unpack("i", raw)[0]
    readable, _, _ = select.select([sock], [], [], 0)
    if not readable:
        return 0
    return len(sock.recv(65536, socket.MSG_PEEK))


class TcpSocket(abc.ABC):
    """A stream socket; subclasses react to network events through ``on_*``."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self.error_code = 0
        self.sent_bytes = 0
        self.received_bytes = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _require(self) -> socket.socket:
        if self._sock is None:
            raise SocketNotCreatedError()
        return self._sock

    def create(self) -> None:
        """Create the underlying stream socket, replacing any earlier one."""
        self.close()
        with _os_errors(self):
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)

    def close(self) -> None:
        """Close and forget the underlying socket; closing twice is harmless."""
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None

    def connect(self, host: str, port: int) -> None:
        """Connect to ``host``:``port``."""
        sock = self._require()
        with _os_errors(self):
            sock.connect((host, port))

    def bind(self, host: str, port: int) -> None:
        """Bind the socket to a local address."""
        sock = self._require()
        with _os_errors(self):
            sock.bind((host, port))

    def set_option(self, name: int, value) -> None:
        """Set a socket-level option; booleans are stored as 1 or 0."""
        sock = self._require()
        with _os_errors(self):
            sock.setsockopt(socket.SOL_SOCKET, name, int(value))

    def send(self, data) -> int:
        """Send ``data`` and return how many bytes were sent."""
        sock = self._require()
        with _os_errors(self):
            sent = sock.send(bytes(data))
        self.sent_bytes += sent
        return sent

    def recv(self, size: int) -> bytes:
        """Receive up to ``size`` bytes; an empty result means the peer closed."""
        sock = self._require()
        with _os_errors(self):
            data = sock.recv(size)
        self.received_bytes += len(data)
        return data

    def available(self) -> int:
        """Return the number of bytes waiting to be read."""
        sock = self._require()
        with _os_errors(self):
            return _pending_bytes(sock)

    def set_non_blocking(self, enabled: bool) -> None:
        """Switch the socket between non-blocking and blocking mode."""
        sock = self._require()
        with _os_errors(self):
            sock.setblocking(not enabled)

    def set_keep_alive(self, keep_alive: int, keep_time: int, keep_interval: int) -> None:
        """Turn TCP keep-alive on or off; positive times set idle and probe intervals."""
        sock = self._require()
        with _os_errors(self):
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1 if keep_alive else 0)
            if not keep_alive:
                return
            if keep_time > 0 and hasattr(socket, "TCP_KEEPIDLE"):
                sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, keep_time)
            if keep_interval > 0 and hasattr(socket, "TCP_KEEPINTVL"):
                sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, keep_interval)

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

    def tcp_nodelay(self) -> bool:
        """Tell whether Nagle's algorithm is disabled."""
        sock = self._require()
        with _os_errors(self):
            return sock.getsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY) != 0

    def _peer(self):
        if self._sock is None:
            return None
        try:
            return self._sock.getpeername()
        except OSError:
            return None

    def _local(self):
        if self._sock is None:
            return None
        try:
            return self._sock.getsockname()
        except OSError:
            return None

    def is_connected(self) -> bool:
        """Tell whether the socket has a connected peer."""
        return self._peer() is not None

    def port(self) -> int:
        """Return the remote port, or 0 when not connected."""
        peer = self._peer()
        return peer[1] if peer else 0

    def address(self) -> str | None:
        """Return the remote host, or None when not connected."""
        peer = self._peer()
        return peer[0] if peer else None

    def local_port(self) -> int:
        """Return the local port, or 0 without a socket."""
        local = self._local()
        return local[1] if local else 0

    def local_address(self) -> str | None:
        """Return the local host, or None without a socket."""
        local = self._local()
        return local[0] if local else None

    def fileno(self) -> int:
        """Return the socket's descriptor, or -1 without a socket."""
        return -1 if self._sock is None else self._sock.fileno()

    def __str__(self) -> str:
        endpoint = self._peer() or self._local()
        if not endpoint:
            return ""
        return f"{endpoint[0]}:{endpoint[1]}"

    @abc.abstractmethod
    def on_recv(self, error_code: int) -> None:
        """Data can be read."""

    @abc.abstractmethod
    def on_send(self, error_code: int) -> None:
        """Data can be written."""

    @abc.abstractmethod
    def on_close(self, error_code: int) -> None:
        """The connection was closed."""

    @abc.abstractmethod
    def on_connect(self, error_code: int) -> None:
        """A connection attempt finished."""