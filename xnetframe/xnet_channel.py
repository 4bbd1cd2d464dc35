"""The TCP channel a connector talks through."""

from __future__ import annotations

import enum
import errno
import logging
import threading

from .platform import MAX_PACKET_LEN
from .tcp_socket import SocketError, TcpSocket

_WOULD_BLOCK = {errno.EAGAIN, errno.EWOULDBLOCK}


class CloseStatus(enum.IntEnum):
    """Why a channel was closed."""

    SERVICE_STOP = 0
    PEER_CLOSED = 1
    SOCKET_ERROR = 2
    RECV_FAILURE = 3
    SEND_FAILURE = 4


class XNetChannel(TcpSocket):
    """A TCP channel that reports connect and close to its connector.

    Received data goes to ``dispatch_service.dispatch(channel, data)`` when a
    dispatcher is attached.
    """

    def __init__(self, connector, log=None) -> None:
        super().__init__()
        self._connector = connector
        self._log = log or logging.getLogger("xnetframe")
        self._close_lock = threading.Lock()
        self.connected = False
        self.dispatch_service = None
        self.buffer_level = None

    def on_connect(self, error_code: int) -> None:
        if error_code:
            self.do_close(CloseStatus.SOCKET_ERROR)
            return
        self.connected = True
        self._log.info("XNetChannel object connected")
        self._connector.on_channel_connect(self)

    def on_close(self, error_code: int) -> None:
        self._log.info("XNetChannel socket error %d", error_code)
        self.do_close(CloseStatus.SOCKET_ERROR)

    def on_recv(self, error_code: int) -> None:
        if error_code:
            self.do_close(CloseStatus.SOCKET_ERROR)
            return
        try:
            data = self.recv(MAX_PACKET_LEN)
        except SocketError as exc:
            if exc.errno in _WOULD_BLOCK:
                return
            self.do_close(CloseStatus.RECV_FAILURE)
            return
        if not data:
            self.do_close(CloseStatus.PEER_CLOSED)
            return
        if self.dispatch_service is not None:
            self.dispatch_service.dispatch(self, data)

    def on_send(self, error_code: int) -> None:
        """Packets are written straight away, so only errors need handling here."""
        if error_code:
            self.do_close(CloseStatus.SOCKET_ERROR)

    def do_close(self, status) -> None:
        """Close the socket and tell the connector, once per open socket."""
        with self._close_lock:
            if self.fileno() < 0:
                return
            self.connected = False
            self.close()
        status = CloseStatus(status)
        self._log.info("XNetChannel OnClose : csCloseStatus = %d", status)
        self._connector.on_channel_close(self, status)

    def send_packet(self, data) -> bool:
        """Send ``data``; on failure close the channel and return False."""
        if not self.connected:
            return False
        view = memoryview(bytes(data))
        try:
            while view:
                sent = self.send(view)
                view = view[sent:]
        except SocketError as exc:
            if exc.errno in _WOULD_BLOCK:
                return True
            self.do_close(CloseStatus.SEND_FAILURE)
            self._log.error("send failed: %s", exc)
            return False
        return True