"""Binary streams with little-endian typed values and length-prefixed strings."""

from __future__ import annotations

import abc
import enum
import struct


class StreamStatus(enum.IntEnum):
    """State of a stream after its last operation."""

    OK = 0
    IO_ERROR = 1
    EOS = 2
    ILLEGAL_CALL = 3
    CLOSED = 4
    UNKNOWN_ERROR = 5


_STATUS_NAMES = {
    StreamStatus.OK: "StreamOk",
    StreamStatus.IO_ERROR: "StreamIOError",
    StreamStatus.EOS: "StreamEOS",
    StreamStatus.ILLEGAL_CALL: "StreamIllegalCall",
    StreamStatus.CLOSED: "StreamClosed",
    StreamStatus.UNKNOWN_ERROR: "StreamUnknownError",
}


def status_string(status) -> str:
    """Return the printable name of a stream status."""
    try:
        return _STATUS_NAMES[StreamStatus(status)]
    except ValueError:
        return "Invalid Stream::Status"


class Capability(enum.IntFlag):
    """What a stream can do."""

    WRITE = 1
    READ = 2
    POSITION = 4


class ValueType(enum.Enum):
    """Fixed-size values as they are laid out on the wire (little-endian)."""

    SCHAR8 = "<b"
    UCHAR8 = "<B"
    SINT16 = "<h"
    UINT16 = "<H"
    SINT32 = "<i"
    UINT32 = "<I"
    SINT64 = "<q"
    F32 = "<f"
    F64 = "<d"

    @property
    def size(self) -> int:
        return struct.calcsize(self.value)


class StreamError(Exception):
    """A stream operation failed; ``status`` tells how."""

    def __init__(self, status: StreamStatus, message: str | None = None):
        super().__init__(message or status_string(status))
        self.status = status


def _encode(text) -> bytes:
    if text is None:
        return b""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return str(text).encode("utf-8", "surrogateescape")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


class Stream(abc.ABC):
    """Base class for streams of bytes; subclasses provide the raw I/O."""

    def __init__(self) -> None:
        self._status = StreamStatus.CLOSED

    @property
    def status(self) -> StreamStatus:
        return self._status

    def _set_status(self, status: StreamStatus) -> None:
        self._status = status

    @abc.abstractmethod
    def _read(self, count: int) -> bytes:
        """Read up to ``count`` bytes, setting the status on a short read."""

    @abc.abstractmethod
    def _write(self, data: bytes) -> None:
        """Write all of ``data``."""

    @abc.abstractmethod
    def has_capability(self, capability: Capability) -> bool:
        """Tell whether the stream supports ``capability``."""

    @property
    @abc.abstractmethod
    def position(self) -> int:
        """Current offset in the stream."""

    @property
    @abc.abstractmethod
    def size(self) -> int:
        """Total size of the stream."""

    def read_bytes(self, count: int) -> bytes:
        """Read exactly ``count`` bytes or raise :class:`StreamError`."""
        if count < 0:
            raise ValueError("count must not be negative")
        data = self._read(count)
        if len(data) < count:
            status = self._status if self._status != StreamStatus.OK else StreamStatus.EOS
            raise StreamError(status)
        return data

    def write_bytes(self, data) -> None:
        """Write raw bytes."""
        self._write(bytes(data))

    def read(self, kind: ValueType):
        """Read one value of the given type."""
        return struct.unpack(kind.value, self.read_bytes(kind.size))[0]

    def write(self, kind: ValueType, value) -> None:
        """Write one value of the given type."""
        try:
            packed = struct.pack(kind.value, value)
        except struct.error as exc:
            raise ValueError(f"{value!r} does not fit {kind.name}") from exc
        self.write_bytes(packed)

    def read_bool(self) -> bool:
        """Read a boolean stored as one byte."""
        return self.read(ValueType.UCHAR8) != 0

    def write_bool(self, value) -> None:
        """Write a boolean as one byte, 1 or 0."""
        self.write(ValueType.UCHAR8, 1 if value else 0)

    def read_string(self) -> str:
        """Read a string prefixed with a one-byte length."""
        length = self.read(ValueType.UCHAR8)
        return _decode(self.read_bytes(length))

    def write_string(self, text, max_len: int = 255) -> None:
        """Write a string with a one-byte length prefix, cut to ``max_len`` bytes."""
        data = _encode(text)[: max(max_len, 0)]
        self.write(ValueType.UCHAR8, len(data) & 0xFF)
        if data:
            self.write_bytes(data)

    def read_long_string(self, max_len: int) -> str:
        """Read a string with a four-byte length prefix of at most ``max_len`` bytes."""
        length = self.read(ValueType.UINT32)
        if length > max_len:
            self._set_status(StreamStatus.IO_ERROR)
            raise StreamError(
                StreamStatus.IO_ERROR, f"string length {length} exceeds {max_len}"
            )
        return _decode(self.read_bytes(length))

    def write_long_string(self, max_len: int, text) -> None:
        """Write a string with a four-byte length prefix, cut to ``max_len`` bytes."""
        data = _encode(text)[: max(max_len, 0)]
        self.write(ValueType.UINT32, len(data))
        self.write_bytes(data)


class MemoryStream(Stream):
    """A stream over an in-memory, growable byte buffer."""

    def __init__(self, data=b"") -> None:
        super().__init__()
        self._buffer = bytearray(data)
        self._position = 0
        self._set_status(StreamStatus.OK)

    def _read(self, count: int) -> bytes:
        chunk = bytes(self._buffer[self._position:self._position + count])
        self._position += len(chunk)
        self._set_status(StreamStatus.EOS if len(chunk) < count else StreamStatus.OK)
        return chunk

    def _write(self, data: bytes) -> None:
        end = self._position + len(data)
        self._buffer[self._position:end] = data
        self._position = end
        self._set_status(StreamStatus.OK)

    def has_capability(self, capability: Capability) -> bool:
        supported = Capability.READ | Capability.WRITE | Capability.POSITION
        return (Capability(capability) & supported) == Capability(capability)

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        if not 0 <= value <= len(self._buffer):
            raise ValueError(f"position {value} outside 0..{len(self._buffer)}")
        self._position = value

    @property
    def size(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the whole buffer."""
        return bytes(self._buffer)