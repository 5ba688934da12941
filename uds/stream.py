"""Seekable byte streams held in memory."""

from __future__ import annotations

import abc
import enum

_MAX_CAPACITY = 2147483591
_MIN_GROWTH = 256


class SeekOrigin(enum.IntEnum):
    """Reference point for a seek."""

    BEGIN = 0
    CURRENT = 1
    END = 2


class Stream(abc.ABC):
    """A sequence of bytes that can be read, written and positioned."""

    @abc.abstractmethod
    def can_seek(self) -> bool:
        """Whether the stream supports seeking."""

    @abc.abstractmethod
    def can_read(self) -> bool:
        """Whether the stream supports reading."""

    @abc.abstractmethod
    def can_write(self) -> bool:
        """Whether the stream supports writing."""

    @abc.abstractmethod
    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.BEGIN) -> int:
        """Move the position and return the new position."""

    @abc.abstractmethod
    def set_length(self, value: int) -> None:
        """Change the length of the stream."""

    @abc.abstractmethod
    def write_byte(self, value: int) -> None:
        """Write one byte at the current position."""

    @abc.abstractmethod
    def write(self, data) -> None:
        """Write a bytes-like object at the current position."""

    @abc.abstractmethod
    def read_byte(self) -> int:
        """Read one byte, or return -1 at the end of the stream."""

    @abc.abstractmethod
    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release the stream."""

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()


class MemoryStream(Stream):
    """A stream backed by a growable in-memory buffer.

    When constructed over an existing ``buffer`` the stream shares it and
    cannot grow beyond its size.
    """

    def __init__(self, capacity: int = 0, buffer=None) -> None:
        self._closed = False
        self._position = 0
        if buffer is not None:
            self._buffer = buffer if isinstance(buffer, bytearray) else bytearray(buffer)
            self._length = len(self._buffer)
            self._capacity = self._length
            self._expandable = False
        else:
            self._buffer = bytearray()
            self._length = 0
            self._capacity = 0
            self._expandable = True
            if capacity > 0:
                self.set_capacity(capacity)

    def can_seek(self) -> bool:
        return True

    def can_read(self) -> bool:
        return True

    def can_write(self) -> bool:
        return True

    @property
    def position(self) -> int:
        """Current read/write position."""
        return self._position

    @property
    def length(self) -> int:
        """Number of bytes of data in the stream."""
        return self._length

    @property
    def capacity(self) -> int:
        """Bytes allocated beyond the current length."""
        return self._capacity - self._length

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("stream is closed")

    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.BEGIN) -> int:
        self._check_open()
        try:
            origin = SeekOrigin(origin)
        except ValueError:
            raise ValueError(f"invalid seek origin: {origin!r}") from None
        base = {
            SeekOrigin.BEGIN: 0,
            SeekOrigin.CURRENT: self._position,
            SeekOrigin.END: self._length,
        }[origin]
        target = base + offset
        if target < 0 or target > self._length:
            raise ValueError(f"seek target {target} outside 0..{self._length}")
        self._position = target
        return target

    def set_position(self, position: int) -> int:
        """Seek to an absolute position."""
        return self.seek(position, SeekOrigin.BEGIN)

    def set_length(self, value: int) -> None:
        self._check_open()
        if value < 0:
            raise ValueError("length cannot be negative")
        self._ensure_capacity(value)
        self._length = value
        if self._position > value:
            self._position = value

    def set_capacity(self, value: int) -> None:
        """Resize the underlying buffer to ``value`` bytes."""
        self._check_open()
        if value < self._length:
            raise ValueError("capacity cannot be smaller than the length")
        if not self._expandable:
            if value != self._capacity:
                raise ValueError("stream buffer is not expandable")
            return
        if value == self._capacity:
            return
        if value > 0:
            grown = bytearray(value)
            grown[: self._length] = self._buffer[: self._length]
            self._buffer = grown
        else:
            self._buffer = bytearray()
        self._capacity = value

    def _ensure_capacity(self, value: int) -> None:
        if value < 0:
            raise ValueError("capacity cannot be negative")
        if value <= self._capacity:
            return
        doubled = self._capacity * 2
        target = max(value, _MIN_GROWTH, doubled)
        if doubled > _MAX_CAPACITY:
            if value > _MAX_CAPACITY:
                raise OverflowError("stream would exceed the maximum capacity")
            target = _MAX_CAPACITY
        self.set_capacity(target)

    def write_byte(self, value: int) -> None:
        self._check_open()
        if not 0 <= value <= 0xFF:
            raise ValueError("byte must be in range 0..255")
        end = self._position + 1
        if end > self._length:
            self._ensure_capacity(end)
            self._length = end
        self._buffer[self._position] = value
        self._position = end

    def write(self, data) -> None:
        self._check_open()
        view = memoryview(data).cast("B")
        count = view.nbytes
        if count == 0:
            return
        end = self._position + count
        if end > self._length:
            self._ensure_capacity(end)
            self._length = end
        self._buffer[self._position:end] = view
        self._position = end

    def read_byte(self) -> int:
        self._check_open()
        if self._position >= self._length:
            return -1
        value = self._buffer[self._position]
        self._position += 1
        return value

    def read(self, count: int) -> bytes:
        self._check_open()
        if count < 0:
            raise ValueError("count cannot be negative")
        available = min(count, self._length - self._position)
        if available < 1:
            return b""
        start = self._position
        self._position += available
        return bytes(self._buffer[start:self._position])

    def get_buffer(self) -> bytearray:
        """The underlying buffer, which may be longer than the data."""
        return self._buffer

    def to_bytes(self) -> bytes:
        """A copy of the data in the stream."""
        return bytes(self._buffer[: self._length])

    def close(self) -> None:
        if not self._closed:
            self._expandable = False
            self._position = 0
            self._length = 0
            self._capacity = 0
            self._buffer = bytearray()
            self._closed = True