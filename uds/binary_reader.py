"""Reading little-endian binary values from a stream."""

from __future__ import annotations

import struct

from uds.stream import Stream


class BinaryReader:
    """Reads primitive values from a :class:`Stream`."""

    def __init__(self, stream: Stream) -> None:
        self._stream = stream

    @property
    def stream(self) -> Stream:
        return self._stream

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes."""
        return self._stream.read(count)

    def read_bytes(self, count: int) -> bytes:
        """Read exactly ``count`` bytes or raise :class:`EOFError`."""
        if count < 1:
            raise ValueError("count must be positive")
        data = self._stream.read(count)
        if len(data) != count:
            raise EOFError(f"expected {count} bytes, got {len(data)}")
        return data

    def _read_value(self, fmt: str):
        size = struct.calcsize(fmt)
        return struct.unpack(fmt, self.read_bytes(size))[0]

    def read_int16(self) -> int:
        return self._read_value("<h")

    def read_int32(self) -> int:
        return self._read_value("<i")

    def read_int64(self) -> int:
        return self._read_value("<q")

    def read_uint16(self) -> int:
        return self._read_value("<H")

    def read_uint32(self) -> int:
        return self._read_value("<I")

    def read_uint64(self) -> int:
        return self._read_value("<Q")

    def read_sbyte(self) -> int:
        return self._read_value("<b")

    def read_byte(self) -> int:
        return self._read_value("<B")

    def read_single(self) -> float:
        return self._read_value("<f")

    def read_double(self) -> float:
        return self._read_value("<d")

    def read_boolean(self) -> bool:
        return self._read_value("<B") != 0

    def read_char(self) -> str:
        """Read one byte as a single character."""
        return self.read_bytes(1).decode("latin-1")