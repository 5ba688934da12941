"""File helpers: access checks, whole-file reads and writes, and BOM detection."""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, bytes, os.PathLike]

_UTF8_BOM = b"\xef\xbb\xbf"
_BIG_ENDIAN_UNICODE_MARK = b"\xfe\xff\x00"
_UNICODE_MARK = b"\xff\xfe\x41"


class Encoding(enum.IntEnum):
    """Text encodings recognised from a leading byte-order mark."""

    ASCII = 0
    UTF8 = 1
    UNICODE = 2
    BIG_ENDIAN_UNICODE = 3


class FileAccess(enum.IntFlag):
    """Kinds of access to test a file for."""

    READ = 1
    WRITE = 2
    READ_WRITE = 3


def can_access(path: PathLike | None, access: FileAccess = FileAccess.READ) -> bool:
    """Whether ``path`` can be opened with the requested access."""
    if path is None:
        return False
    access = FileAccess(access)
    if access & FileAccess.READ_WRITE == FileAccess.READ_WRITE:
        flags = os.O_RDWR
    else:
        flags = 0
        if access & FileAccess.READ:
            flags |= os.O_RDONLY
        if access & FileAccess.WRITE:
            flags |= os.O_WRONLY
    try:
        fd = os.open(path, flags)
    except (OSError, ValueError):
        return False
    os.close(fd)
    return True


def get_length(path: PathLike) -> int:
    """Size of the file in bytes; raises :class:`OSError` if it cannot be read."""
    with open(path, "rb") as stream:
        return stream.seek(0, os.SEEK_END)


def exists(path: PathLike | None) -> bool:
    """Whether anything exists at ``path``."""
    if path is None:
        return False
    try:
        return os.access(path, os.F_OK)
    except ValueError:
        return False


def get_encoding(data) -> tuple[Encoding, int]:
    """Detect the encoding from a leading mark.

    Returns the encoding and the number of mark bytes to skip.
    """
    head = bytes(memoryview(data)[:3]) if data is not None else b""
    if head == _UTF8_BOM:
        return Encoding.UTF8, 3
    if head == _BIG_ENDIAN_UNICODE_MARK:
        return Encoding.BIG_ENDIAN_UNICODE, 3
    if head == _UNICODE_MARK:
        return Encoding.UNICODE, 3
    return Encoding.ASCII, 0


def read_all_bytes(path: PathLike) -> bytes:
    """Read the whole file; raises :class:`OSError` if it cannot be opened."""
    return Path(os.fsdecode(path)).read_bytes()


def write_all_bytes(path: PathLike, data) -> None:
    """Replace the file's contents with ``data``, creating it if needed."""
    payload = b"" if data is None else bytes(data)
    with open(path, "wb") as stream:
        stream.write(payload)
        stream.flush()