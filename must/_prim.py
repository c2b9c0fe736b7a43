"""
Primitives the standard library lacks in the shape the wrappers need.

Each raises on failure like any other stdlib call; deciding what a failure
means is left to the wrappers.
"""

from __future__ import annotations

import builtins
import errno
import os
import re
import sys
from collections.abc import Callable
from typing import BinaryIO

from must._types import Fileno, Reader, Writer, WriterAt

_READ_CHUNK = 32 * 1024

_INT_SYNTAX = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 63) - 1


# ═══════════════════════════════════════════════════════════════════════════════
# Opening
# ═══════════════════════════════════════════════════════════════════════════════


def _opener(flag: int, perm: int) -> Callable[[str, int], int]:
    # builtins.open computes its own flags from the mode; the caller's win
    def opener(path: str, _flags: int) -> int:
        return os.open(path, flag, perm)

    return opener


def _mode_for(flag: int) -> str:
    access = flag & (os.O_WRONLY | os.O_RDWR)
    append = bool(flag & os.O_APPEND)
    if access == os.O_RDWR:
        return "a+b" if append else "r+b"
    if access == os.O_WRONLY:
        return "ab" if append else "wb"
    return "rb"


def open_file(name: str, flag: int, perm: int) -> BinaryIO:
    """Open with raw os flags; returns an unbuffered binary file."""
    return builtins.open(name, _mode_for(flag), buffering=0, opener=_opener(flag, perm))


# ═══════════════════════════════════════════════════════════════════════════════
# Reading
# ═══════════════════════════════════════════════════════════════════════════════


def _would_block() -> BlockingIOError:
    return BlockingIOError(errno.EAGAIN, "read would block")


def read_full(reader: Reader, buffer: bytearray | memoryview) -> int:
    """Fill buffer completely or raise EOFError."""
    with memoryview(buffer) as view:
        want = view.nbytes
        got = 0
        while got < want:
            n = reader.readinto(view[got:])
            if n is None:
                raise _would_block()
            if n == 0:
                break
            got += n
    if got < want:
        raise EOFError("EOF" if got == 0 else "unexpected EOF")
    return got


def read_all(reader: Reader) -> bytes:
    """Read until end of stream."""
    out = bytearray()
    chunk = bytearray(_READ_CHUNK)
    with memoryview(chunk) as view:
        while True:
            n = reader.readinto(view)
            if n is None:
                raise _would_block()
            if n == 0:
                return bytes(out)
            out += view[:n]


def read_dir(name: str) -> list[os.DirEntry[str]]:
    with os.scandir(name) as it:
        return sorted(it, key=lambda entry: entry.name)


# ═══════════════════════════════════════════════════════════════════════════════
# Writing
# ═══════════════════════════════════════════════════════════════════════════════

def _check_written(n: int | None, data: bytes) -> int:
    want = len(data)
    if n is None or n < want:
        raise OSError(errno.EIO, f"short write: {n or 0} of {want} bytes")
    return n


def write(w: Writer, data: bytes) -> int:
    """Write all of data or raise; raw writers may accept only part of it."""
    return _check_written(w.write(data), data)


if sys.platform == "win32":

    def write_at(f: WriterAt, data: bytes, offset: int) -> int:
        """Positional write, emulated via seek + write."""
        fd = f.fileno()
        os.lseek(fd, offset, os.SEEK_SET)
        return _check_written(os.write(fd, data), data)

else:

    def write_at(f: WriterAt, data: bytes, offset: int) -> int:
        return _check_written(os.pwrite(f.fileno(), data, offset), data)


def write_file(name: str, data: bytes, perm: int) -> None:
    flag = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
    with builtins.open(name, "wb", opener=_opener(flag, perm)) as fh:
        fh.write(data)


# ═══════════════════════════════════════════════════════════════════════════════
# Path operations
# ═══════════════════════════════════════════════════════════════════════════════


def remove(name: str) -> None:
    """Remove a file or an empty directory."""
    if os.path.isdir(name) and not os.path.islink(name):
        os.rmdir(name)
    else:
        os.remove(name)


def sync(f: Fileno) -> None:
    flush = getattr(f, "flush", None)
    if flush is not None:
        flush()
    os.fsync(f.fileno())


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing
# ═══════════════════════════════════════════════════════════════════════════════


def atoi(buf: bytes | bytearray | memoryview | str) -> int:
    """Strict base-10 parse into the signed 64-bit range."""
    text = buf if isinstance(buf, str) else bytes(buf).decode("ascii")
    if not _INT_SYNTAX.fullmatch(text):
        raise ValueError(f"parsing {text!r}: invalid syntax")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"parsing {text!r}: value out of range")
    return value
