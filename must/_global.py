"""
Process-wide active context.

Configure it once, early, before threads start:

    must.configure(must.policy.panic())

Module-level wrappers look up current() on every call, so a reconfigured
policy applies to all of them at once.
"""

from __future__ import annotations

import os
from typing import Any, BinaryIO, Never

from kungfu import Result

from must._must import Must
from must._types import (
    AbortPolicy,
    Closer,
    Decoder,
    Encoder,
    Fileno,
    Reader,
    Seeker,
    Truncater,
    Writer,
    WriterAt,
)
from must.policy import fatal, panic

# Plain global rather than a ContextVar: threads started later must see it.
_active = Must()


def configure(policy: AbortPolicy) -> Must:
    """Install policy process-wide; returns the new active context."""
    global _active
    _active = Must(policy)
    return _active


def current() -> Must:
    return _active


# ═══════════════════════════════════════════════════════════════════════════════
# Direct checks
# ═══════════════════════════════════════════════════════════════════════════════


def abort(err: object) -> Never:
    _active.abort(err)


def abort_if(err: object | None) -> None:
    """Invoke the active policy when err is not None."""
    _active.abort_if(err)


no_err = abort_if


def fatal_if(err: object | None) -> None:
    """Terminate when err is not None, whatever policy is active."""
    if err is not None:
        fatal()(err)


def panic_if(err: object | None) -> None:
    """Raise MustError when err is not None, whatever policy is active."""
    if err is not None:
        panic()(err)


def ok[T](result: Result[T, Any]) -> T:
    return _active.ok(result)


# ═══════════════════════════════════════════════════════════════════════════════
# Wrappers
# ═══════════════════════════════════════════════════════════════════════════════


def open(name: str) -> BinaryIO:
    return _active.open(name)


def create(name: str) -> BinaryIO:
    return _active.create(name)


def open_file(name: str, flag: int, perm: int = 0o666) -> BinaryIO:
    return _active.open_file(name, flag, perm)


def close(f: Closer) -> None:
    _active.close(f)


def seek(f: Seeker, offset: int, whence: int = os.SEEK_SET) -> int:
    return _active.seek(f, offset, whence)


def stat(f: Fileno) -> os.stat_result:
    return _active.stat(f)


def sync(f: Fileno) -> None:
    _active.sync(f)


def truncate(f: Truncater, size: int) -> None:
    _active.truncate(f, size)


def stat_path(name: str) -> os.stat_result:
    return _active.stat_path(name)


def remove(name: str) -> None:
    _active.remove(name)


def rename(old: str, new: str) -> None:
    _active.rename(old, new)


def truncate_path(name: str, size: int) -> None:
    _active.truncate_path(name, size)


def temp_file(dir: str | None = None, prefix: str = "") -> BinaryIO:
    return _active.temp_file(dir, prefix)


def temp_dir(dir: str | None = None, prefix: str = "") -> str:
    return _active.temp_dir(dir, prefix)


def read_dir(name: str) -> list[os.DirEntry[str]]:
    return _active.read_dir(name)


def read(r: Reader, buffer: bytearray | memoryview) -> int | None:
    return _active.read(r, buffer)


def read_full(r: Reader, buffer: bytearray | memoryview) -> int:
    return _active.read_full(r, buffer)


def read_all(r: Reader) -> bytes:
    return _active.read_all(r)


def read_file(name: str) -> bytes:
    return _active.read_file(name)


def write(w: Writer, data: bytes) -> int:
    return _active.write(w, data)


def write_at(f: WriterAt, data: bytes, offset: int) -> int:
    return _active.write_at(f, data, offset)


def write_file(name: str, data: bytes, perm: int = 0o666) -> None:
    _active.write_file(name, data, perm)


def encode[T](encoder: Encoder[T], value: Any) -> T:
    return _active.encode(encoder, value)


def decode[T](decoder: Decoder[T], data: Any) -> T:
    return _active.decode(decoder, data)


def marshal_json(value: Any) -> bytes:
    return _active.marshal_json(value)


def unmarshal_json(data: bytes | str) -> Any:
    return _active.unmarshal_json(data)


def atoi(buf: bytes | bytearray | memoryview | str) -> int:
    return _active.atoi(buf)


__all__ = (
    "configure",
    "current",
    "abort",
    "abort_if",
    "no_err",
    "fatal_if",
    "panic_if",
    "ok",
    "open",
    "create",
    "open_file",
    "close",
    "seek",
    "stat",
    "sync",
    "truncate",
    "stat_path",
    "remove",
    "rename",
    "truncate_path",
    "temp_file",
    "temp_dir",
    "read_dir",
    "read",
    "read_full",
    "read_all",
    "read_file",
    "write",
    "write_at",
    "write_file",
    "encode",
    "decode",
    "marshal_json",
    "unmarshal_json",
    "atoi",
)
