"""
Must — operation wrappers bound to an abort policy.

    m = Must(policy.panic())
    data = m.read_file("config.json")   # bytes, or MustError is raised

Every wrapper runs its primitive through lift.attempt and extracts the value
with Must.ok; failures go to Must.abort, which hands them to the policy.
"""

from __future__ import annotations

import builtins
import json
import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Any, BinaryIO, Never

import structlog
from kungfu import Result, Ok, Error

from must import _prim
from must._errors import MustError, cause_of
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
from must.lift import attempt
from must.policy import FatalPolicy

# Routed through stdlib logging so the host's handlers and levels apply.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)


@dataclass(frozen=True, slots=True)
class Must:
    """
    Error-handling context.

    Holds the abort policy consulted by every wrapper. Build one per program
    (or per test) and pass it around, or install it process-wide with
    must.configure().
    """

    policy: AbortPolicy = FatalPolicy()

    # ═══════════════════════════════════════════════════════════════════════════
    # Abort
    # ═══════════════════════════════════════════════════════════════════════════

    def abort(self, err: object) -> Never:
        """Hand err to the policy. Never returns."""
        if err is None:
            raise TypeError("abort called without an error")
        logger.debug(
            "must.abort",
            error_type=type(err).__name__,
            error=str(err),
            policy=type(self.policy).__name__,
        )
        self.policy(err)
        logger.error("must.policy_returned", policy=type(self.policy).__name__)
        raise MustError(err) from cause_of(err)

    def abort_if(self, err: object | None) -> None:
        """Abort when err is not None."""
        if err is not None:
            self.abort(err)

    no_err = abort_if

    def ok[T](self, result: Result[T, Any]) -> T:
        """Value of Ok, or abort with the error of Error."""
        match result:
            case Ok(value):
                return value
            case Error(err):
                self.abort(err)
            case _:
                raise TypeError(f"expected Ok or Error, got {type(result).__name__}")

    # ═══════════════════════════════════════════════════════════════════════════
    # Open file lifecycle
    # ═══════════════════════════════════════════════════════════════════════════

    def open(self, name: str) -> BinaryIO:
        """Open name read-only (unbuffered, binary)."""
        return self.ok(attempt(builtins.open, name, "rb", buffering=0))

    def create(self, name: str) -> BinaryIO:
        """Create or truncate name, opened read-write."""
        return self.open_file(name, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o666)

    def open_file(self, name: str, flag: int, perm: int = 0o666) -> BinaryIO:
        """Open name with os.O_* flags."""
        return self.ok(attempt(_prim.open_file, name, flag, perm))

    def close(self, f: Closer) -> None:
        self.ok(attempt(f.close))

    def seek(self, f: Seeker, offset: int, whence: int = os.SEEK_SET) -> int:
        return self.ok(attempt(f.seek, offset, whence))

    def stat(self, f: Fileno) -> os.stat_result:
        return self.ok(attempt(lambda: os.fstat(f.fileno())))

    def sync(self, f: Fileno) -> None:
        """Flush f and commit it to durable storage."""
        self.ok(attempt(_prim.sync, f))

    def truncate(self, f: Truncater, size: int) -> None:
        self.ok(attempt(f.truncate, size))

    # ═══════════════════════════════════════════════════════════════════════════
    # Path operations
    # ═══════════════════════════════════════════════════════════════════════════

    def stat_path(self, name: str) -> os.stat_result:
        return self.ok(attempt(os.stat, name))

    def remove(self, name: str) -> None:
        """Remove a file or an empty directory."""
        self.ok(attempt(_prim.remove, name))

    def rename(self, old: str, new: str) -> None:
        """Rename old to new, replacing new if it exists."""
        self.ok(attempt(os.replace, old, new))

    def truncate_path(self, name: str, size: int) -> None:
        self.ok(attempt(os.truncate, name, size))

    def temp_file(self, dir: str | None = None, prefix: str = "") -> BinaryIO:
        """
        Create a new temporary file opened read-write.

        The file is not deleted on close; its path is `.name`.
        """
        return self.ok(
            attempt(
                tempfile.NamedTemporaryFile,
                "w+b",
                buffering=0,
                prefix=prefix,
                dir=dir or None,
                delete=False,
            )
        )

    def temp_dir(self, dir: str | None = None, prefix: str = "") -> str:
        return self.ok(attempt(tempfile.mkdtemp, prefix=prefix, dir=dir or None))

    def read_dir(self, name: str) -> list[os.DirEntry[str]]:
        """Directory entries sorted by name."""
        return self.ok(attempt(_prim.read_dir, name))

    # ═══════════════════════════════════════════════════════════════════════════
    # Bulk transfer
    # ═══════════════════════════════════════════════════════════════════════════

    def read(self, r: Reader, buffer: bytearray | memoryview) -> int | None:
        """Read up to len(buffer) bytes; 0 at end of stream."""
        return self.ok(attempt(r.readinto, buffer))

    def read_full(self, r: Reader, buffer: bytearray | memoryview) -> int:
        """Fill buffer exactly; running out of data is a failure."""
        return self.ok(attempt(_prim.read_full, r, buffer))

    def read_all(self, r: Reader) -> bytes:
        return self.ok(attempt(_prim.read_all, r))

    def read_file(self, name: str) -> bytes:
        return self.ok(attempt(_read_bytes, name))

    def write(self, w: Writer, data: bytes) -> int:
        """Write all of data; a short count is a failure."""
        return self.ok(attempt(_prim.write, w, data))

    def write_at(self, f: WriterAt, data: bytes, offset: int) -> int:
        return self.ok(attempt(_prim.write_at, f, data, offset))

    def write_file(self, name: str, data: bytes, perm: int = 0o666) -> None:
        """Create or truncate name and write data to it."""
        self.ok(attempt(_prim.write_file, name, data, perm))

    # ═══════════════════════════════════════════════════════════════════════════
    # Structured values
    # ═══════════════════════════════════════════════════════════════════════════

    def encode[T](self, encoder: Encoder[T], value: Any) -> T:
        """
        Encode value with any object exposing encode().

        Example:
            m.encode(json.JSONEncoder(indent=2), {"a": 1})   # '{\\n  "a": 1\\n}'
        """
        return self.ok(attempt(encoder.encode, value))

    def decode[T](self, decoder: Decoder[T], data: Any) -> T:
        """Decode data with any object exposing decode()."""
        return self.ok(attempt(decoder.decode, data))

    def marshal_json(self, value: Any) -> bytes:
        """Compact UTF-8 JSON. NaN and infinities are rejected."""
        return self.ok(attempt(_marshal_json, value))

    def unmarshal_json(self, data: bytes | str) -> Any:
        return self.ok(attempt(json.loads, data))

    def atoi(self, buf: bytes | bytearray | memoryview | str) -> int:
        """Parse a signed base-10 integer."""
        return self.ok(attempt(_prim.atoi, buf))


def _read_bytes(name: str) -> bytes:
    with builtins.open(name, "rb") as fh:
        return fh.read()


def _marshal_json(value: Any) -> bytes:
    text = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    return text.encode("utf-8")


__all__ = ("Must",)
