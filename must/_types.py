"""
Core types for must.

Re-exports from kungfu + capability protocols accepted by the wrappers.
"""

from __future__ import annotations

from typing import Any, Never, Protocol

# Re-export from kungfu
from kungfu import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# Abort Policy Protocol — Users May Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class AbortPolicy(Protocol):
    """
    Abort policy protocol.

    Receives the error of a failed operation and never returns normally:
    it ends the process or raises.

    Example:
        def explode(err: object) -> Never:
            raise RuntimeError(f"cannot continue: {err}")

        must.configure(explode)
    """

    def __call__(self, err: object, /) -> Never: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Capabilities — one method each, satisfied structurally
# ═══════════════════════════════════════════════════════════════════════════════


class Reader(Protocol):
    """Reads into a caller-supplied buffer (files, sockets' makefile, BytesIO)."""

    def readinto(self, buffer: bytearray | memoryview, /) -> int | None: ...


class Writer(Protocol):
    def write(self, data: bytes, /) -> int | None: ...


class Seeker(Protocol):
    def seek(self, offset: int, whence: int = ..., /) -> int: ...


class Closer(Protocol):
    def close(self) -> None: ...


class Truncater(Protocol):
    def truncate(self, size: int | None = ..., /) -> int: ...


class Fileno(Protocol):
    """Anything backed by an OS file descriptor."""

    def fileno(self) -> int: ...


type WriterAt = Fileno
"""Positional writes go through the descriptor, so a descriptor is all we need."""


class Encoder[T](Protocol):
    """
    Encoder protocol.

    Matches json.JSONEncoder, codecs incremental encoders, and any custom
    format object exposing encode().
    """

    def encode(self, value: Any, /) -> T: ...


class Decoder[T](Protocol):
    """
    Decoder protocol.

    Matches json.JSONDecoder, codecs incremental decoders, and any custom
    format object exposing decode().
    """

    def decode(self, data: Any, /) -> T: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Policy
    "AbortPolicy",
    # Capabilities
    "Reader",
    "Writer",
    "Seeker",
    "Closer",
    "Truncater",
    "Fileno",
    "WriterAt",
    "Encoder",
    "Decoder",
)
