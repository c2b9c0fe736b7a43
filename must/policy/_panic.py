"""
Panic policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Never

from must._errors import MustError, cause_of


@dataclass(frozen=True, slots=True)
class PanicPolicy:
    """Raise MustError; an enclosing `except MustError` can intercept it."""

    def __call__(self, err: object, /) -> Never:
        raise MustError(err) from cause_of(err)


def panic() -> PanicPolicy:
    """Raise on failure."""
    return PanicPolicy()


__all__ = ("PanicPolicy", "panic")
