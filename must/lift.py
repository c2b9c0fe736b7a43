"""
Lift — Helpers for lifting plain calls into kungfu Results.

Python primitives raise instead of returning an error value; these helpers
turn a raising call into an explicit Result so the abort decision lives in
one place (Must.ok).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kungfu import Result, Ok, Error


def attempt[T](fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """
    Call fn and capture its outcome.

    Only Exception subclasses become Error; KeyboardInterrupt, SystemExit
    and friends propagate.

    Example:
        attempt(os.stat, "/etc/hosts")   # Ok(os.stat_result(...))
        attempt(os.stat, "/nope")        # Error(FileNotFoundError(...))
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:
        return Error(exc)


def from_optional_error[E](err: E | None) -> Result[None, E]:
    """Lift an "error or None" value into a Result."""
    if err is None:
        return Ok(None)
    return Error(err)


__all__ = (
    "attempt",
    "from_optional_error",
)
