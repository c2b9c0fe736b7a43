"""
Errors raised when a wrapped operation fails.
"""

from __future__ import annotations


def describe(err: object) -> str:
    """Human-readable description of an error value."""
    text = str(err)
    return text or type(err).__name__


def cause_of(err: object) -> BaseException | None:
    """The value usable in `raise ... from`, or None for non-exception errors."""
    return err if isinstance(err, BaseException) else None


class MustError(RuntimeError):
    """
    An operation that must succeed has failed.

    Raised by the panic policy, and by Must.abort when a policy returns
    instead of diverting control. The original error is kept on `.error`
    and as `__cause__` when it is an exception.
    """

    def __init__(self, error: object) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return describe(self.error)


__all__ = ("MustError", "describe", "cause_of")
