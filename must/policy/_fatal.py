"""
Fatal policy.
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from typing import Never, TextIO

from must._errors import describe, cause_of


@dataclass(frozen=True, slots=True)
class FatalPolicy:
    """
    Describe the error on stderr and end the process.

    With hard=True, or when called off the main thread (where SystemExit
    only ends the calling thread), the process ends through os._exit,
    skipping finally blocks and atexit handlers.
    """

    exit_code: int = 1
    stream: TextIO | None = None
    hard: bool = False

    def __call__(self, err: object, /) -> Never:
        # sys.stderr is looked up per call so redirected streams are honored
        stream = self.stream if self.stream is not None else sys.stderr
        print(describe(err), file=stream)
        stream.flush()
        if self.hard or threading.current_thread() is not threading.main_thread():
            os._exit(self.exit_code)
        raise SystemExit(self.exit_code) from cause_of(err)


def fatal(exit_code: int = 1, stream: TextIO | None = None, hard: bool = False) -> FatalPolicy:
    """
    Terminate on failure.

    Example:
        must.configure(must.policy.fatal())
        must.configure(must.policy.fatal(exit_code=2, hard=True))
    """
    if exit_code == 0:
        raise ValueError("exit_code must be non-zero")
    return FatalPolicy(exit_code, stream, hard)


__all__ = ("FatalPolicy", "fatal")
