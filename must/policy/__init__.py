"""
Abort policies.

Namespace: must.policy.*

Examples:
    must.configure(must.policy.fatal())
    must.configure(must.policy.panic())
    m = must.Must(must.policy.panic())
"""

from __future__ import annotations

from must.policy._fatal import FatalPolicy, fatal
from must.policy._panic import PanicPolicy, panic

__all__ = (
    "FatalPolicy",
    "fatal",
    "PanicPolicy",
    "panic",
)
