"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _require_str(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c`` to ``stream`` (stdout by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream`` (stdout by default)."""
    _target(stream).write(_require_str(s))


def putendl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline to ``stream`` (stdout by default)."""
    _target(stream).write(_require_str(s) + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer ``n`` to ``stream`` (stdout by default)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _target(stream).write(str(n))