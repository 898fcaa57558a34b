"""String and byte-buffer helpers with C library semantics.

Where the C functions return pointers into a string, these return
indices (or ``None`` when nothing is found).  A string's end behaves
like a terminating NUL character, so searching for ``"\\0"`` finds the
end and comparisons stop there.
"""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _char_at(s: str, i: int) -> str:
    return s[i] if i < len(s) else _NUL


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, ``len(s)`` for NUL, else None."""
    c = _single_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, ``len(s)`` for NUL, else None."""
    c = _single_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        a = _char_at(s1, i)
        b = _char_at(s2, i)
        if a != b or a == _NUL or b == _NUL:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return -1, 0 or 1."""
    i = 0
    while True:
        a = _char_at(s1, i)
        b = _char_at(s2, i)
        if a != b or a == _NUL:
            break
        i += 1
    if a == b:
        return 0
    return -1 if a < b else 1


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    needle_len = len(needle)
    i = 0
    while i + needle_len <= length and i < len(haystack) and haystack[i] != _NUL:
        if strncmp(haystack[i:], needle, needle_len) == 0:
            return i
        i += 1
    return None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and the full length of ``src``; truncation
    happened when that length is ``size`` or more.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would
    have had.  When ``size`` does not exceed ``len(dst)`` nothing is
    appended and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin expects two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    sep = _single_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string by applying ``f(index, char)`` to every character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def _check_span(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError("n exceeds the buffer length")


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes."""
    _check_span(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first differing pair."""
    _check_span(n, s1, s2)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0