"""Numeric parsing and formatting with fixed C-style semantics."""

from __future__ import annotations

_WHITESPACE = " \n\f\r\v\t"
_LONG_MAX = 2**63 - 1
_ULONG_MASK = 2**64 - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _parse_long(s: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits.

    On overflow of a 64-bit signed long the result is -1 for a positive
    number and 0 for a negative one.
    """
    i = 0
    while i < len(s) and s[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(s) and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < len(s) and "0" <= s[i] <= "9":
        digit = ord(s[i]) - ord("0")
        if result > (_LONG_MAX - digit) // 10:
            return -1 if sign == 1 else 0
        result = result * 10 + digit
        i += 1
    return sign * result


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atol(s: str) -> int:
    """Convert the leading decimal number of ``s`` to a 64-bit integer."""
    return _parse_long(s)


def atoi(s: str) -> int:
    """Convert the leading decimal number of ``s`` to a 32-bit integer.

    Values that fit a long but not an int wrap around as a C cast would.
    """
    return _to_int32(_parse_long(s))


def atod(s: str) -> float:
    """Convert ``s`` to a float as integer part plus fraction.

    The integer part is parsed with :func:`atol`; the fraction is the
    number following the first '.' in the string divided by a power of
    ten for each digit directly after the dot.  The fraction is always
    added, so the sign only applies to the integer part.
    """
    main_part = atol(s)
    dot = s.find(".")
    if dot < 0:
        return float(main_part)
    rest = s[dot + 1:]
    dec_part = atol(rest)
    scale = 1
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        scale *= 10
    return main_part + dec_part / scale


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def itoa_base(n: int, base: int, uppercase: bool = False) -> str:
    """Return ``n`` written in ``base`` (2 to 36).

    Negative numbers get a minus sign in base 10; in any other base they
    are shown as their unsigned 64-bit two's complement value.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if n == 0:
        return "0"
    negative = n < 0 and base == 10
    value = -n if negative else n & _ULONG_MASK
    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
    text = "".join(reversed(digits))
    if uppercase:
        text = text.upper()
    return "-" + text if negative else text