"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Character code of ``c``, which is either an int or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a character, got {c!r}")
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return ord(" ") <= _code(c) < 127


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def _wrap_int(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Text without digits gives 0. The result wraps
    to a 32-bit signed integer.
    """
    if text is None:
        raise TypeError("atoi needs a string")
    body = text.split("\0", 1)[0]
    pos = 0
    while pos < len(body) and body[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(body) and body[pos] in "+-":
        if body[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(body) and is_digit(body[end]):
        end += 1
    digits = body[pos:end]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(number: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {number!r}")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)