"""Formatted output with a small printf-style set of conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .chars import itoa

NULL_TEXT = "(null)"
NIL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1
_INT_OFFSET = 2**31


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def _int_arg(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {value!r}")
    return value


def _as_int32(value: int) -> int:
    return (value + _INT_OFFSET) % 2**32 - _INT_OFFSET


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_int_arg(value, "c") & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return "%" + spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        if value is None:
            return NULL_TEXT
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {value!r}")
        return _cstr(value)
    if spec == "p":
        address = _int_arg(value, spec) & _ULONG_MASK
        return NIL_POINTER if address == 0 else POINTER_PREFIX + format(address, "x")
    number = _int_arg(value, spec)
    if spec in "di":
        return itoa(_as_int32(number))
    unsigned = number & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    return format(unsigned, "x" if spec == "x" else "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions %c %s %p %d %i %u %x %X and %%.

    An unknown conversion is kept as written, percent sign included.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    pieces: list[str] = []
    chars = iter(_cstr(fmt))
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        pieces.append("%" if spec is None else _convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded ``fmt`` to standard output; return characters written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str | int, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_as_char(char))


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` up to its terminator to ``stream``."""
    if text is None:
        raise TypeError("put_str needs a string")
    _target(stream).write(_cstr(text))


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of a 32-bit signed integer to ``stream``."""
    _target(stream).write(itoa(number))