"""String helpers with C-style semantics: NUL ends a string, indexes stand in for pointers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

NUL = "\0"


def _cstr(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    end = text.find(NUL)
    return text if end < 0 else text[:end]


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def strlen(text: str) -> int:
    """Number of characters before the terminating NUL (or the end)."""
    return len(_cstr(text))


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; NUL matches the terminator."""
    char = _single_char(char)
    body = _cstr(text)
    if char == NUL:
        return len(body)
    index = body.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; NUL matches the terminator."""
    char = _single_char(char)
    body = _cstr(text)
    if char == NUL:
        return len(body)
    index = body.rfind(char)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    hay = _cstr(haystack)
    pin = _cstr(needle)
    if not pin:
        return 0
    index = hay[: min(length, len(hay))].find(pin)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the order."""
    if count < 0:
        raise ValueError("count must not be negative")
    left = _cstr(first) + NUL
    right = _cstr(second) + NUL
    for a, b in zip(left[:count], right[:count]):
        if a != b:
            return ord(a) - ord(b)
        if a == NUL:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    body = _cstr(src)
    if size == 0:
        return "", len(body)
    return body[: size - 1], len(body)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so the result fits in ``size`` with its NUL.

    Returns the new text and the length the concatenation tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _cstr(dst)
    tail = _cstr(src)
    if size == 0 or len(head) > size - 1:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _cstr(text)
    if start > len(body):
        return ""
    return body[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return _cstr(first) + _cstr(second)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return _cstr(text).strip(_cstr(charset))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    sep = _single_char(sep)
    body = _cstr(text)
    if sep == NUL:
        return [body] if body else []
    return [word for word in body.split(sep) if word]


def strdup(text: str | None) -> str | None:
    """A copy of ``text`` up to its terminator; ``None`` stays ``None``."""
    if text is None:
        return None
    return _cstr(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` over each character."""
    if text is None:
        raise TypeError("strmapi needs a string")
    return "".join(func(index, char) for index, char in enumerate(_cstr(text)))


def striteri(
    buffer: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply ``func(index, char)`` to each character of ``buffer`` in place.

    Iteration stops at a NUL entry. When ``func`` returns a character it
    replaces the one at that index; ``None`` leaves it unchanged.
    """
    for index, char in enumerate(buffer):
        if char == NUL:
            break
        replacement = func(index, char)
        if replacement is not None:
            buffer[index] = replacement
    return buffer