import pytest

from solong.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer[:3] == b"x" * 3
    assert buffer[3:] == b"def"


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert buffer == bytes([0x41]) * 4


def test_memset_count_too_large():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero():
    buffer = bytearray(b"hello")
    bzero(buffer, 4)
    assert buffer == bytes(4) + b"o"


def test_bzero_nothing():
    buffer = bytearray(b"hello")
    bzero(buffer, 0)
    assert buffer == b"hello"


def test_calloc_is_zeroed():
    block = calloc(3, 4)
    assert len(block) == 12
    assert not any(block)


def test_calloc_zero_sized():
    assert calloc(0, 8) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == 2
    assert memchr(data, ord("b"), len(data)) == 0


def test_memchr_respects_count():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_low_byte():
    data = b"\x00\x41"
    assert memchr(data, 0x141, 2) == 1


def test_memcmp_equal_and_signs():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    first, second = b"hello", b"help!"
    assert memcmp(first, second, 5) == -memcmp(second, first, 5)


def test_memcpy():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == b"abc..."


def test_memcpy_bounds():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == b"ab" + b"abcd"


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == b"cdef" + b"ef"


def test_memmove_same_place():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 1, 1, 5)
    assert buffer == b"abcdef"


def test_memmove_bounds():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)