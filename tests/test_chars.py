import string

import pytest

from solong.chars import (
    INT_MAX,
    INT_MIN,
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("char", ASCII)
def test_classification_matches_ascii_sets(char):
    assert is_alpha(char) == (char in string.ascii_letters)
    assert is_digit(char) == (char in string.digits)
    assert is_alnum(char) == (char in string.ascii_letters + string.digits)
    assert is_print(char) == (32 <= ord(char) < 127)
    assert is_ascii(char) is True


def test_classification_accepts_codes():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_print(127) is False
    assert is_alnum(ord("_")) is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("é") is False


@pytest.mark.parametrize("char", ASCII)
def test_case_mapping_matches_str_methods(char):
    assert to_upper(char) == char.upper()
    assert to_lower(char) == char.lower()


def test_case_mapping_keeps_ints_as_ints():
    assert to_upper(ord("b")) == ord("B")
    assert to_lower(ord("B")) == ord("b")
    assert to_upper(ord("!")) == ord("!")


def test_case_mapping_round_trip():
    for char in string.ascii_lowercase:
        assert to_lower(to_upper(char)) == char


def test_bad_character_argument():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        is_digit(None)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("+17xyz", 17),
        ("\t\n\v\f\r 8", 8),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-0", 0),
        ("12\x0034", 12),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_like_a_32_bit_int():
    assert atoi("2147483648") == INT_MIN
    assert INT_MIN <= atoi("99999999999999") <= INT_MAX


@pytest.mark.parametrize("number", [0, 7, -7, 1234, -98765, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(TypeError):
        itoa("12")