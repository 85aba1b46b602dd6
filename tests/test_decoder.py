"""Tests for base-N digit string decoding."""

import random

import pytest
from core.decoder import decode, parse_base, digit_value
from core.errors import (DecodeError, InvalidBase, EmptyValue,
                         InvalidDigitChar, DigitOutOfRange)
from tests.utils import encode


def test_decimal():
    assert decode(10, "12345") == 12345


def test_hex_negative():
    assert decode(16, "-ff") == -255


def test_explicit_plus():
    assert decode(8, "+17") == 15


def test_base_as_text():
    assert decode("16", "ff") == 255
    assert decode(" 2 ", "101") == 5


def test_boundary_bases():
    assert decode(2, "1111") == 15
    assert decode(36, "zz") == 36 * 35 + 35


def test_whitespace_trimmed():
    assert decode(10, "  42\n") == 42
    assert decode(10, " -7 ") == -7


def test_leading_zeros():
    assert decode(10, "0007") == 7
    assert decode(2, "-0") == 0


def test_case_insensitive():
    for s in ["deadbeef", "DEADBEEF", "DeAdBeEf"]:
        assert decode(16, s) == 0xDEADBEEF
    assert decode(36, "Zz") == decode(36, "zZ")


def test_exact_beyond_64_bits():
    s = "f" * 64
    assert decode(16, s) == 2 ** 256 - 1
    assert decode(16, "-" + s) == -(2 ** 256 - 1)


def test_round_trip_against_reference():
    rnd = random.Random(42)
    for _ in range(200):
        base = rnd.randint(2, 36)
        value = rnd.getrandbits(rnd.randint(1, 300))
        digits = encode(value, base)
        assert decode(base, digits) == value
        assert encode(decode(base, digits), base) == digits


def test_sign_symmetry():
    rnd = random.Random(7)
    for _ in range(50):
        base = rnd.randint(2, 36)
        digits = encode(rnd.getrandbits(128), base)
        assert decode(base, "-" + digits) == -decode(base, digits)


def test_upper_lower_agree():
    rnd = random.Random(3)
    for _ in range(50):
        digits = encode(rnd.getrandbits(160), 36)
        assert decode(36, digits.upper()) == decode(36, digits.lower())


@pytest.mark.parametrize("base", [1, 37, 0, -10, "1", "37", "ten", "", "16.0",
                                  16.0, None, True, [16]])
def test_invalid_base(base):
    with pytest.raises(InvalidBase) as exc:
        decode(base, "0")
    assert exc.value.value == base


def test_parse_base():
    assert parse_base(2) == 2
    assert parse_base("36") == 36
    assert parse_base("+10") == 10


@pytest.mark.parametrize("digits", ["", "   ", "+", "-", " - "])
def test_empty_value(digits):
    with pytest.raises(EmptyValue):
        decode(10, digits)


def test_lone_sign_rejected_before_digit_check():
    # A lone sign is EmptyValue even though '-' is not a digit.
    with pytest.raises(EmptyValue):
        decode(2, "-")


@pytest.mark.parametrize("digits,char", [("12.5", "."), ("1_000", "_"),
                                         ("--5", "-"), ("1 2", " "),
                                         ("\u0661\u0662", "\u0661"),
                                         ("\u212a", "\u212a")])
def test_invalid_digit_char(digits, char):
    with pytest.raises(InvalidDigitChar) as exc:
        decode(36, digits)
    assert exc.value.char == char


def test_digit_out_of_range():
    with pytest.raises(DigitOutOfRange) as exc:
        decode(2, "2")
    assert exc.value.char == "2"
    assert exc.value.base == 2


def test_digit_out_of_range_uppercase():
    with pytest.raises(DigitOutOfRange) as exc:
        decode("16", "1G")
    assert exc.value.char == "G"
    assert exc.value.base == 16


def test_digit_equal_to_base_rejected():
    with pytest.raises(DigitOutOfRange):
        decode(10, "a")
    assert decode(11, "a") == 10


def test_non_text_value():
    with pytest.raises(DecodeError):
        decode(10, 42)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode(37, "0")


def test_digit_value():
    assert digit_value("0") == 0
    assert digit_value("9") == 9
    assert digit_value("a") == 10
    assert digit_value("Z") == 35
    with pytest.raises(InvalidDigitChar):
        digit_value("!")


def test_base_text_with_leading_zeros():
    assert parse_base("0016") == 16
    assert decode("000" * 2000 + "36", "z") == 35


@pytest.mark.parametrize("base", ["1" * 5000, "100", "0" * 10 + "123"])
def test_long_base_text(base):
    with pytest.raises(InvalidBase) as exc:
        decode(base, "0")
    assert exc.value.value == base
