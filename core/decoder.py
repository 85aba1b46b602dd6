"""Decoding of base-N digit strings (N in 2..36) into exact integers."""

import string

from core.errors import (DecodeError, InvalidBase, EmptyValue,
                         InvalidDigitChar, DigitOutOfRange)

MIN_BASE = 2
MAX_BASE = 36

# ASCII only: str.lower() would fold e.g. the Kelvin sign onto 'k'.
_DIGIT_VALUES = {ch: i for i, ch in enumerate(string.digits + string.ascii_lowercase)}
_DIGIT_VALUES.update({ch: i + 10 for i, ch in enumerate(string.ascii_uppercase)})


def parse_base(base) -> int:
    """Validate a base given as an int or as decimal text.

    Raises InvalidBase for anything that is not an integer in [2, 36].
    """
    if isinstance(base, bool):
        raise InvalidBase(base)
    if isinstance(base, int):
        value = base
    elif isinstance(base, str):
        text = base.strip()
        if text.startswith('+'):
            text = text[1:]
        if not text or not all(ch in string.digits for ch in text):
            raise InvalidBase(base)
        # Valid bases have at most two significant digits.
        text = text.lstrip('0') or '0'
        if len(text) > 2:
            raise InvalidBase(base)
        value = int(text)
    else:
        raise InvalidBase(base)
    if not MIN_BASE <= value <= MAX_BASE:
        raise InvalidBase(base)
    return value


def digit_value(ch: str) -> int:
    """Map '0'-'9' to 0-9 and 'a'-'z' (any case) to 10-35."""
    try:
        return _DIGIT_VALUES[ch]
    except KeyError:
        raise InvalidDigitChar(ch) from None


def decode(base, digits: str) -> int:
    """Decode a signed digit string in the given base.

    Surrounding whitespace is ignored and one leading '+' or '-' is allowed.
    Digits are accumulated most significant first, so the result is exact
    for any length.
    """
    radix = parse_base(base)
    if not isinstance(digits, str):
        raise DecodeError(f"Value must be text, got {type(digits).__name__}")

    s = digits.strip()
    negative = False
    if s[:1] in ('+', '-'):
        negative = s[0] == '-'
        s = s[1:]
    if not s:
        raise EmptyValue(digits)

    acc = 0
    for ch in s:
        d = digit_value(ch)
        if d >= radix:
            raise DigitOutOfRange(ch, radix)
        acc = acc * radix + d
    return -acc if negative else acc
