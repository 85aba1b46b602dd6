"""Test utilities: reference oracles for decoding and polynomial expansion."""

import string

DIGITS = string.digits + string.ascii_lowercase


def encode(value: int, base: int) -> str:
    """Cleartext oracle: base-N digits of a non-negative int by repeated division."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    return "".join(reversed(out))


def evaluate(coeffs, x: int) -> int:
    """Horner evaluation of a low-to-high coefficient sequence."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def product(values) -> int:
    result = 1
    for v in values:
        result *= v
    return result


def raw_case(n, k, **entries):
    """Raw test case dict; entries given as e1=(base, value), e2=..."""
    raw = {"keys": {"n": n, "k": k}}
    for name, (base, value) in entries.items():
        raw[name[1:]] = {"base": base, "value": value}
    return raw
