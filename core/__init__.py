"""Core primitives: base-N root decoding, polynomial synthesis, errors."""

from core.decoder import decode, parse_base, digit_value, MIN_BASE, MAX_BASE
from core.polynomial import Polynomial, coefficients_from_roots
from core import errors
