# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact decoding of base-N encoded share values.

Values are accumulated digit by digit with Python integers, so arbitrarily
long inputs decode without any loss of precision.
"""

from __future__ import annotations

from .errors import InvalidBase, InvalidDigit

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)

_DIGIT_VALUES = {char: pos for pos, char in enumerate(DIGITS)}


def parse_base(base: object) -> int:
    """Normalise ``base`` given as an int or a numeric string."""

    if isinstance(base, bool):
        raise InvalidBase(base)
    if isinstance(base, str):
        try:
            base = int(base.strip())
        except ValueError:
            raise InvalidBase(base) from None
    if not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return base


def decode(value: str, base: int) -> int:
    """Decode ``value`` written in ``base`` (2..36), case-insensitively."""

    base = parse_base(base)
    if not value:
        raise InvalidDigit(value, base)
    result = 0
    for position, char in enumerate(value):
        # str.lower maps some non-ASCII letters (KELVIN SIGN) onto the alphabet
        digit = _DIGIT_VALUES.get(char.lower()) if char.isascii() else None
        if digit is None or digit >= base:
            raise InvalidDigit(value, base, char, position)
        result = result * base + digit
    return result


__all__ = ["DIGITS", "MIN_BASE", "MAX_BASE", "decode", "parse_base"]
