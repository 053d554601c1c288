# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy for secret recovery.

Share-level failures (:class:`DecodeError` and its subclasses) carry the
index of the offending share once orchestration has attached it, so a caller
can tell which entry of the input was malformed without digging further.
"""

from __future__ import annotations


class RecoveryError(Exception):
    """Base class for every failure raised by this package."""


class DecodeError(RecoveryError):
    """An encoded share value could not be turned into an integer."""

    def __init__(self, message: str, *, value: str | None = None, base: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
        self.base = base
        self.index: int | None = None

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"share {self.index}: {self.message}"


class InvalidDigit(DecodeError):
    def __init__(self, value: str, base: int, char: str = "", position: int = -1) -> None:
        if not char:
            message = f"empty value for base {base}"
        elif position < 0:
            message = f"invalid digit {char!r} for base {base}"
        else:
            message = f"invalid digit {char!r} at position {position} for base {base}"
        super().__init__(message, value=value, base=base)
        self.char = char
        self.position = position


class InvalidBase(DecodeError):
    def __init__(self, base: object, value: str | None = None) -> None:
        super().__init__(f"base {base!r} is outside the range 2..36", value=value, base=base)


class InsufficientShares(RecoveryError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"not enough shares: need {required}, have {available}")
        self.required = required
        self.available = available


class MalformedRequest(RecoveryError):
    """The input structure does not describe a recovery request."""


__all__ = [
    "RecoveryError",
    "DecodeError",
    "InvalidDigit",
    "InvalidBase",
    "InsufficientShares",
    "MalformedRequest",
]
