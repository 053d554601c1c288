# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Runtime policy for secret recovery.

The field modulus and the share-failure policy live here so the library and
the command line agree on them. Both can be overridden through environment
variables without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .interpolation import DEFAULT_PRIME

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds the modulus and whether undecodable shares are skipped."""

    prime: int = DEFAULT_PRIME
    lenient: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.prime, bool) or not isinstance(self.prime, int) or self.prime <= 2:
            raise ValueError("prime must be an integer greater than 2")


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    prime = _load_int("SHAMIR_RECOVER_PRIME", DEFAULT_PRIME)
    if prime <= 2:
        prime = DEFAULT_PRIME
    return RecoveryPolicy(
        prime=prime,
        lenient=_load_bool("SHAMIR_RECOVER_LENIENT", False),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
