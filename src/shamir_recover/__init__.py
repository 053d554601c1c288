# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Recover Shamir secrets from base-N encoded shares.

Typical use::

    from shamir_recover import load_request, recover

    secret = recover(load_request("shares.json"))
"""

from __future__ import annotations

from .config import RecoveryPolicy, load_policy
from .decoder import decode
from .errors import (
    DecodeError,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    MalformedRequest,
    RecoveryError,
)
from .interpolation import DEFAULT_PRIME, interpolate, interpolate_at_zero, mod_inverse
from .loader import load_request, loads_request, request_from_mapping
from .models import Point, RecoveryRequest, Share
from .recovery import (
    RecoveryResult,
    decode_shares,
    find_inconsistent_shares,
    recover,
    recover_detailed,
    select_shares,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PRIME",
    "DecodeError",
    "InsufficientShares",
    "InvalidBase",
    "InvalidDigit",
    "MalformedRequest",
    "Point",
    "RecoveryError",
    "RecoveryPolicy",
    "RecoveryRequest",
    "RecoveryResult",
    "Share",
    "decode",
    "decode_shares",
    "find_inconsistent_shares",
    "interpolate",
    "interpolate_at_zero",
    "load_policy",
    "load_request",
    "loads_request",
    "mod_inverse",
    "recover",
    "recover_detailed",
    "request_from_mapping",
    "select_shares",
]
