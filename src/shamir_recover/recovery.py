# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Share selection and secret recovery.

Shares are taken in ascending index order. Under the default fail-fast
policy exactly the first ``threshold`` shares are decoded and any decoding
error aborts the recovery. The lenient policy skips undecodable shares and
keeps walking the sorted indices until ``threshold`` points are collected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from . import config
from .decoder import decode
from .errors import DecodeError, InsufficientShares
from .interpolation import interpolate, interpolate_at_zero
from .models import Point, RecoveryRequest, Share

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecoveryResult:
    secret: int
    used: tuple[Point, ...]
    skipped: tuple[int, ...] = ()

    @property
    def indices(self) -> list[int]:
        return [point.x for point in self.used]


def _resolve(policy: config.RecoveryPolicy | None) -> config.RecoveryPolicy:
    return policy if policy is not None else config.policy


def select_shares(request: RecoveryRequest) -> list[Share]:
    """Return the ``threshold`` shares with the lowest indices."""

    return [request.shares[i] for i in request.sorted_indices()[: request.threshold]]


def decode_share(share: Share) -> Point:
    """Decode one share, tagging any :class:`DecodeError` with its index."""

    try:
        y = decode(share.value, share.base)
    except DecodeError as exc:
        exc.index = share.index
        raise
    _logger.debug("decoded share %d (base %s, %d bits)", share.index, share.base, y.bit_length())
    return Point(share.index, y)


def decode_shares(
    request: RecoveryRequest, policy: config.RecoveryPolicy | None = None
) -> tuple[list[Point], list[int]]:
    """Decode the shares used for recovery.

    Returns the decoded points and, under the lenient policy, the indices
    that were skipped because they failed to decode.
    """

    policy = _resolve(policy)
    k = request.threshold
    if k < 1:
        raise ValueError("threshold must be at least 1")
    if len(request.shares) < k:
        raise InsufficientShares(k, len(request.shares))

    if not policy.lenient:
        return [decode_share(share) for share in select_shares(request)], []

    points: list[Point] = []
    skipped: list[int] = []
    for index in request.sorted_indices():
        if len(points) == k:
            break
        try:
            points.append(decode_share(request.shares[index]))
        except DecodeError as exc:
            _logger.warning("skipping %s", exc)
            skipped.append(index)
    if len(points) < k:
        raise InsufficientShares(k, len(points))
    return points, skipped


def recover_detailed(
    request: RecoveryRequest, policy: config.RecoveryPolicy | None = None
) -> RecoveryResult:
    policy = _resolve(policy)
    points, skipped = decode_shares(request, policy)
    _logger.debug(
        "interpolating shares %s over a %d-bit prime",
        [p.x for p in points],
        policy.prime.bit_length(),
    )
    secret = interpolate_at_zero(points, policy.prime)
    return RecoveryResult(secret=secret, used=tuple(points), skipped=tuple(skipped))


def recover(request: RecoveryRequest, policy: config.RecoveryPolicy | None = None) -> int:
    """Recover the secret (the polynomial's constant term) from ``request``."""

    return recover_detailed(request, policy).secret


def find_inconsistent_shares(
    request: RecoveryRequest,
    policy: config.RecoveryPolicy | None = None,
    *,
    result: RecoveryResult | None = None,
) -> list[int]:
    """Return indices of unused shares that do not lie on the recovered polynomial.

    Shares that cannot be decoded are reported as inconsistent as well.
    """

    policy = _resolve(policy)
    if result is None:
        result = recover_detailed(request, policy)
    used = set(result.indices)
    bad: list[int] = []
    for index in request.sorted_indices():
        if index in used:
            continue
        try:
            point = decode_share(request.shares[index])
        except DecodeError as exc:
            _logger.warning("cannot verify %s", exc)
            bad.append(index)
            continue
        expected = interpolate(result.used, point.x, policy.prime)
        if expected != point.y % policy.prime:
            bad.append(index)
    if bad:
        _logger.warning("shares %s do not lie on the recovered polynomial", bad)
    return bad


__all__ = [
    "RecoveryResult",
    "select_shares",
    "decode_share",
    "decode_shares",
    "recover",
    "recover_detailed",
    "find_inconsistent_shares",
]
