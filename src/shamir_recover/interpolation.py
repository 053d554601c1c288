# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Lagrange interpolation over the prime field GF(p)."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Point

DEFAULT_PRIME = 2**521 - 1  # Mersenne prime, far above any realistic share value


def mod_inverse(a: int, m: int) -> int:
    """Return ``a**-1 mod m`` using the extended Euclidean algorithm.

    Raises ``ValueError`` when ``a`` has no inverse modulo ``m``.
    """

    if m <= 1:
        raise ValueError("modulus must be greater than 1")
    a %= m
    old_r, r = a, m
    old_s, s = 1, 0
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
    if old_r != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return old_s % m


def _as_points(points: Iterable[Point | tuple[int, int]]) -> list[Point]:
    result = [p if isinstance(p, Point) else Point(*p) for p in points]
    if not result:
        raise ValueError("at least one point is required")
    xs = [p.x for p in result]
    if len(set(xs)) != len(xs):
        raise ValueError("points must have distinct x values")
    return result


def interpolate(points: Sequence[Point | tuple[int, int]], x: int, prime: int) -> int:
    """Evaluate at ``x`` the lowest-degree polynomial through ``points``, mod ``prime``.

    ``prime`` must be a prime larger than every x difference so each
    denominator is invertible.
    """

    if prime <= 2:
        raise ValueError("prime must be greater than 2")
    pts = _as_points(points)
    total = 0
    for i, pi in enumerate(pts):
        num = 1
        den = 1
        for j, pj in enumerate(pts):
            if i == j:
                continue
            num = num * ((x - pj.x) % prime) % prime
            den = den * ((pi.x - pj.x) % prime) % prime
        term = (pi.y % prime) * num % prime * mod_inverse(den, prime) % prime
        total = (total + term) % prime
    return total


def interpolate_at_zero(points: Sequence[Point | tuple[int, int]], prime: int = DEFAULT_PRIME) -> int:
    """Recover the constant term of the polynomial through ``points``."""

    return interpolate(points, 0, prime)


__all__ = ["DEFAULT_PRIME", "mod_inverse", "interpolate", "interpolate_at_zero"]
