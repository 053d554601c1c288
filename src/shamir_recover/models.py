# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Value types flowing through a recovery."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping


@dataclass(frozen=True)
class Share:
    """One distributed share: its index, numeric base and encoded value."""

    index: int
    base: int | str
    value: str


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class RecoveryRequest:
    """``threshold`` shares out of ``total_shares`` are needed to recover."""

    total_shares: int
    threshold: int
    shares: Mapping[int, Share] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so the request cannot change after loading.
        object.__setattr__(self, "shares", MappingProxyType(dict(self.shares)))

    @classmethod
    def from_shares(cls, threshold: int, shares: Iterable[Share], *, total_shares: int | None = None) -> "RecoveryRequest":
        by_index: dict[int, Share] = {}
        for share in shares:
            if share.index in by_index:
                raise ValueError(f"duplicate share index {share.index}")
            by_index[share.index] = share
        total = len(by_index) if total_shares is None else total_shares
        return cls(total_shares=total, threshold=threshold, shares=by_index)

    def sorted_indices(self) -> list[int]:
        return sorted(self.shares)


__all__ = ["Share", "Point", "RecoveryRequest"]
