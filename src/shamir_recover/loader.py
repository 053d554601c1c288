# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Build :class:`RecoveryRequest` objects from parsed input data.

The accepted shape is::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

JSON and YAML files are supported. Share values in YAML should be quoted,
otherwise YAML may read them as numbers in its own notation.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .decoder import parse_base
from .errors import InvalidBase, MalformedRequest
from .models import RecoveryRequest, Share

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise MalformedRequest(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise MalformedRequest(f"{what} must be an integer, got {value!r}")


def _share_from_entry(key: str, entry: Any) -> Share:
    index = _as_int(key, "share index")
    if index < 1:
        raise MalformedRequest(f"share index must be positive, got {index}")
    if not isinstance(entry, Mapping):
        raise MalformedRequest(f"share {index} must be a mapping with 'base' and 'value'")
    try:
        base = entry["base"]
        value = entry["value"]
    except KeyError as exc:
        raise MalformedRequest(f"share {index} is missing {exc.args[0]!r}") from None

    # An invalid base stays as given; it is reported only if the share is used.
    try:
        base = parse_base(base)
    except InvalidBase:
        pass
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise MalformedRequest(f"share {index} value must be a string, got {value!r}")
    return Share(index=index, base=base, value=value)


def request_from_mapping(data: Mapping[str, Any]) -> RecoveryRequest:
    """Convert already-parsed input data into a :class:`RecoveryRequest`."""

    if not isinstance(data, Mapping):
        raise MalformedRequest("input must be a mapping")
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise MalformedRequest(f"missing {KEYS_FIELD!r} section")
    if "k" not in keys:
        raise MalformedRequest("missing threshold 'k'")
    k = _as_int(keys["k"], "k")
    if k < 1:
        raise MalformedRequest(f"threshold k must be at least 1, got {k}")

    shares = {}
    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        share = _share_from_entry(str(key), entry)
        if share.index in shares:
            raise MalformedRequest(f"duplicate share index {share.index}")
        shares[share.index] = share

    n = _as_int(keys["n"], "n") if "n" in keys else len(shares)
    if n != len(shares):
        _logger.warning("keys.n is %d but %d shares were supplied", n, len(shares))
    return RecoveryRequest(total_shares=n, threshold=k, shares=shares)


def loads_request(text: str, *, fmt: str = "json") -> RecoveryRequest:
    """Parse ``text`` in ``fmt`` (``json`` or ``yaml``)."""

    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            raise ValueError(f"unsupported format {fmt!r}")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise MalformedRequest(f"cannot parse {fmt} input: {exc}") from exc
    return request_from_mapping(data)


def load_request(path: os.PathLike[str] | str) -> RecoveryRequest:
    """Read a request from a ``.json``, ``.yaml`` or ``.yml`` file."""

    p = Path(path)
    fmt = "yaml" if p.suffix.lower() in {".yaml", ".yml"} else "json"
    _logger.debug("loading %s request from %s", fmt, p)
    return loads_request(p.read_text(encoding="utf-8"), fmt=fmt)


__all__ = ["request_from_mapping", "loads_request", "load_request"]
