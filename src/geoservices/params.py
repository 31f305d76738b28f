"""Parameter merging for operation builders."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from . import InvalidArgumentError


def _overlay(target: dict[str, Any], tier: Mapping[str, Any] | None) -> None:
    if not tier:
        return
    for key, value in tier.items():
        # None marks the key as absent from this tier.
        if value is not None:
            target[key] = value


def merge_params(
    defaults: Mapping[str, Any],
    params: Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> Mapping[str, Any]:
    """Combine operation defaults, caller ``params`` and shorthand options.

    Priority is defaults < params < options, last write wins per key. The
    inputs are never written to; the result is a read-only view over a fresh
    dict, so the same caller objects can be reused across calls.
    """
    merged: dict[str, Any] = {}
    _overlay(merged, defaults)
    _overlay(merged, params)
    _overlay(merged, options)
    return MappingProxyType(merged)


def trim_url(url: str | None) -> str:
    if not url or not url.strip():
        raise InvalidArgumentError("A service url is required")
    return url.strip().rstrip("/")
