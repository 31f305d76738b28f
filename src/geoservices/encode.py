"""Wire formatting for request parameters.

Everything here is pure: the same input always yields the same string, so
tests can assert on exact request bodies and query strings.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from . import InvalidArgumentError

# Characters encodeURIComponent leaves alone, on top of quote()'s "_.-~".
_URI_COMPONENT_SAFE = "!*'()"

Scalar = str | int | float | bool


def format_number(value: int | float) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def encode_coordinate_pairs(pairs: Iterable[tuple[float, float]]) -> str:
    return ";".join(f"{format_number(x)},{format_number(y)}" for x, y in pairs)


def epoch_millis(value: date) -> int:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return int(round(value.timestamp() * 1000))


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool, date))


def _encode_scalar(value: Scalar | date) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, date):
        return str(epoch_millis(value))
    return value


def _sorted_members(value: set | frozenset) -> list[Any]:
    try:
        return sorted(value)
    except TypeError:
        return sorted(value, key=repr)


def _flat_items(value: Any) -> list[Any] | None:
    """Items of a list or set of scalars; sets are sorted for stable output."""
    if isinstance(value, (set, frozenset)):
        if not all(_is_scalar(item) for item in value):
            return None
        return _sorted_members(value)
    if isinstance(value, (list, tuple)) and all(_is_scalar(item) for item in value):
        return list(value)
    return None


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [_jsonable(item) for item in _sorted_members(value)]
    return value


def to_json_text(value: Any) -> str:
    try:
        return json.dumps(_jsonable(value), separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"Cannot encode a value of type {type(value).__name__}", {"type": type(value).__name__}
        ) from exc


def encode_param(value: Any) -> str:
    """Encode one parameter value into the form the service expects.

    Flat lists and sets of scalars (field names, object ids, time extents)
    become comma-delimited text, so an empty list is sent as an empty
    string. Anything structured becomes compact JSON text.
    """
    if value is None:
        raise TypeError("None cannot be encoded; drop the parameter instead")
    if _is_scalar(value):
        return _encode_scalar(value)
    items = _flat_items(value)
    if items is not None:
        return ",".join(_encode_scalar(item) for item in items)
    return to_json_text(value)


def encode_params(params: Mapping[str, Any]) -> dict[str, str]:
    return {key: encode_param(value) for key, value in params.items() if value is not None}


def build_query_string(params: Mapping[str, str]) -> str:
    return "&".join(
        f"{quote(key, safe=_URI_COMPONENT_SAFE)}={quote(value, safe=_URI_COMPONENT_SAFE)}"
        for key, value in params.items()
    )
