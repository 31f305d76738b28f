"""Location normalization for network analysis inputs.

Callers may describe a point as a ``[x, y]`` pair, ``{"lat", "long"}``,
``{"latitude", "longitude"}`` or ``{"x", "y"}``. All of them become a
``CoordinatePair`` (longitude first). Values are remapped, never altered.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from pydantic import BaseModel

from geoservices import InvalidArgumentError
from geoservices.encode import encode_coordinate_pairs
from geoservices.schemas import FeatureSet
from geoservices.shaping import is_feature_set

from .schemas import CoordinatePair, Location, LocationsInput

# Checked in order; the first key present decides the shape.
_KEYED_SHAPES = (
    ("x", "x", "y"),
    ("lat", "long", "lat"),
    ("latitude", "longitude", "latitude"),
)


def _ordinate(value: Any, name: str, index: int | None) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidArgumentError(
            f"Location {name} must be a finite number, got {value!r}",
            {"index": index, "field": name},
        )
    return value


def normalize_location(value: Location, index: int | None = None) -> CoordinatePair:
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 2:
            raise InvalidArgumentError(
                f"Coordinate pairs need exactly two values, got {len(value)}",
                {"index": index},
            )
        return CoordinatePair(_ordinate(value[0], "x", index), _ordinate(value[1], "y", index))

    if isinstance(value, Mapping):
        for marker, x_key, y_key in _KEYED_SHAPES:
            if marker not in value:
                continue
            missing = [key for key in (x_key, y_key) if key not in value]
            if missing:
                raise InvalidArgumentError(
                    f"Location with {marker!r} is missing {', '.join(missing)}",
                    {"index": index},
                )
            return CoordinatePair(
                _ordinate(value[x_key], x_key, index),
                _ordinate(value[y_key], y_key, index),
            )

    raise InvalidArgumentError(f"Unrecognized location: {value!r}", {"index": index})


def normalize_locations(values: Sequence[Location]) -> list[CoordinatePair]:
    """Normalize every element, keeping input order.

    One bad element rejects the whole list: list position identifies the
    facility or stop in the solve.
    """
    return [normalize_location(value, index) for index, value in enumerate(values)]


def encode_locations(value: LocationsInput) -> str | Mapping[str, Any]:
    """Wire value for ``facilities``/``incidents``/``stops``/``barriers``.

    Feature sets go out as JSON text; lists of locations as ``x,y;x,y``.
    """
    if isinstance(value, FeatureSet):
        return value.to_wire()
    if is_feature_set(value):
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidArgumentError(f"Expected a list of locations or a feature set, got {type(value).__name__}")
    return encode_coordinate_pairs(normalize_locations(value))
