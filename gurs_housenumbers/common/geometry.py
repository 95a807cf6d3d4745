"""Geometry helpers."""

from __future__ import annotations

import math
from typing import Any, Iterator

from gurs_housenumbers.common.constants import ROUNDING_FACTOR


def _iter_points(coordinates: object) -> Iterator[tuple[float, float]]:
    if not isinstance(coordinates, (list, tuple)):
        return
    if len(coordinates) >= 2 and all(isinstance(v, (int, float)) for v in coordinates[:2]):
        yield float(coordinates[0]), float(coordinates[1])
        return
    for item in coordinates:
        yield from _iter_points(item)


def bbox_min_corner(geometry: Any) -> tuple[float, float] | None:
    """Return the (lat, lon) of the lower-left corner of a geometry's bounding box."""
    if not geometry:
        return None
    points = list(_iter_points(geometry.get("coordinates")))
    if not points:
        return None
    min_x = min(point[0] for point in points)
    min_y = min(point[1] for point in points)
    return min_y, min_x


def round_coordinate(value: float) -> float:
    # Half away from zero, not banker's rounding.
    scaled = math.floor(abs(value) * ROUNDING_FACTOR + 0.5)
    return math.copysign(scaled, value) / ROUNDING_FACTOR
