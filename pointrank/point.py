"""Point value types shared by the store, the indexes and the viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .errors import NaNCoordinateError


class Axis(IntEnum):
    """Coordinate axis; the value is the column in the point buffers."""

    X = 0
    Y = 1


def require_number(value, name: str = "coordinate") -> float:
    """Return ``value`` as a float, rejecting NaN."""

    result = float(value)
    if math.isnan(result):
        raise NaNCoordinateError(f"{name} must not be NaN")
    return result


@dataclass(frozen=True)
class Point2D:
    """A point in world coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", require_number(self.x, "x"))
        object.__setattr__(self, "y", require_number(self.y, "y"))

    def __getitem__(self, axis: int) -> float:
        return self.y if Axis(axis) is Axis.Y else self.x

    def squared_distance_to(self, other: Point2D) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: Point2D) -> float:
        return self.squared_distance_to(other) ** 0.5

    def translated(self, dx: float, dy: float) -> Point2D:
        return Point2D(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class CanvasPoint2D:
    """A point on the drawing surface, in pixels."""

    x: float
    y: float


__all__ = ["Axis", "CanvasPoint2D", "Point2D", "require_number"]
