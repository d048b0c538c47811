"""Append-only point storage addressed by stable index."""

from __future__ import annotations

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array

from .dtypes import COORD_DTYPE
from .errors import OutOfRangeError
from .point import Axis, Point2D, require_number


def grow_capacity(current: int, required: int) -> int:
    """Return the buffer size to use so that ``required`` rows fit."""

    capacity = max(current, 4)
    while capacity < required:
        capacity *= 2
    return capacity


class PointStore:
    """Owns the point coordinates; stable indices are never reused.

    Coordinates live in a growable ``(capacity, 2)`` float64 buffer. Only the
    first ``len(store)`` rows are meaningful.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, received {capacity}")
        self._coords = np.zeros((capacity, 2), dtype=COORD_DTYPE)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return int(self._coords.shape[0])

    def _check_index(self, stable_index: int) -> int:
        index = int(stable_index)
        if not 0 <= index < self._size:
            raise OutOfRangeError(index, self._size)
        return index

    def append(self, point: Point2D) -> int:
        """Store ``point`` at the next stable index and return that index."""

        new_index = self._size
        if new_index >= self.capacity:
            grown = np.zeros((grow_capacity(self.capacity, new_index + 1), 2), dtype=COORD_DTYPE)
            grown[:new_index] = self._coords[:new_index]
            self._coords = grown
        self._coords[new_index] = (point.x, point.y)
        self._size += 1
        return new_index

    def get(self, stable_index: int) -> Point2D:
        index = self._check_index(stable_index)
        x, y = self._coords[index]
        return Point2D(float(x), float(y))

    def value(self, stable_index: int, axis: Axis) -> float:
        index = self._check_index(stable_index)
        return float(self._coords[index, int(axis)])

    def set_coordinate(self, stable_index: int, axis: Axis, value: float) -> None:
        """Overwrite one coordinate; the axis index must already be updated."""

        index = self._check_index(stable_index)
        self._coords[index, int(axis)] = require_number(value, Axis(axis).name.lower())

    def axis_values(self, axis: Axis) -> np.ndarray:
        """Return a live view of one coordinate column."""

        return self._coords[: self._size, int(axis)]

    def coordinates(self) -> np.ndarray:
        """Return a live ``(n, 2)`` view of the stored coordinates."""

        return self._coords[: self._size]

    def as_array(self) -> Array:
        """Return a ``(n, 2)`` JAX snapshot of the stored coordinates."""

        return jnp.array(self.coordinates(), dtype=COORD_DTYPE)

    def points(self) -> tuple[Point2D, ...]:
        return tuple(Point2D(float(x), float(y)) for x, y in self.coordinates())


__all__ = ["PointStore", "grow_capacity"]
