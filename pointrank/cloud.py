"""Public point-cloud API for pointrank."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, jaxtyped

from . import logger
from .axis_index import AxisOrderIndex
from .consistency import check_consistency
from .errors import UnsortedCloudError
from .point import Axis, Point2D, require_number
from .query import (
    DEFAULT_QUERY_RADIUS,
    nearest_within_radius,
    scan_nearest_within_radius,
    validate_radius,
)
from .store import PointStore


@dataclass(frozen=True)
class PointCloudConfig:
    """Resolved options for a ``PointCloud2D``."""

    maintain_order: bool = True
    query_radius: float = DEFAULT_QUERY_RADIUS
    check_consistency: bool = __debug__
    initial_capacity: int = 0

    def __post_init__(self) -> None:
        validate_radius(self.query_radius)
        if self.initial_capacity < 0:
            raise ValueError(
                f"initial_capacity must be >= 0, received {self.initial_capacity}"
            )


class PointCloud2D:
    """A growing set of 2D points that answers "is there a point near here?".

    Points are addressed by their stable index (insertion order). Unless the
    cloud was built with ``maintain_order=False``, two axis order indexes are
    updated in place on every push and move so that proximity queries only
    scan a narrow rank window instead of the whole cloud.
    """

    def __init__(self, config: Optional[PointCloudConfig] = None) -> None:
        cfg = PointCloudConfig() if config is None else config
        self.config = cfg
        self._store = PointStore(cfg.initial_capacity)
        self._indexes: tuple[AxisOrderIndex, ...] = ()
        if cfg.maintain_order:
            self._indexes = (
                AxisOrderIndex(self._store, Axis.X, cfg.initial_capacity),
                AxisOrderIndex(self._store, Axis.Y, cfg.initial_capacity),
            )

    @classmethod
    def with_capacity(cls, n: int, **overrides) -> PointCloud2D:
        """Create an empty cloud whose buffers already fit ``n`` points."""

        return cls(PointCloudConfig(initial_capacity=n, **overrides))

    @classmethod
    def new_unsorted(cls, **overrides) -> PointCloud2D:
        """Create a cloud that keeps no axis order (O(1) push, no queries)."""

        return cls(PointCloudConfig(maintain_order=False, **overrides))

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        mode = "sorted" if self.maintains_order else "unsorted"
        return f"PointCloud2D(n={len(self)}, {mode})"

    @property
    def maintains_order(self) -> bool:
        return self.config.maintain_order

    def _verify(self) -> None:
        if self.config.check_consistency:
            self.check_consistency()

    def _index(self, axis: Axis, operation: str) -> AxisOrderIndex:
        if not self.maintains_order:
            raise UnsortedCloudError(operation)
        return self._indexes[int(axis)]

    def check_consistency(self) -> None:
        """Raise ``ConsistencyError`` if any order invariant is broken."""

        check_consistency(self._store, self._indexes)

    def is_empty(self) -> bool:
        self._verify()
        return len(self._store) == 0

    def points(self) -> tuple[Point2D, ...]:
        """Snapshot of every point, in stable-index order."""

        return self._store.points()

    @jaxtyped(typechecker=beartype)
    def get(self, point_index: int) -> Point2D:
        return self._store.get(point_index)

    def as_array(self) -> Array:
        return self._store.as_array()

    @property
    def sorted_x(self) -> tuple[int, ...]:
        return tuple(int(i) for i in self._index(Axis.X, "read sorted_x").sorted_view())

    @property
    def sorted_y(self) -> tuple[int, ...]:
        return tuple(int(i) for i in self._index(Axis.Y, "read sorted_y").sorted_view())

    @property
    def positions_x(self) -> tuple[int, ...]:
        return tuple(int(i) for i in self._index(Axis.X, "read positions_x").position_view())

    @property
    def positions_y(self) -> tuple[int, ...]:
        return tuple(int(i) for i in self._index(Axis.Y, "read positions_y").position_view())

    def find_insertion_rank(self, axis: Axis, value: float) -> int:
        """Rank a point with ``value`` on ``axis`` would get if pushed now.

        Ties are placed after the existing equal values.
        """

        axis = Axis(axis)
        index = self._index(axis, f"find_position_{axis.name.lower()}")
        return index.find_insertion_rank(value)

    def find_point_position_x(self, new_x: float) -> int:
        return self.find_insertion_rank(Axis.X, new_x)

    def find_point_position_y(self, new_y: float) -> int:
        return self.find_insertion_rank(Axis.Y, new_y)

    @jaxtyped(typechecker=beartype)
    def push(self, p: Point2D) -> int:
        """Add ``p`` and return its stable index."""

        new_index = self._store.append(p)
        for index in self._indexes:
            rank = index.find_insertion_rank(p[index.axis])
            index.insert(new_index, rank)

        logger.logger.debug("pushed point %d at (%g, %g)", new_index, p.x, p.y)
        self._verify()
        return new_index

    def _update_axis(self, point_index: int, axis: Axis, new_value: float) -> None:
        value = require_number(new_value, axis.name.lower())
        # Validates point_index before any index is touched.
        self._store.value(point_index, axis)
        if self.maintains_order:
            self._indexes[int(axis)].reposition(point_index, value)
        self._store.set_coordinate(point_index, axis, value)
        self._verify()

    def update_point_x(self, point_index: int, new_x: float) -> None:
        """Move point ``point_index`` along X only."""

        self._update_axis(int(point_index), Axis.X, new_x)

    def update_point_y(self, point_index: int, new_y: float) -> None:
        """Move point ``point_index`` along Y only."""

        self._update_axis(int(point_index), Axis.Y, new_y)

    @jaxtyped(typechecker=beartype)
    def update_point(self, point_index: int, new_p: Point2D) -> None:
        """Move point ``point_index`` to ``new_p``.

        Axes whose value does not change are left alone, so their ranks stay
        exactly as they were.
        """

        current = self._store.get(point_index)
        if current.x != new_p.x:
            self._update_axis(point_index, Axis.X, new_p.x)
        if current.y != new_p.y:
            self._update_axis(point_index, Axis.Y, new_p.y)

    def translate_point(self, point_index: int, x_movement: float, y_movement: float) -> None:
        """Move point ``point_index`` by ``(x_movement, y_movement)``."""

        current = self._store.get(point_index)
        self.update_point(int(point_index), current.translated(x_movement, y_movement))

    @jaxtyped(typechecker=beartype)
    def test_world_point(self, p: Point2D) -> Optional[int]:
        """Return the stable index of the closest point within the query radius.

        The way this works is as follows:
        1. Find the rank windows of the points inside the ``p +- radius``
           square, on both axes.
        2. Keep the axis whose window holds fewer points.
        3. Compute the true distance of each candidate; the closest one wins
           if it lies strictly within the radius.
        """

        x_index = self._index(Axis.X, "test_world_point")
        y_index = self._index(Axis.Y, "test_world_point")
        return nearest_within_radius(
            self._store, x_index, y_index, p, self.config.query_radius
        )

    def scan_world_points(self, queries: Array, radius: Optional[float] = None) -> Array:
        """Brute-force ``test_world_point`` for each row of ``queries``.

        Works in both modes. Returns ``-1`` where no point is close enough.
        On equal-distance ties the lowest stable index wins, which may differ
        from the point ``test_world_point`` returns.
        """

        radius_f = self.config.query_radius if radius is None else validate_radius(radius)
        return scan_nearest_within_radius(self._store, queries, radius_f)

    def scan_world_point(self, p: Point2D, radius: Optional[float] = None) -> Optional[int]:
        found = int(self.scan_world_points(jnp.asarray([[p.x, p.y]]), radius)[0])
        return None if found < 0 else found


__all__ = ["PointCloudConfig", "PointCloud2D"]
