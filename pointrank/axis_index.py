"""Rank order of the stored points along one axis.

Each index keeps two dense integer buffers over the same stable indices:

* ``sorted[rank]`` is the stable index of the point at ``rank``;
* ``position[stable_index]`` is that point's rank.

They are exact inverses, and reading ``sorted`` by increasing rank visits the
points in non-decreasing axis order. Equal values keep insertion order,
because new points are placed after every existing equal value.
"""

from __future__ import annotations

import bisect

import numpy as np

from . import logger
from .dtypes import INDEX_DTYPE
from .errors import OutOfRangeError
from .point import Axis, require_number
from .store import PointStore, grow_capacity


class AxisOrderIndex:
    """Rank <-> stable index permutation for one axis of a ``PointStore``."""

    def __init__(self, store: PointStore, axis: Axis, capacity: int = 0) -> None:
        self.axis = Axis(axis)
        self._store = store
        self._sorted = np.zeros((capacity,), dtype=INDEX_DTYPE)
        self._position = np.zeros((capacity,), dtype=INDEX_DTYPE)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def sorted_view(self) -> np.ndarray:
        """Stable indices by increasing rank (live view)."""

        return self._sorted[: self._size]

    def position_view(self) -> np.ndarray:
        """Rank of each stable index (live view)."""

        return self._position[: self._size]

    def rank_of(self, stable_index: int) -> int:
        index = int(stable_index)
        if not 0 <= index < self._size:
            raise OutOfRangeError(index, self._size)
        return int(self._position[index])

    def find_insertion_rank(self, value: float) -> int:
        """Return the rank a point with ``value`` would take.

        Upper-bound search: a value equal to existing points lands right after
        the last of them. The result is always in ``[0, len(self)]``.
        """

        target = require_number(value, self.axis.name.lower())
        values = self._store.axis_values(self.axis)
        return bisect.bisect_right(self.sorted_view(), target, key=values.__getitem__)

    def rank_range(self, low: float, high: float) -> tuple[int, int]:
        """Return ``(start, stop)`` ranks of the points with value in ``(low, high]``."""

        return self.find_insertion_rank(low), self.find_insertion_rank(high)

    def _reserve(self, required: int) -> None:
        capacity = int(self._sorted.shape[0])
        if required <= capacity:
            return
        new_capacity = grow_capacity(capacity, required)
        for name in ("_sorted", "_position"):
            old = getattr(self, name)
            grown = np.zeros((new_capacity,), dtype=INDEX_DTYPE)
            grown[: self._size] = old[: self._size]
            setattr(self, name, grown)

    def insert(self, stable_index: int, rank: int) -> None:
        """Add the newest stable index at ``rank``, shifting larger ranks up."""

        n = self._size
        if int(stable_index) != n:
            raise ValueError(
                f"stable_index must be the next unindexed point ({n}), received {stable_index}"
            )
        if not 0 <= rank <= n:
            raise OutOfRangeError(rank, n + 1, what="rank")

        self._reserve(n + 1)
        live = self._position[:n]
        live[live >= rank] += 1
        self._position[n] = rank
        self._sorted[rank + 1 : n + 1] = self._sorted[rank:n]
        self._sorted[rank] = n
        self._size = n + 1

    def reposition(self, stable_index: int, new_value: float) -> int:
        """Move ``stable_index`` to the rank ``new_value`` belongs at.

        Must run before the store holds ``new_value``: the search sees the
        point still sitting at its old rank. Only the ranks between the old
        and the new slot are touched. Returns the new rank.
        """

        old_rank = self.rank_of(stable_index)
        new_rank = self.find_insertion_rank(new_value)

        if new_rank > old_rank:
            # The search counted the moving point itself at old_rank.
            new_rank = min(new_rank - 1, self._size - 1)
            self._sorted[old_rank:new_rank] = self._sorted[old_rank + 1 : new_rank + 1]
            self._sorted[new_rank] = stable_index
            touched = self._sorted[old_rank : new_rank + 1]
            self._position[touched] = np.arange(old_rank, new_rank + 1, dtype=INDEX_DTYPE)
        elif new_rank < old_rank:
            self._sorted[new_rank + 1 : old_rank + 1] = self._sorted[new_rank:old_rank]
            self._sorted[new_rank] = stable_index
            touched = self._sorted[new_rank : old_rank + 1]
            self._position[touched] = np.arange(new_rank, old_rank + 1, dtype=INDEX_DTYPE)

        if new_rank != old_rank:
            logger.logger.debug(
                "axis %s: point %d moved from rank %d to %d",
                self.axis.name,
                stable_index,
                old_rank,
                new_rank,
            )
        return new_rank


__all__ = ["AxisOrderIndex"]
