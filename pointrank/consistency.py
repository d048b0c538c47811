"""Exhaustive invariant checks for the point store and its axis indexes.

The checks run after every mutation when enabled, on arrays whose length
changes with each push, so they stay in numpy: eager ``jnp`` calls would
compile a fresh kernel for every new shape.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .axis_index import AxisOrderIndex
from .dtypes import INDEX_DTYPE
from .errors import ConsistencyError
from .store import PointStore


def _check_permutation(name: str, values: np.ndarray, n: int) -> None:
    if not np.array_equal(np.sort(values), np.arange(n, dtype=INDEX_DTYPE)):
        raise ConsistencyError(f"{name} is not a permutation of range({n})")


def check_axis_index(store: PointStore, index: AxisOrderIndex) -> None:
    """Raise ``ConsistencyError`` unless ``index`` is a valid order of ``store``."""

    n = len(store)
    axis = index.axis.name.lower()
    if len(index) != n:
        raise ConsistencyError(f"sorted_{axis} holds {len(index)} entries for {n} points")

    sorted_ids = index.sorted_view()
    positions = index.position_view()
    _check_permutation(f"sorted_{axis}", sorted_ids, n)
    _check_permutation(f"positions_{axis}", positions, n)

    mismatched = np.flatnonzero(positions[sorted_ids] != np.arange(n, dtype=INDEX_DTYPE))
    if mismatched.size > 0:
        rank = int(mismatched[0])
        stable = int(sorted_ids[rank])
        raise ConsistencyError(
            f"positions_{axis}[{stable}] = {int(positions[stable])}, "
            f"expected {rank} (sorted_{axis}[{rank}] = {stable})"
        )

    values = store.axis_values(index.axis)[sorted_ids]
    descending = np.flatnonzero(values[1:] < values[:-1])
    if descending.size > 0:
        rank = int(descending[0])
        raise ConsistencyError(
            f"not true: {axis} at rank {rank} [index:{int(sorted_ids[rank])}, "
            f"{axis}:{float(values[rank]):.6f}] <= {axis} at rank {rank + 1} "
            f"[index:{int(sorted_ids[rank + 1])}, {axis}:{float(values[rank + 1]):.6f}]"
        )


def check_consistency(store: PointStore, indexes: Sequence[AxisOrderIndex]) -> None:
    """Check every axis index against the store."""

    for index in indexes:
        check_axis_index(store, index)


__all__ = ["check_axis_index", "check_consistency"]
