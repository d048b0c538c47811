"""Bounded nearest-point queries over the two axis order indexes."""

from __future__ import annotations

from typing import Optional

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array

from . import logger
from .axis_index import AxisOrderIndex
from .dtypes import COORD_DTYPE, INDEX_DTYPE, as_coords, as_index
from .point import Point2D
from .store import PointStore

DEFAULT_QUERY_RADIUS = 0.25


def _squared_distances(query: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Return squared distances from one ``(2,)`` query to ``(n, 2)`` points."""

    deltas = points - query[None, :]
    return np.sum(deltas * deltas, axis=-1)


def _pairwise_squared_distances(queries: Array, points: Array) -> Array:
    """Return squared pairwise distances with shape ``(n_queries, n_points)``."""

    deltas = queries[:, None, :] - points[None, :, :]
    return jnp.sum(deltas * deltas, axis=-1)


def validate_radius(radius: float) -> float:
    radius_f = float(radius)
    if not (radius_f > 0.0 and np.isfinite(radius_f)):
        raise ValueError(f"radius must be finite and > 0, received {radius}")
    return radius_f


def candidate_ranks(
    x_index: AxisOrderIndex,
    y_index: AxisOrderIndex,
    p: Point2D,
    radius: float,
) -> np.ndarray:
    """Return the stable indices inside the narrower axis window around ``p``.

    Points outside ``[p - radius, p + radius]`` on either axis cannot be within
    ``radius`` of ``p``, so the window of the sparser axis is a superset of
    every true match. The result is in rank order along that axis.
    """

    min_x, max_x = x_index.rank_range(p.x - radius, p.x + radius)
    min_y, max_y = y_index.rank_range(p.y - radius, p.y + radius)
    if max_x - min_x <= max_y - min_y:
        return x_index.sorted_view()[min_x:max_x]
    return y_index.sorted_view()[min_y:max_y]


def nearest_within_radius(
    store: PointStore,
    x_index: AxisOrderIndex,
    y_index: AxisOrderIndex,
    p: Point2D,
    radius: float = DEFAULT_QUERY_RADIUS,
) -> Optional[int]:
    """Return the stable index of the closest point strictly within ``radius``.

    Ties go to the first candidate in scan order. The window changes length
    from one query to the next, so it is scanned in numpy.
    """

    candidates = candidate_ranks(x_index, y_index, p, radius)
    if candidates.shape[0] == 0:
        logger.logger.debug("no candidates near (%g, %g)", p.x, p.y)
        return None

    query = np.array([p.x, p.y], dtype=COORD_DTYPE)
    d2 = _squared_distances(query, store.coordinates()[candidates])
    best = int(np.argmin(d2))
    if float(d2[best]) < radius * radius:
        return int(candidates[best])
    logger.logger.debug(
        "%d candidates near (%g, %g), none within %g", candidates.shape[0], p.x, p.y, radius
    )
    return None


def scan_nearest_within_radius(
    store: PointStore,
    queries: Array,
    radius: float = DEFAULT_QUERY_RADIUS,
) -> Array:
    """Dense reference query over every stored point.

    Returns one stable index per query row, or ``-1`` where nothing lies
    strictly within ``radius``. Ties go to the lowest stable index, which
    is not always the point ``nearest_within_radius`` picks: when several
    points sit at the same smallest distance, the two agree on the distance
    but may name different points.
    """

    queries_arr = as_coords(queries)
    if queries_arr.ndim != 2 or queries_arr.shape[1] != 2:
        raise ValueError(
            "queries must have shape (n_queries, 2); "
            f"received shape={tuple(queries_arr.shape)}"
        )
    n_queries = int(queries_arr.shape[0])
    if len(store) == 0:
        return jnp.full((n_queries,), -1, dtype=INDEX_DTYPE)

    d2 = _pairwise_squared_distances(queries_arr, store.as_array())
    best = jnp.argmin(d2, axis=1)
    best_d2 = jnp.take_along_axis(d2, best[:, None], axis=1)[:, 0]
    return as_index(jnp.where(best_d2 < radius * radius, best, -1))


__all__ = [
    "DEFAULT_QUERY_RADIUS",
    "candidate_ranks",
    "nearest_within_radius",
    "scan_nearest_within_radius",
    "validate_radius",
]
