"""Smoke test: a scripted add/drag session against the indexed and dense queries.

    python examples/drag_session_smoke.py --n-points 500 --n-moves 2000
"""

from __future__ import annotations

import argparse
import time

import jax
import jax.numpy as jnp

from pointrank import (
    AddPointTool,
    DragPointTool,
    Point2D,
    PointCloud2D,
    PointCloudConfig,
    ToolBox,
    Viewport,
    set_debug,
)


def _make_points(n: int, seed: int, extent: float) -> jax.Array:
    key = jax.random.PRNGKey(seed)
    return jax.random.uniform(key, (n, 2), minval=-extent, maxval=extent, dtype=jnp.float64)


def _make_moves(n: int, seed: int) -> jax.Array:
    key = jax.random.PRNGKey(seed + 1)
    return jax.random.normal(key, (n, 2), dtype=jnp.float64)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--n-points", type=int, default=500)
    parser.add_argument("--n-moves", type=int, default=2000)
    parser.add_argument("--extent", type=float, default=20.0)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--check", action="store_true", help="check invariants after each step")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()
    set_debug(args.debug)

    cloud = PointCloud2D(
        PointCloudConfig(check_consistency=args.check, initial_capacity=args.n_points)
    )
    viewport = Viewport(canvas_width=1000, canvas_height=1000, width=2.0 * args.extent)

    adder = AddPointTool()
    toolbox = ToolBox([adder, DragPointTool()])
    for x, y in _make_points(args.n_points, args.seed, args.extent).tolist():
        c, _ = viewport.as_canvas_point(Point2D(x, y))
        toolbox.on_mouse_down(cloud, viewport, c.x, c.y)
    print(f"added {len(cloud)} points through {type(adder).__name__}")

    points = cloud.points()
    start = time.perf_counter()
    for step, (dx, dy) in enumerate(_make_moves(args.n_moves, args.seed).tolist()):
        cloud.translate_point(step % len(points), dx, dy)
    elapsed = time.perf_counter() - start
    print(f"{args.n_moves} moves in {elapsed:.3f}s")

    queries = _make_points(256, args.seed + 2, args.extent)
    scanned = cloud.scan_world_points(queries).tolist()
    mismatches = 0
    for (x, y), expected in zip(queries.tolist(), scanned):
        p = Point2D(x, y)
        found = cloud.test_world_point(p)
        if found is None or expected < 0:
            mismatches += int(found is not None or expected >= 0)
        else:
            # Equal-distance ties may name different points.
            d_found = cloud.get(found).squared_distance_to(p)
            mismatches += int(d_found != cloud.get(expected).squared_distance_to(p))
    hits = sum(1 for s in scanned if s >= 0)
    print(f"queries: {len(scanned)}, hits: {hits}, mismatches vs dense scan: {mismatches}")

    cloud.check_consistency()
    print("consistency: ok")


if __name__ == "__main__":
    main()
