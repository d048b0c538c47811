"""Local dtype policy for pointrank buffers."""

import jax.numpy as jnp
import numpy as np

# Keep rank/stable-index contracts consistent across pointrank artifacts.
INDEX_DTYPE = np.int64
COORD_DTYPE = np.float64


def as_index(x):
    """Convert a scalar/array to pointrank index dtype."""
    return jnp.asarray(x, dtype=INDEX_DTYPE)


def as_coords(x):
    """Convert a scalar/array to pointrank coordinate dtype."""
    return jnp.asarray(x, dtype=COORD_DTYPE)


__all__ = ["COORD_DTYPE", "INDEX_DTYPE", "as_coords", "as_index"]
