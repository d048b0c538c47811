"""pointrank: an incrementally maintained 2D point index for proximity queries."""

from jax import config as _jax_config

# Stable indices and coordinates are int64/float64 throughout.
_jax_config.update("jax_enable_x64", True)

from .axis_index import AxisOrderIndex
from .cloud import PointCloud2D, PointCloudConfig
from .consistency import check_axis_index, check_consistency
from .dtypes import COORD_DTYPE, INDEX_DTYPE, as_coords, as_index
from .errors import (
    ConsistencyError,
    EmptyToolBoxError,
    NaNCoordinateError,
    OutOfRangeError,
    PointRankError,
    UnsortedCloudError,
)
from .logger import set_debug
from .point import Axis, CanvasPoint2D, Point2D
from .protocols import HitTester, PointSource, Tool
from .query import (
    DEFAULT_QUERY_RADIUS,
    candidate_ranks,
    nearest_within_radius,
    scan_nearest_within_radius,
)
from .store import PointStore
from .toolbox import AddPointTool, DragPointTool, PanTool, ToolBox
from .viewport import Viewport

__all__ = [
    "COORD_DTYPE",
    "DEFAULT_QUERY_RADIUS",
    "INDEX_DTYPE",
    "AddPointTool",
    "Axis",
    "AxisOrderIndex",
    "CanvasPoint2D",
    "ConsistencyError",
    "DragPointTool",
    "EmptyToolBoxError",
    "HitTester",
    "NaNCoordinateError",
    "OutOfRangeError",
    "PanTool",
    "Point2D",
    "PointCloud2D",
    "PointCloudConfig",
    "PointRankError",
    "PointSource",
    "PointStore",
    "Tool",
    "ToolBox",
    "UnsortedCloudError",
    "Viewport",
    "as_coords",
    "as_index",
    "candidate_ranks",
    "check_axis_index",
    "check_consistency",
    "nearest_within_radius",
    "scan_nearest_within_radius",
    "set_debug",
]
