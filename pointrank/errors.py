"""Exception hierarchy for pointrank."""

from __future__ import annotations


class PointRankError(Exception):
    """Base class for every error raised by pointrank."""


class OutOfRangeError(PointRankError, IndexError):
    """A stable index (or tool index) that was never assigned."""

    def __init__(self, index: int, size: int, what: str = "stable index") -> None:
        super().__init__(f"{what} {index} is out of range for size {size}")
        self.index = index
        self.size = size


class UnsortedCloudError(PointRankError, RuntimeError):
    """A rank-dependent operation was called on a cloud that keeps no order."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"cannot {operation} in an unsorted PointCloud2D")
        self.operation = operation


class NaNCoordinateError(PointRankError, ValueError):
    """A coordinate is NaN, so axis ordering is undefined."""


class ConsistencyError(PointRankError, AssertionError):
    """The order indexes no longer agree with the stored points."""


class EmptyToolBoxError(PointRankError, ValueError):
    """A ToolBox needs at least one tool."""


__all__ = [
    "ConsistencyError",
    "EmptyToolBoxError",
    "NaNCoordinateError",
    "OutOfRangeError",
    "PointRankError",
    "UnsortedCloudError",
]
