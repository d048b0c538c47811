"""Structural protocols for the collaborators around a point cloud."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from .point import Point2D

if TYPE_CHECKING:
    from .cloud import PointCloud2D
    from .viewport import Viewport


class PointSource(Protocol):
    """What a renderer needs: the points in stable-index order."""

    def points(self) -> tuple[Point2D, ...]: ...


class HitTester(Protocol):
    """Answers "which point is under the cursor?" in world space."""

    def test_world_point(self, p: Point2D) -> Optional[int]: ...


class Tool(Protocol):
    """Mouse interactions a ToolBox forwards to its active tool."""

    def on_mouse_move(self, cloud: PointCloud2D, viewport: Viewport, x: float, y: float) -> None: ...

    def on_mouse_down(self, cloud: PointCloud2D, viewport: Viewport, x: float, y: float) -> None: ...

    def on_mouse_up(self, cloud: PointCloud2D, viewport: Viewport, x: float, y: float) -> None: ...

    def on_wheel(
        self, cloud: PointCloud2D, viewport: Viewport, dy: float, x: float, y: float
    ) -> None: ...


__all__ = ["HitTester", "PointSource", "Tool"]
