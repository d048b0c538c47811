"""Dispatch of mouse input to interchangeable interaction tools."""

from __future__ import annotations

from typing import Optional, Sequence

from . import logger
from .cloud import PointCloud2D
from .errors import EmptyToolBoxError, OutOfRangeError
from .point import CanvasPoint2D, Point2D
from .protocols import Tool
from .viewport import Viewport


class ToolBox:
    """Holds the tools and forwards every event to the active one.

    With nothing selected the first tool is active. A ToolBox cannot be empty.
    """

    def __init__(self, tools: Sequence[Tool], active: Optional[int] = None) -> None:
        self.tools: tuple[Tool, ...] = tuple(tools)
        if not self.tools:
            raise EmptyToolBoxError("ToolBox has no tools")
        self._active: Optional[int] = None
        if active is not None:
            self.select(active)

    def __len__(self) -> int:
        return len(self.tools)

    @property
    def active_index(self) -> int:
        return 0 if self._active is None else self._active

    @property
    def active_tool(self) -> Tool:
        return self.tools[self.active_index]

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.tools):
            raise OutOfRangeError(index, len(self.tools), what="tool index")
        self._active = index
        logger.logger.debug("active tool: %s", type(self.tools[index]).__name__)

    def on_mouse_move(self, cloud: PointCloud2D, viewport: Viewport, x: float, y: float) -> None:
        self.active_tool.on_mouse_move(cloud, viewport, x, y)

    def on_mouse_down(self, cloud: PointCloud2D, viewport: Viewport, x: float, y: float) -> None:
        self.active_tool.on_mouse_down(cloud, viewport, x, y)

    def on_mouse_up(self, cloud: PointCloud2D, viewport: Viewport, x: float, y: float) -> None:
        self.active_tool.on_mouse_up(cloud, viewport, x, y)

    def on_wheel(
        self, cloud: PointCloud2D, viewport: Viewport, dy: float, x: float, y: float
    ) -> None:
        self.active_tool.on_wheel(cloud, viewport, dy, x, y)


class _IdleTool:
    """Ignores every event; subclasses override what they handle."""

    def on_mouse_move(self, cloud, viewport, x, y) -> None:
        pass

    def on_mouse_down(self, cloud, viewport, x, y) -> None:
        pass

    def on_mouse_up(self, cloud, viewport, x, y) -> None:
        pass

    def on_wheel(self, cloud, viewport, dy, x, y) -> None:
        pass


class AddPointTool(_IdleTool):
    """Click to add a point."""

    def __init__(self) -> None:
        self.last_added: Optional[int] = None

    def on_mouse_down(self, cloud, viewport, x, y) -> None:
        world = viewport.as_world_point(CanvasPoint2D(x, y))
        self.last_added = cloud.push(world)


class DragPointTool(_IdleTool):
    """Grab the point under the cursor and drag it around."""

    def __init__(self) -> None:
        self.selected: Optional[int] = None
        self._anchor: Optional[Point2D] = None

    def on_mouse_down(self, cloud, viewport, x, y) -> None:
        world = viewport.as_world_point(CanvasPoint2D(x, y))
        self.selected = cloud.test_world_point(world)
        self._anchor = world if self.selected is not None else None

    def on_mouse_move(self, cloud, viewport, x, y) -> None:
        if self.selected is None or self._anchor is None:
            return
        world = viewport.as_world_point(CanvasPoint2D(x, y))
        cloud.translate_point(
            self.selected, world.x - self._anchor.x, world.y - self._anchor.y
        )
        self._anchor = world

    def on_mouse_up(self, cloud, viewport, x, y) -> None:
        self.selected = None
        self._anchor = None


class PanTool(_IdleTool):
    """Drag to move the viewport; wheel to zoom."""

    def __init__(self, zoom_step: float = 1.1) -> None:
        if not zoom_step > 1.0:
            raise ValueError(f"zoom_step must be > 1, received {zoom_step}")
        self.zoom_step = zoom_step
        self._anchor: Optional[CanvasPoint2D] = None

    def on_mouse_down(self, cloud, viewport, x, y) -> None:
        self._anchor = CanvasPoint2D(x, y)

    def on_mouse_move(self, cloud, viewport, x, y) -> None:
        if self._anchor is None:
            return
        # Dragging right moves the view left; canvas Y points down.
        r = viewport.scale
        viewport.translate_viewport((self._anchor.x - x) / r, (y - self._anchor.y) / r)
        self._anchor = CanvasPoint2D(x, y)

    def on_mouse_up(self, cloud, viewport, x, y) -> None:
        self._anchor = None

    def on_wheel(self, cloud, viewport, dy, x, y) -> None:
        if dy > 0:
            viewport.zoom(self.zoom_step)
        elif dy < 0:
            viewport.zoom(1.0 / self.zoom_step)


__all__ = ["AddPointTool", "DragPointTool", "PanTool", "ToolBox"]
