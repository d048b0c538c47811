"""World <-> canvas coordinate mapping for a rectangular viewport."""

from __future__ import annotations

from .point import CanvasPoint2D, Point2D


class Viewport:
    """A window onto world space, drawn on a canvas of pixels.

    ``center`` and ``width`` are in world units; the viewport height follows
    from the canvas aspect ratio. World Y grows upward, canvas Y downward.
    """

    def __init__(
        self,
        canvas_width: int = 800,
        canvas_height: int = 600,
        *,
        center: Point2D = Point2D(0.0, 0.0),
        width: float = 10.0,
    ) -> None:
        self.center = center
        self.width = float(width)
        if not self.width > 0.0:
            raise ValueError(f"width must be > 0, received {width}")
        self.canvas_width = 0
        self.canvas_height = 0
        self.setup_canvas(canvas_height, canvas_width)

    def setup_canvas(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ValueError(
                f"canvas size must be positive, received height={height}, width={width}"
            )
        self.canvas_height = int(height)
        self.canvas_width = int(width)

    def viewport_size(self) -> tuple[float, float]:
        """Return the ``(height, width)`` of the viewport in world units."""

        r = self.canvas_width / self.canvas_height
        return (self.width / r, self.width)

    @property
    def scale(self) -> float:
        """Pixels per world unit."""

        return self.canvas_width / self.width

    def _origin(self) -> tuple[float, float]:
        # World coordinates of the canvas' top-left corner.
        vp_height, vp_width = self.viewport_size()
        return (self.center.x - vp_width / 2.0, self.center.y + vp_height / 2.0)

    def as_canvas_point(self, p: Point2D) -> tuple[CanvasPoint2D, bool]:
        """Map ``p`` to pixels and report whether it falls on the canvas.

        The result can lie outside the canvas (negative, or past its size).
        """

        ox, oy = self._origin()
        r = self.scale
        pt = CanvasPoint2D(r * (p.x - ox), r * (oy - p.y))
        is_visible = 0.0 <= pt.x <= self.canvas_width and 0.0 <= pt.y <= self.canvas_height
        return pt, is_visible

    def as_world_point(self, c: CanvasPoint2D) -> Point2D:
        ox, oy = self._origin()
        r = self.scale
        return Point2D(ox + c.x / r, oy - c.y / r)

    def translate_viewport(self, x: float, y: float) -> None:
        self.center = self.center.translated(x, y)

    def zoom(self, factor: float) -> None:
        """Scale the visible world width by ``factor`` (> 1 zooms out)."""

        if not factor > 0.0:
            raise ValueError(f"zoom factor must be > 0, received {factor}")
        self.width *= factor


__all__ = ["Viewport"]
