"""Visible window over the logical canvas, with pan and zoom gestures."""

import logging
import math
from dataclasses import dataclass, replace

from flightmap.config import (
    CANVAS_HEIGHT, CANVAS_WIDTH,
    MAX_VIEW_HEIGHT, MAX_VIEW_WIDTH, MIN_VIEW_HEIGHT, MIN_VIEW_WIDTH,
    ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR,
)
from flightmap.errors import InvalidZoomFactorError

log = logging.getLogger("flightmap")


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


@dataclass(frozen=True)
class Viewport:
    x: float = 0.0
    y: float = 0.0
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT

    def as_view_box(self):
        return f"{self.x:g} {self.y:g} {self.width:g} {self.height:g}"

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True)
class ViewportBounds:
    min_width: float = MIN_VIEW_WIDTH
    max_width: float = MAX_VIEW_WIDTH
    min_height: float = MIN_VIEW_HEIGHT
    max_height: float = MAX_VIEW_HEIGHT

    def __post_init__(self):
        if not (0 < self.min_width <= self.max_width and 0 < self.min_height <= self.max_height):
            raise ValueError(f"Inconsistent viewport bounds: {self}")


class ViewportController:
    """Owns the current viewport and the in-progress pan gesture, if any."""

    def __init__(self, default=None, bounds=None, screen_size=(CANVAS_WIDTH, CANVAS_HEIGHT)):
        self.default = default or Viewport()
        self.bounds = bounds or ViewportBounds()
        self.viewport = self.default
        self._pan_start = None
        self.screen_width = 0.0
        self.screen_height = 0.0
        self.set_screen_size(*screen_size)

    @property
    def is_panning(self):
        return self._pan_start is not None

    def set_screen_size(self, width, height):
        if not (width > 0 and height > 0):
            raise ValueError(f"Screen size must be positive, got {width}x{height}")
        self.screen_width = float(width)
        self.screen_height = float(height)

    # -- pan -----------------------------------------------------------

    def pointer_down(self, sx, sy):
        self._pan_start = (sx, sy)

    def pointer_move(self, sx, sy):
        """Translate the viewport by the drag delta since the last pointer event."""
        if self._pan_start is None:
            return self.viewport
        start_x, start_y = self._pan_start
        vp = self.viewport
        dx = (start_x - sx) * (vp.width / self.screen_width)
        dy = (start_y - sy) * (vp.height / self.screen_height)
        self.viewport = replace(vp, x=vp.x + dx, y=vp.y + dy)
        self._pan_start = (sx, sy)
        return self.viewport

    def pointer_up(self):
        self._pan_start = None

    # Leaving the surface must not leave a drag stuck on.
    pointer_leave = pointer_up

    # -- zoom ----------------------------------------------------------

    def zoom(self, factor):
        """Scale the viewport around its centre; factor < 1 zooms in."""
        try:
            valid = math.isfinite(factor) and factor > 0
        except TypeError:
            valid = False
        if not valid:
            raise InvalidZoomFactorError(factor)

        vp = self.viewport
        b = self.bounds
        new_w = clamp(vp.width * factor, b.min_width, b.max_width)
        new_h = clamp(vp.height * factor, b.min_height, b.max_height)
        self.viewport = Viewport(
            x=vp.x + (vp.width - new_w) / 2,
            y=vp.y + (vp.height - new_h) / 2,
            width=new_w,
            height=new_h,
        )
        log.debug("Zoom x%.3f -> %s", factor, self.viewport.as_view_box())
        return self.viewport

    def zoom_in(self):
        return self.zoom(ZOOM_IN_FACTOR)

    def zoom_out(self):
        return self.zoom(ZOOM_OUT_FACTOR)

    def reset(self):
        self.viewport = self.default
        self._pan_start = None
        return self.viewport
