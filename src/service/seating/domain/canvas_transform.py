"""
Canvas coordinate math shared by the editor and the renderer.

Positions are stored as percentages of the unscaled canvas box. The editor
wraps that box in a `translate(pan) scale(zoom)` transform anchored at the
box's top-left corner, so a pointer position is mapped back by undoing the
transform in reverse order: subtract the box origin, subtract the pan,
divide by the zoom, then divide by the unscaled box size.
"""

import math

import attrs

from src.service.seating.domain.value_object.canvas import CanvasRect, PanOffset


MIN_PERCENT = 0.0
MAX_PERCENT = 100.0
MIN_ZOOM = 0.25
MAX_ZOOM = 3.0


@attrs.define(frozen=True)
class CanvasPoint:
    x: float
    y: float


@attrs.define(frozen=True)
class FitTransform:
    """Uniform scale plus offsets that centre the scaled canvas in a viewport"""

    scale: float
    offset_x: float
    offset_y: float


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_percent(value: float) -> float:
    return min(MAX_PERCENT, max(MIN_PERCENT, value))


def clamp_zoom(zoom: float) -> float:
    return min(MAX_ZOOM, max(MIN_ZOOM, zoom))


def snap_to_grid(value: float, grid_size: float, enabled: bool = True) -> float:
    """
    round(v / g) * g, clamped and rounded to two decimals. The live drag
    ghost and the committed drop both call this, so they always agree.
    """
    if enabled and grid_size > 0:
        value = round_half_up(value / grid_size) * grid_size
    return round(clamp_percent(value), 2)


def normalize_rotation(degrees: float) -> float:
    return degrees % 360


def rotate_by(rotation: float, delta: float) -> float:
    return normalize_rotation(rotation + delta)


def screen_to_canvas_percent(
    client_x: float,
    client_y: float,
    canvas_rect: CanvasRect,
    zoom: float = 1.0,
    pan: PanOffset | None = None,
) -> CanvasPoint:
    pan = pan or PanOffset()
    zoom = zoom if zoom > 0 else 1.0
    if canvas_rect.width <= 0 or canvas_rect.height <= 0:
        return CanvasPoint(MIN_PERCENT, MIN_PERCENT)
    local_x = (client_x - canvas_rect.left - pan.x) / zoom
    local_y = (client_y - canvas_rect.top - pan.y) / zoom
    return CanvasPoint(
        clamp_percent(local_x / canvas_rect.width * 100),
        clamp_percent(local_y / canvas_rect.height * 100),
    )


def canvas_percent_to_screen(
    x_percent: float,
    y_percent: float,
    canvas_rect: CanvasRect,
    zoom: float = 1.0,
    pan: PanOffset | None = None,
) -> CanvasPoint:
    pan = pan or PanOffset()
    return CanvasPoint(
        canvas_rect.left + pan.x + x_percent / 100 * canvas_rect.width * zoom,
        canvas_rect.top + pan.y + y_percent / 100 * canvas_rect.height * zoom,
    )


def pixel_delta_to_percent(
    dx: float, dy: float, canvas_width: float, canvas_height: float, zoom: float = 1.0
) -> CanvasPoint:
    """On-screen drag distance to a percentage delta of the unscaled canvas"""
    zoom = zoom if zoom > 0 else 1.0
    if canvas_width <= 0 or canvas_height <= 0:
        return CanvasPoint(0.0, 0.0)
    return CanvasPoint(dx / zoom / canvas_width * 100, dy / zoom / canvas_height * 100)


def fit_to_viewport(
    canvas_width: float,
    canvas_height: float,
    viewport_width: float,
    viewport_height: float,
    *,
    padding: float = 0.0,
    max_scale: float = 1.0,
) -> FitTransform:
    available_w = max(viewport_width - 2 * padding, 0)
    available_h = max(viewport_height - 2 * padding, 0)
    if canvas_width <= 0 or canvas_height <= 0 or available_w <= 0 or available_h <= 0:
        return FitTransform(scale=1.0, offset_x=0.0, offset_y=0.0)
    scale = min(available_w / canvas_width, available_h / canvas_height, max_scale)
    return FitTransform(
        scale=scale,
        offset_x=(viewport_width - canvas_width * scale) / 2,
        offset_y=(viewport_height - canvas_height * scale) / 2,
    )
