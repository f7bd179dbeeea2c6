"""
Seat geometry per table shape.

Every function returns the element footprint and the centre of each seat in
pixels, relative to the footprint's top-left corner, for a base size `s`.
Templates reproduce the canonical arrangement when the seat count matches the
shape; an explicit seat-count override falls back to the family's generic
arrangement so the number of drawn seats always equals `total_seats`.
"""

from collections.abc import Callable
import math

import attrs

from src.service.seating.domain.enum.table_shape import ShapeFamily
from src.service.seating.domain.layout_geometry import resolve_shape


DEFAULT_BASE_SIZE = 60


@attrs.define(frozen=True)
class SeatPlacement:
    seat_number: int
    x: float
    y: float
    size: int


@attrs.define(frozen=True)
class ShapeGeometry:
    shape: str
    family: ShapeFamily
    width: float
    height: float
    seats: list[SeatPlacement]
    is_fallback: bool = False


def _row(
    count: int, y: float, seat_size: int, gap: int, width: float, first: int = 1
) -> list[SeatPlacement]:
    start_x = (width - count * seat_size - (count - 1) * gap) / 2 + seat_size / 2
    return [
        SeatPlacement(first + i, start_x + i * (seat_size + gap), y, seat_size)
        for i in range(count)
    ]


def _ring(
    count: int, s: float, seat_size: int, radius_ratio: float, angles: list[float]
) -> list[SeatPlacement]:
    center = s / 2
    radius = s * radius_ratio
    seats = []
    for i, angle in enumerate(angles[:count]):
        rad = math.radians(angle)
        x = center + math.cos(rad) * radius
        y = center + math.sin(rad) * radius
        seats.append(SeatPlacement(i + 1, x, y, seat_size))
    return seats


def table_2(s: float) -> tuple[float, float, list[SeatPlacement]]:
    seat_size = math.floor(s * 0.32)
    gap = math.floor(s * 0.05)
    return s, s, [
        SeatPlacement(1, s / 2, gap + seat_size / 2, seat_size),
        SeatPlacement(2, s / 2, s - gap - seat_size / 2, seat_size),
    ]


def table_4(s: float) -> tuple[float, float, list[SeatPlacement]]:
    seat_size = math.floor(s * 0.28)
    gap = math.floor(s * 0.05)
    top_y = gap + seat_size / 2
    left_x = gap + seat_size / 2
    return s, s, [
        SeatPlacement(1, left_x, s / 2, seat_size),
        SeatPlacement(2, s / 2, top_y, seat_size),
        SeatPlacement(3, s - left_x, s / 2, seat_size),
        SeatPlacement(4, s / 2, s - top_y, seat_size),
    ]


def table_6(s: float) -> tuple[float, float, list[SeatPlacement]]:
    seat_size = min(28, math.floor(s * 0.28))
    gap = max(4, math.floor(s * 0.04))
    top_y = max(seat_size / 2 + gap, math.floor(s * 0.18))
    return s, s, _row(3, top_y, seat_size, gap, s) + _row(3, s - top_y, seat_size, gap, s, first=4)


def table_8(s: float) -> tuple[float, float, list[SeatPlacement]]:
    seat_size = math.floor(s * 0.22)
    gap = math.floor(s * 0.03)
    top_y = gap + seat_size / 2
    width = s * 1.2
    return width, s, (
        _row(4, top_y, seat_size, gap, width) + _row(4, s - top_y, seat_size, gap, width, first=5)
    )


def round_6(s: float) -> tuple[float, float, list[SeatPlacement]]:
    return s, s, _ring(6, s, math.floor(s * 0.28), 0.38, [270, 330, 30, 90, 150, 210])


def round_8(s: float) -> tuple[float, float, list[SeatPlacement]]:
    return s, s, _ring(8, s, math.floor(s * 0.24), 0.4, [i * 45 for i in range(8)])


def bar_6(s: float) -> tuple[float, float, list[SeatPlacement]]:
    return generic_bar(6, s)


def booth_4(s: float) -> tuple[float, float, list[SeatPlacement]]:
    seat_size = math.floor(s * 0.28)
    gap = math.floor(s * 0.08)
    top_y = gap + seat_size / 2
    left_x, right_x = s * 0.3, s * 0.7
    return s, s, [
        SeatPlacement(1, left_x, top_y, seat_size),
        SeatPlacement(2, right_x, top_y, seat_size),
        SeatPlacement(3, left_x, s - top_y, seat_size),
        SeatPlacement(4, right_x, s - top_y, seat_size),
    ]


def chair(s: float) -> tuple[float, float, list[SeatPlacement]]:
    side = s * 0.5
    return side, side, [SeatPlacement(1, side / 2, side / 2, math.floor(side * 0.8))]


def generic_rectangular(count: int, s: float) -> tuple[float, float, list[SeatPlacement]]:
    """Seats split front/back, the front row taking the odd seat"""
    seat_size = math.floor(s * 0.22)
    gap = max(2, math.floor(s * 0.03))
    front = math.ceil(count / 2)
    back = count - front
    width = max(s, front * (seat_size + gap) + gap)
    top_y = gap + seat_size / 2
    return width, s, (
        _row(front, top_y, seat_size, gap, width)
        + _row(back, s - top_y, seat_size, gap, width, first=front + 1)
    )


def generic_round(count: int, s: float) -> tuple[float, float, list[SeatPlacement]]:
    """Seats evenly spaced by angle, seat 1 at twelve o'clock"""
    angles = [270 + i * 360 / count for i in range(count)] if count else []
    return s, s, _ring(count, s, math.floor(s * 0.24), 0.4, angles)


def generic_bar(count: int, s: float) -> tuple[float, float, list[SeatPlacement]]:
    seat_size = math.floor(s * 0.28)
    gap = math.floor(s * 0.04)
    width = max(s * 2, count * (seat_size + gap) + gap)
    return width, s, _row(count, s / 2, seat_size, gap, width)


def standing_grid(count: int, s: float) -> tuple[float, float, list[SeatPlacement]]:
    if count <= 0:
        return s, s, []
    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    icon = math.floor(s / max(cols, rows) * 0.7)
    gap_x = (s - cols * icon) / (cols + 1)
    gap_y = (s - rows * icon) / (rows + 1)
    seats = []
    for i in range(count):
        col, row = i % cols, i // cols
        seats.append(
            SeatPlacement(
                i + 1,
                gap_x + col * (icon + gap_x) + icon / 2,
                gap_y + row * (icon + gap_y) + icon / 2,
                icon,
            )
        )
    return s, s, seats


TEMPLATES: dict[str, Callable[[float], tuple[float, float, list[SeatPlacement]]]] = {
    'table-2': table_2,
    'table-4': table_4,
    'table-6': table_6,
    'table-8': table_8,
    'round-6': round_6,
    'round-8': round_8,
    'bar-6': bar_6,
    'booth-4': booth_4,
    'chair': chair,
}

GENERIC: dict[ShapeFamily, Callable[[int, float], tuple[float, float, list[SeatPlacement]]]] = {
    ShapeFamily.RECTANGULAR: generic_rectangular,
    ShapeFamily.BOOTH: generic_rectangular,
    ShapeFamily.ROUND: generic_round,
    ShapeFamily.BAR: generic_bar,
    ShapeFamily.CHAIR: generic_bar,
    ShapeFamily.STANDING: standing_grid,
}


def geometry_for(
    table_shape: object, total_seats: int, size: float = DEFAULT_BASE_SIZE
) -> ShapeGeometry:
    """Never raises: an unknown shape is drawn as a six-seat rectangular table"""
    resolved = resolve_shape(table_shape)
    count = max(int(total_seats or 0), 0)
    if resolved.family is ShapeFamily.STANDING:
        width, height, seats = standing_grid(count, size)
    elif count == resolved.capacity:
        width, height, seats = TEMPLATES[resolved.name](size)
    else:
        width, height, seats = GENERIC[resolved.family](count, size)
    return ShapeGeometry(
        shape=resolved.name,
        family=resolved.family,
        width=width,
        height=height,
        seats=seats,
        is_fallback=resolved.is_fallback,
    )
