"""
Canvas value objects

Element and stage positions are percentages of the canvas box; stage and
canvas sizes are pixels. Zoom and pan never touch these values.
"""

from typing import Any

import attrs


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_int(value: Any, default: int) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


@attrs.define(frozen=True)
class StagePosition:
    x: float = 50.0
    y: float = 10.0

    @classmethod
    def from_dict(cls, data: Any, default: 'StagePosition | None' = None) -> 'StagePosition':
        base = default or cls()
        if not isinstance(data, dict):
            return base
        return cls(x=_as_float(data.get('x'), base.x), y=_as_float(data.get('y'), base.y))

    def to_dict(self) -> dict[str, float]:
        return {'x': round(self.x, 2), 'y': round(self.y, 2)}


@attrs.define(frozen=True)
class StageSize:
    width: int = 200
    height: int = 80

    @classmethod
    def from_dict(cls, data: Any, default: 'StageSize | None' = None) -> 'StageSize':
        base = default or cls()
        if not isinstance(data, dict):
            return base
        return cls(
            width=_as_int(data.get('width'), base.width),
            height=_as_int(data.get('height'), base.height),
        )

    def to_dict(self) -> dict[str, int]:
        return {'width': self.width, 'height': self.height}


@attrs.define(frozen=True)
class CanvasSettings:
    width: int = 1200
    height: int = 800

    @classmethod
    def from_dict(cls, data: Any, default: 'CanvasSettings | None' = None) -> 'CanvasSettings':
        base = default or cls()
        if not isinstance(data, dict):
            return base
        return cls(
            width=_as_int(data.get('width'), base.width),
            height=_as_int(data.get('height'), base.height),
        )

    def to_dict(self) -> dict[str, int]:
        return {'width': self.width, 'height': self.height}


@attrs.define(frozen=True)
class CanvasRect:
    """Screen-space box of the canvas before zoom/pan is applied"""

    left: float
    top: float
    width: float
    height: float


@attrs.define(frozen=True)
class PanOffset:
    x: float = 0.0
    y: float = 0.0
