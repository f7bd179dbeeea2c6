from src.service.seating.domain.value_object.canvas import (
    CanvasRect,
    CanvasSettings,
    PanOffset,
    StagePosition,
    StageSize,
)
from src.service.seating.domain.value_object.seat_position import SeatPosition

__all__ = [
    'CanvasRect',
    'CanvasSettings',
    'PanOffset',
    'SeatPosition',
    'StagePosition',
    'StageSize',
]
