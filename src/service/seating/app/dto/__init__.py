"""Seating Application DTOs"""

from src.service.seating.app.dto.event_seating_dto import EventSeatingSnapshot
from src.service.seating.app.dto.layout_dto import SaveLayoutResult
from src.service.seating.app.dto.seat_request_dto import (
    SeatRequestCommand,
    SeatRequestContact,
    SeatRequestResult,
)

__all__ = [
    'EventSeatingSnapshot',
    'SaveLayoutResult',
    'SeatRequestCommand',
    'SeatRequestContact',
    'SeatRequestResult',
]
