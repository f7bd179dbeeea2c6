"""Seating Domain Enums"""

from src.service.seating.domain.enum.element_type import ElementType
from src.service.seating.domain.enum.seat_status import SeatDisableReason, SeatStatus
from src.service.seating.domain.enum.table_shape import TableShape

__all__ = ['ElementType', 'SeatDisableReason', 'SeatStatus', 'TableShape']
