"""
Seat Status Enum - Domain Value Object

Visual / interaction state of one seat. Declaration order is resolution
priority: the first status a seat qualifies for wins.
"""

from enum import StrEnum


class SeatStatus(StrEnum):
    RESERVED = 'reserved'
    HOLD = 'hold'
    PENDING = 'pending'
    SELECTED = 'selected'
    AVAILABLE = 'available'

    @property
    def is_interactable(self) -> bool:
        return self in (SeatStatus.SELECTED, SeatStatus.AVAILABLE)


class SeatDisableReason(StrEnum):
    RESERVED = 'reserved'
    PENDING = 'pending'
    HOLD = 'hold'
