"""
Seat Position Value Object

A seat is never stored on its own; its id is derived from the element's
section, row and 1-based seat number. The wire format is
`<section>-<row>-<seat_number>` and every consumer (renderer, booking modal,
admin exports) must produce and parse exactly this string.
"""

import attrs

from src.platform.exception.exceptions import DomainError


DEFAULT_SECTION = 'Section'
DEFAULT_ROW = 'Row'


def _clean(value: object, default: str) -> str:
    text = str(value or '').strip()
    return text or default


@attrs.define(frozen=True)
class SeatPosition:
    """Seat Position (Value Object)"""

    section: str = attrs.field(converter=lambda v: _clean(v, DEFAULT_SECTION))
    row: str = attrs.field(converter=lambda v: _clean(v, DEFAULT_ROW))
    seat_number: int = 1

    @property
    def seat_id(self) -> str:
        return f'{self.section}-{self.row}-{self.seat_number}'

    @classmethod
    def from_seat_id(cls, seat_id: str) -> 'SeatPosition':
        """
        Parse from the right: seat number, then row; whatever is left is the
        section, so sections like "Main-Floor" survive.
        """
        parts = str(seat_id or '').split('-')
        if len(parts) < 3:
            raise DomainError(
                f'Invalid seat ID format: {seat_id}. Expected: section-row-seat', 400
            )
        try:
            seat_number = int(parts[-1])
        except ValueError:
            raise DomainError(f'Invalid seat number in seat ID: {seat_id}', 400)
        section = '-'.join(parts[:-2])
        row = parts[-2]
        if not section.strip() or not row.strip() or seat_number < 1:
            raise DomainError(
                f'Invalid seat ID format: {seat_id}. Expected: section-row-seat', 400
            )
        return cls(section=section, row=row, seat_number=seat_number)
