"""Seat request DTOs for the reservation request flow."""

from typing import Any, List, Optional

import attrs


@attrs.define
class SeatRequestContact:
    phone: str = ''
    email: str = ''


@attrs.define
class SeatRequestCommand:
    """Guest request for a set of seats at one event"""

    event_id: int
    customer_name: str
    contact: SeatRequestContact
    selected_seats: List[str]
    special_requests: str = ''

    def to_payload(self) -> dict[str, Any]:
        return {
            'event_id': self.event_id,
            'customer_name': self.customer_name.strip(),
            'contact': {
                'email': self.contact.email.strip(),
                'phone': self.contact.phone.strip(),
            },
            'selected_seats': list(self.selected_seats),
            'special_requests': self.special_requests.strip(),
        }


@attrs.define
class SeatRequestResult:
    success: bool
    message: str
    reason_code: Optional[str] = None
    conflicts: List[str] = attrs.field(factory=list)
    request_id: Optional[int] = None
    hold_expires_at: Optional[str] = None
