"""Guest- and staff-facing wording for blocked seats and failed reservations"""

from collections.abc import Sequence
from typing import Optional


RESERVATION_REASON_FALLBACK_MESSAGE = (
    'Unable to complete the reservation. Try again or pick different seats.'
)

SEAT_REASON_MESSAGES: dict[str, str] = {
    'reserved': 'Seat already confirmed for another guest.',
    'pending': 'Seat is part of a pending request awaiting review.',
    'hold': 'Seat is on a temporary hold window.',
}

RESERVATION_REASON_MESSAGES: dict[str, str] = {
    'missing_selected_seats': 'Select at least one seat before saving the reservation.',
    'missing_event_id': 'The reservation is missing its event reference. Reload and pick an event.',
    'missing_customer_name': "Add the guest's name before confirming.",
    'missing_contact_phone': 'Add a phone number so staff can reach the guest.',
    'invalid_contact_email': 'Enter a valid email address for the guest.',
    'event_not_found': 'This event no longer exists or was removed.',
    'event_not_seating_enabled': 'Reserved seating is disabled for this event.',
    'seat_conflict': 'One or more seats were taken before this reservation could be saved.',
    'invalid_json': 'The submission could not be read. Refresh and try again.',
    'runtime_validation_error': (
        'The request was rejected before reaching the server. Check the form and retry.'
    ),
    'server_error': 'A server error prevented the reservation. Try again in a moment.',
    'unknown': RESERVATION_REASON_FALLBACK_MESSAGE,
}


def _normalize_code(code: object) -> str:
    return code.lower() if isinstance(code, str) else ''


def seat_reason_message(code: object) -> Optional[str]:
    return SEAT_REASON_MESSAGES.get(_normalize_code(code))


def reservation_failure_message(
    code: object, fallback: Optional[str] = None, conflicts: Sequence[str] | None = None
) -> str:
    normalized = _normalize_code(code)
    if normalized == 'seat_conflict' and conflicts:
        return f'These seats were already taken: {", ".join(conflicts)}. Select different seats.'
    if normalized in RESERVATION_REASON_MESSAGES:
        return RESERVATION_REASON_MESSAGES[normalized]
    return fallback or RESERVATION_REASON_FALLBACK_MESSAGE
