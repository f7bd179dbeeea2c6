from typing import Any

from src.platform.exception.exceptions import NotFoundError, VenueApiError
from src.platform.http.venue_api_client import VenueApiClient
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.event_seating_dto import EventSeatingSnapshot
from src.service.seating.app.interface.i_event_seating_query_repo import IEventSeatingQueryRepo
from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.domain.seat_availability import AvailabilitySnapshot


def _seat_ids(payload: dict[str, Any], *keys: str) -> list[str]:
    for key in keys:
        value = payload.get(key)
        if isinstance(value, list):
            return [str(seat_id) for seat_id in value if seat_id]
    return []


class EventSeatingQueryRepoImpl(IEventSeatingQueryRepo):
    def __init__(self, venue_api_client: VenueApiClient) -> None:
        self.venue_api_client = venue_api_client

    def _payload_to_snapshot(self, event_id: int, payload: dict[str, Any]) -> EventSeatingSnapshot:
        enabled = payload.get('seatingEnabled', payload.get('seating_enabled', True))
        return EventSeatingSnapshot(
            event_id=event_id,
            document=LayoutDocument.from_dict(payload),
            availability=AvailabilitySnapshot(
                reserved=_seat_ids(payload, 'reservedSeats', 'reserved_seats'),
                pending=_seat_ids(payload, 'pendingSeats', 'pending_seats'),
                hold=_seat_ids(payload, 'holdSeats', 'hold_seats'),
            ),
            seating_enabled=str(enabled).lower() not in ('0', 'false', 'none', ''),
        )

    @Logger.io
    async def get_event_seating(self, *, event_id: int) -> EventSeatingSnapshot:
        response = await self.venue_api_client.get(f'/seating/event/{event_id}')
        if response.status_code == 404:
            raise NotFoundError(response.message or f'Event {event_id} not found')
        if not response.ok:
            raise VenueApiError(response.message or 'Failed to load seating data')
        return self._payload_to_snapshot(event_id, response.payload)
