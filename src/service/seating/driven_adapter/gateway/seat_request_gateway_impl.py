from typing import Any, Optional

from src.platform.http.venue_api_client import VenueApiClient, VenueApiResponse
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_request_dto import SeatRequestCommand, SeatRequestResult
from src.service.seating.app.interface.i_seat_request_gateway import ISeatRequestGateway


SUBMITTED_MESSAGE = 'Request submitted successfully! We will contact you soon.'


def _reason_code(response: VenueApiResponse) -> str:
    if response.status_code == 409 or response.payload.get('conflicts'):
        return 'seat_conflict'
    if response.status_code == 404:
        return 'event_not_found'
    if response.status_code >= 500:
        return 'server_error'
    if 'not available for this event' in response.message:
        return 'event_not_seating_enabled'
    if response.status_code == 400:
        return 'runtime_validation_error'
    return 'unknown'


def _request_id(payload: dict[str, Any]) -> Optional[int]:
    seat_request = payload.get('seat_request')
    raw = seat_request.get('id') if isinstance(seat_request, dict) else payload.get('id')
    return int(raw) if raw is not None and str(raw).isdigit() else None


class SeatRequestGatewayImpl(ISeatRequestGateway):
    def __init__(self, venue_api_client: VenueApiClient) -> None:
        self.venue_api_client = venue_api_client

    @Logger.io
    async def submit(self, *, command: SeatRequestCommand) -> SeatRequestResult:
        response = await self.venue_api_client.post('/seat-requests', json=command.to_payload())
        if response.ok:
            return SeatRequestResult(
                success=True,
                message=SUBMITTED_MESSAGE,
                request_id=_request_id(response.payload),
                hold_expires_at=response.payload.get('hold_expires_at'),
            )

        conflicts = response.payload.get('conflicts')
        return SeatRequestResult(
            success=False,
            message=response.message,
            reason_code=_reason_code(response),
            conflicts=[str(c) for c in conflicts] if isinstance(conflicts, list) else [],
        )
