"""
Submit Seat Request Use Case

Validates the guest's request the same way the reservation backend does, so
obvious mistakes never cost a round trip, then hands it to the backend. The
backend alone decides conflicts; its message is passed to the guest as is.
"""

import re
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import VenueApiError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_request_dto import SeatRequestCommand, SeatRequestResult
from src.service.seating.app.interface.i_seat_request_gateway import ISeatRequestGateway
from src.service.seating.domain.seat_reason_message import reservation_failure_message


NETWORK_ERROR_MESSAGE = 'Network error — please try again'

_EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def validate_seat_request(command: SeatRequestCommand) -> Optional[str]:
    """Reason code of the first problem, or None when the request looks valid"""
    if not [seat for seat in command.selected_seats if seat and seat.strip()]:
        return 'missing_selected_seats'
    if not command.event_id or command.event_id <= 0:
        return 'missing_event_id'
    if not command.customer_name.strip():
        return 'missing_customer_name'
    if not command.contact.phone.strip():
        return 'missing_contact_phone'
    email = command.contact.email.strip()
    if email and not _EMAIL_PATTERN.match(email):
        return 'invalid_contact_email'
    return None


class SubmitSeatRequestUseCase:
    def __init__(self, seat_request_gateway: ISeatRequestGateway) -> None:
        self.seat_request_gateway = seat_request_gateway
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_request_gateway: ISeatRequestGateway = Depends(
            Provide[Container.seat_request_gateway]
        ),
    ) -> Self:
        return cls(seat_request_gateway=seat_request_gateway)

    @Logger.io
    async def submit(self, *, command: SeatRequestCommand) -> SeatRequestResult:
        with self.tracer.start_as_current_span(
            'use_case.submit_seat_request',
            attributes={
                'event.id': command.event_id,
                'seat.quantity': len(command.selected_seats),
            },
        ):
            Logger.base.info(
                f'🎯 [SEAT_REQUEST] Submitting {len(command.selected_seats)} seat(s) '
                f'for event {command.event_id}'
            )

            reason = validate_seat_request(command)
            if reason:
                Logger.base.warning(f'⚠️ [SEAT_REQUEST] Rejected before submit: {reason}')
                return SeatRequestResult(
                    success=False, message=reservation_failure_message(reason), reason_code=reason
                )

            try:
                result = await self.seat_request_gateway.submit(command=command)
            except VenueApiError as e:
                span = trace.get_current_span()
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, e.message))
                return SeatRequestResult(
                    success=False, message=NETWORK_ERROR_MESSAGE, reason_code='network_error'
                )

            if result.success:
                Logger.base.info(f'✅ [SEAT_REQUEST] Request {result.request_id} accepted')
                return result

            if not result.message:
                result.message = reservation_failure_message(
                    result.reason_code, conflicts=result.conflicts
                )
            Logger.base.warning(
                f'⚠️ [SEAT_REQUEST] Backend rejected request: {result.reason_code} '
                f'conflicts={result.conflicts}'
            )
            trace.get_current_span().set_status(
                trace.Status(trace.StatusCode.ERROR, result.message)
            )
            return result
