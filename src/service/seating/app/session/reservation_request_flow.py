"""
Reservation Request Flow

Guest-side orchestration from "seats picked" to "request submitted":

    selecting -> confirming (contact form) -> submitting -> submitted | failed

The flow never marks seats as taken itself. After any mutating call it
re-reads availability from the server and lets `filter_unavailable` drop
whatever is no longer free. Once disposed, results of in-flight calls are
discarded instead of being applied to a view that no longer exists.
"""

from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import CustomBaseError
from src.platform.http.venue_api_client import NETWORK_ERROR
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.submit_seat_request_use_case import SubmitSeatRequestUseCase
from src.service.seating.app.dto.event_seating_dto import EventSeatingSnapshot
from src.service.seating.app.dto.seat_request_dto import (
    SeatRequestCommand,
    SeatRequestContact,
    SeatRequestResult,
)
from src.service.seating.app.query.get_event_seating_use_case import GetEventSeatingUseCase
from src.service.seating.domain.enum.seat_status import SeatDisableReason, SeatStatus
from src.service.seating.domain.layout_geometry import (
    build_seat_lookup_map,
    describe_seat_selection,
)
from src.service.seating.domain.seat_reason_message import seat_reason_message


LOAD_FAILED_MESSAGE = 'Failed to load seating data'
LOAD_NETWORK_ERROR_MESSAGE = 'Network error loading seating'
EMPTY_SELECTION_MESSAGE = 'Please select at least one seat'


class RequestFlowState(StrEnum):
    SELECTING = 'selecting'
    CONFIRMING = 'confirming'
    SUBMITTING = 'submitting'
    SUBMITTED = 'submitted'
    FAILED = 'failed'


class LoadState(StrEnum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'


@attrs.define
class ContactForm:
    customer_name: str = ''
    email: str = ''
    phone: str = ''
    special_requests: str = ''


@attrs.define(frozen=True)
class SeatClickOutcome:
    seat_id: str
    accepted: bool
    status: SeatStatus
    reason: Optional[SeatDisableReason] = None
    message: Optional[str] = None


class ReservationRequestFlow:
    def __init__(
        self,
        *,
        event_id: int,
        get_event_seating_use_case: GetEventSeatingUseCase,
        submit_seat_request_use_case: SubmitSeatRequestUseCase,
    ) -> None:
        self.event_id = event_id
        self.get_event_seating_use_case = get_event_seating_use_case
        self.submit_seat_request_use_case = submit_seat_request_use_case

        self.state = RequestFlowState.SELECTING
        self.load_state = LoadState.IDLE
        self.snapshot: Optional[EventSeatingSnapshot] = None
        self.selected: list[str] = []
        self.form = ContactForm()
        self.message: Optional[str] = None
        self.mounted = True

    @property
    def has_selection(self) -> bool:
        return bool(self.selected)

    @property
    def can_interact(self) -> bool:
        return self.load_state is LoadState.READY and self.state is RequestFlowState.SELECTING

    @property
    def cancel_requires_confirmation(self) -> bool:
        return self.has_selection or self.state in (
            RequestFlowState.CONFIRMING,
            RequestFlowState.FAILED,
        )

    def dispose(self) -> None:
        self.mounted = False

    # ====== Availability =======

    async def load(self) -> bool:
        """Fetch layout and availability; a failure blocks seat interaction until retry()"""
        self.load_state = LoadState.LOADING
        try:
            snapshot = await self.get_event_seating_use_case.get(event_id=self.event_id)
        except CustomBaseError as e:
            if not self.mounted:
                return False
            Logger.base.warning(
                f'⚠️ [REQUEST_FLOW] Seating load failed for event {self.event_id}: {e}'
            )
            self.load_state = LoadState.ERROR
            self.message = (
                LOAD_NETWORK_ERROR_MESSAGE
                if e.reason_code == NETWORK_ERROR
                else LOAD_FAILED_MESSAGE
            )
            return False

        if not self.mounted:
            return False
        self.snapshot = snapshot
        self.selected = snapshot.availability.filter_unavailable(self.selected)
        self.load_state = LoadState.READY
        if self.message in (LOAD_FAILED_MESSAGE, LOAD_NETWORK_ERROR_MESSAGE):
            self.message = None
        return True

    async def retry(self) -> bool:
        return await self.load()

    # ====== Selection =======

    def toggle_seat(self, seat_id: str) -> SeatClickOutcome:
        """A click on a blocked seat only yields a transient message; nothing changes"""
        if not self.can_interact or self.snapshot is None:
            return SeatClickOutcome(seat_id=seat_id, accepted=False, status=SeatStatus.AVAILABLE)

        availability = self.snapshot.availability
        status = availability.status_of(seat_id, self.selected)
        if not status.is_interactable:
            reason = availability.disable_reason_for(seat_id)
            return SeatClickOutcome(
                seat_id=seat_id,
                accepted=False,
                status=status,
                reason=reason,
                message=seat_reason_message(reason),
            )

        if status is SeatStatus.SELECTED:
            self.selected = [s for s in self.selected if s != seat_id]
            new_status = SeatStatus.AVAILABLE
        else:
            self.selected = [*self.selected, seat_id]
            new_status = SeatStatus.SELECTED
        self.message = None
        return SeatClickOutcome(seat_id=seat_id, accepted=True, status=new_status)

    def selection_summary(self) -> list[str]:
        if self.snapshot is None:
            return list(self.selected)
        lookup = build_seat_lookup_map(self.snapshot.document.elements)
        return [describe_seat_selection(seat_id, lookup.get(seat_id)) for seat_id in self.selected]

    # ====== Contact form =======

    def confirm_selection(self) -> bool:
        if self.state is not RequestFlowState.SELECTING:
            return False
        if not self.selected:
            self.message = EMPTY_SELECTION_MESSAGE
            return False
        self.state = RequestFlowState.CONFIRMING
        self.message = None
        return True

    def back_to_seats(self) -> None:
        """Leave the form: contact fields are cleared, the seat selection is kept"""
        if self.state not in (RequestFlowState.CONFIRMING, RequestFlowState.FAILED):
            return
        self.form = ContactForm()
        self.message = None
        self.state = RequestFlowState.SELECTING

    def start_over(self) -> None:
        if self.state is RequestFlowState.SUBMITTED:
            self.state = RequestFlowState.SELECTING
            self.message = None

    def update_contact(
        self,
        *,
        customer_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        special_requests: Optional[str] = None,
    ) -> None:
        if customer_name is not None:
            self.form.customer_name = customer_name
        if email is not None:
            self.form.email = email
        if phone is not None:
            self.form.phone = phone
        if special_requests is not None:
            self.form.special_requests = special_requests

    # ====== Submit =======

    def _build_command(self) -> SeatRequestCommand:
        return SeatRequestCommand(
            event_id=self.event_id,
            customer_name=self.form.customer_name,
            contact=SeatRequestContact(phone=self.form.phone, email=self.form.email),
            selected_seats=list(self.selected),
            special_requests=self.form.special_requests,
        )

    async def submit(self) -> Optional[SeatRequestResult]:
        if self.state not in (RequestFlowState.CONFIRMING, RequestFlowState.FAILED):
            return None

        self.state = RequestFlowState.SUBMITTING
        result = await self.submit_seat_request_use_case.submit(command=self._build_command())
        if not self.mounted:
            return result

        self.message = result.message
        if result.success:
            self.state = RequestFlowState.SUBMITTED
            self.selected = []
            self.form = ContactForm()
            await self.load()
            return result

        self.state = RequestFlowState.FAILED
        if result.reason_code == 'seat_conflict':
            await self.load()
            self.message = result.message
        return result
