import pytest

from src.service.seating.domain.enum.seat_status import SeatDisableReason
from src.service.seating.domain.seat_reason_message import (
    RESERVATION_REASON_FALLBACK_MESSAGE,
    RESERVATION_REASON_MESSAGES,
    reservation_failure_message,
    seat_reason_message,
)


pytestmark = pytest.mark.unit


class TestSeatReasonMessage:
    @pytest.mark.parametrize('reason', list(SeatDisableReason))
    def test_every_disable_reason_has_wording(self, reason):
        assert seat_reason_message(reason)

    def test_code_is_case_insensitive(self):
        assert seat_reason_message('HOLD') == 'Seat is on a temporary hold window.'

    @pytest.mark.parametrize('code', [None, 'selected', 3])
    def test_unknown_code(self, code):
        assert seat_reason_message(code) is None


class TestReservationFailureMessage:
    def test_conflict_lists_taken_seats(self):
        message = reservation_failure_message(
            'seat_conflict', conflicts=['Main Floor-A-1', 'Main Floor-A-2']
        )

        assert message == (
            'These seats were already taken: Main Floor-A-1, Main Floor-A-2. '
            'Select different seats.'
        )

    def test_conflict_without_seats_uses_generic_wording(self):
        assert reservation_failure_message('seat_conflict') == (
            RESERVATION_REASON_MESSAGES['seat_conflict']
        )

    def test_unmapped_code_uses_caller_fallback(self):
        assert reservation_failure_message('quota_exceeded', 'Server said no') == 'Server said no'

    @pytest.mark.parametrize('code', [None, '', 'unknown', 'quota_exceeded'])
    def test_default_fallback(self, code):
        assert reservation_failure_message(code) == RESERVATION_REASON_FALLBACK_MESSAGE
