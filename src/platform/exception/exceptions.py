from typing import Any, Optional


class CustomBaseError(Exception):
    """
    Base for errors that reach the HTTP boundary.

    `status_code` picks the response status, `reason_code` is the reservation
    failure code (see seat_reason_message) when one applies. `@Logger.io` logs
    these at warning level instead of dumping a traceback.
    """

    default_status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        *,
        reason_code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code or self.default_status_code
        self.reason_code = reason_code
        super().__init__(message)

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {'detail': self.message}
        if self.reason_code:
            content['reason'] = self.reason_code
        return content


class DomainError(CustomBaseError):
    default_status_code = 400


class ForbiddenError(CustomBaseError):
    default_status_code = 403


class NotFoundError(CustomBaseError):
    default_status_code = 404


class ConflictError(CustomBaseError):
    default_status_code = 409


class SeatConflictError(ConflictError):
    """Seats requested by the guest were taken before the request landed"""

    def __init__(self, message: str, conflicts: Optional[list[str]] = None) -> None:
        super().__init__(message, reason_code='seat_conflict')
        self.conflicts = list(conflicts or [])

    def to_content(self) -> dict[str, Any]:
        return {**super().to_content(), 'conflicts': self.conflicts}


class VenueApiError(CustomBaseError):
    """Venue REST API unreachable or answered with something we cannot use"""

    default_status_code = 502
