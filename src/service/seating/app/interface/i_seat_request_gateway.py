from abc import ABC, abstractmethod

from src.service.seating.app.dto.seat_request_dto import SeatRequestCommand, SeatRequestResult


class ISeatRequestGateway(ABC):
    @abstractmethod
    async def submit(self, *, command: SeatRequestCommand) -> SeatRequestResult:
        """
        Hand the request to the reservation backend. The backend either
        accepts every seat or rejects the whole request with the conflicting ids.
        """
        pass
