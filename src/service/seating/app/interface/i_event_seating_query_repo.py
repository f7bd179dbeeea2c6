from abc import ABC, abstractmethod

from src.service.seating.app.dto.event_seating_dto import EventSeatingSnapshot


class IEventSeatingQueryRepo(ABC):
    @abstractmethod
    async def get_event_seating(self, *, event_id: int) -> EventSeatingSnapshot:
        """Layout snapshot of the event plus its reserved / pending / hold seat ids"""
        pass
