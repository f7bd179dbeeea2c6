from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.event_seating_dto import EventSeatingSnapshot
from src.service.seating.app.interface.i_event_seating_query_repo import IEventSeatingQueryRepo


class GetEventSeatingUseCase:
    def __init__(self, event_seating_query_repo: IEventSeatingQueryRepo) -> None:
        self.event_seating_query_repo = event_seating_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        event_seating_query_repo: IEventSeatingQueryRepo = Depends(
            Provide[Container.event_seating_query_repo]
        ),
    ) -> Self:
        return cls(event_seating_query_repo=event_seating_query_repo)

    @Logger.io
    async def get(self, *, event_id: int) -> EventSeatingSnapshot:
        with self.tracer.start_as_current_span(
            'use_case.get_event_seating', attributes={'event.id': event_id}
        ):
            snapshot = await self.event_seating_query_repo.get_event_seating(event_id=event_id)
            Logger.base.info(
                f'🎫 [EVENT_SEATING] Event {event_id}: '
                f'{len(snapshot.availability.reserved)} reserved, '
                f'{len(snapshot.availability.pending)} pending, '
                f'{len(snapshot.availability.hold)} on hold'
            )
            return snapshot
