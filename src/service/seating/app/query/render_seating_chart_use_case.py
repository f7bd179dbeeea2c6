"""
Render Seating Chart Use Case

Read path behind the public reference chart and the booking modal: load the
layout (template or event snapshot), resolve availability, project it with
the shared renderer.
"""

from collections.abc import Iterable
from typing import Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_event_seating_query_repo import IEventSeatingQueryRepo
from src.service.seating.app.interface.i_layout_repo import ILayoutRepo
from src.service.seating.app.renderer.seating_renderer import (
    RenderContext,
    RenderedChart,
    SeatingRenderer,
)
from src.service.seating.domain.seat_reason_message import reservation_failure_message


@attrs.define
class EventChartResult:
    chart: RenderedChart
    selected_seats: list[str]
    selection_summary: list[str]


class RenderSeatingChartUseCase:
    def __init__(
        self,
        layout_repo: ILayoutRepo,
        event_seating_query_repo: IEventSeatingQueryRepo,
        seating_renderer: SeatingRenderer,
    ) -> None:
        self.layout_repo = layout_repo
        self.event_seating_query_repo = event_seating_query_repo
        self.seating_renderer = seating_renderer
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        layout_repo: ILayoutRepo = Depends(Provide[Container.layout_repo]),
        event_seating_query_repo: IEventSeatingQueryRepo = Depends(
            Provide[Container.event_seating_query_repo]
        ),
        seating_renderer: SeatingRenderer = Depends(Provide[Container.seating_renderer]),
    ) -> Self:
        return cls(
            layout_repo=layout_repo,
            event_seating_query_repo=event_seating_query_repo,
            seating_renderer=seating_renderer,
        )

    @Logger.io
    async def render_layout_preview(
        self, *, layout_id: Optional[int] = None, viewport: Optional[tuple[float, float]] = None
    ) -> RenderedChart:
        with self.tracer.start_as_current_span(
            'use_case.render_layout_preview', attributes={'layout.id': layout_id or 0}
        ):
            if layout_id is None:
                document = await self.layout_repo.get_default()
            else:
                document = await self.layout_repo.get_by_id(layout_id=layout_id)
            return self.seating_renderer.render(
                document, context=RenderContext.EDITOR_PREVIEW, viewport=viewport
            )

    @Logger.io
    async def render_event_chart(
        self,
        *,
        event_id: int,
        selected: Iterable[str] = (),
        interactive: bool = True,
        viewport: Optional[tuple[float, float]] = None,
    ) -> EventChartResult:
        with self.tracer.start_as_current_span(
            'use_case.render_event_chart', attributes={'event.id': event_id}
        ):
            snapshot = await self.event_seating_query_repo.get_event_seating(event_id=event_id)
            if not snapshot.seating_enabled:
                raise DomainError(
                    reservation_failure_message('event_not_seating_enabled'),
                    reason_code='event_not_seating_enabled',
                )

            requested = list(selected)
            still_free = snapshot.availability.filter_unavailable(requested)
            dropped = len(requested) - len(still_free)
            if dropped:
                Logger.base.info(
                    f'⚠️ [RENDER_CHART] Dropped {dropped} stale seat(s) from selection '
                    f'for event {event_id}'
                )

            context = RenderContext.BOOKING_MODAL if interactive else RenderContext.REFERENCE_CHART
            chart = self.seating_renderer.render(
                snapshot.document,
                context=context,
                availability=snapshot.availability,
                selected=still_free,
                viewport=viewport,
            )
            return EventChartResult(
                chart=chart,
                selected_seats=still_free,
                selection_summary=self.seating_renderer.selection_summary(
                    snapshot.document, still_free
                ),
            )
