from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.seating.app.dto.event_seating_dto import EventSeatingSnapshot
from src.service.seating.app.query.render_seating_chart_use_case import RenderSeatingChartUseCase
from src.service.seating.app.renderer.seating_renderer import RenderContext, SeatingRenderer
from src.service.seating.domain.seat_availability import AvailabilitySnapshot


pytestmark = pytest.mark.unit


class TestRenderSeatingChartUseCase:
    @pytest.fixture(autouse=True)
    def _setup_use_case(self, sample_document):
        self.document = sample_document
        self.layout_repo = AsyncMock()
        self.event_seating_query_repo = AsyncMock()
        self.use_case = RenderSeatingChartUseCase(
            layout_repo=self.layout_repo,
            event_seating_query_repo=self.event_seating_query_repo,
            seating_renderer=SeatingRenderer(),
        )

    @pytest.mark.asyncio
    async def test_default_layout_preview(self):
        self.layout_repo.get_default.return_value = self.document

        chart = await self.use_case.render_layout_preview()

        assert chart.context is RenderContext.EDITOR_PREVIEW
        assert len(chart.seats) == 7
        self.layout_repo.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_specific_layout_preview(self):
        self.layout_repo.get_by_id.return_value = self.document

        await self.use_case.render_layout_preview(layout_id=3, viewport=(800, 600))

        self.layout_repo.get_by_id.assert_awaited_once_with(layout_id=3)

    @pytest.mark.asyncio
    async def test_event_chart_drops_stale_selection(self):
        # Given: A-1 was reserved since the guest picked it
        self.event_seating_query_repo.get_event_seating.return_value = EventSeatingSnapshot(
            event_id=5,
            document=self.document,
            availability=AvailabilitySnapshot(reserved={'Main Floor-A-1'}),
        )

        # When
        result = await self.use_case.render_event_chart(
            event_id=5, selected=iter(['Main Floor-A-1', 'Main Floor-A-2'])
        )

        # Then
        assert result.chart.context is RenderContext.BOOKING_MODAL
        assert result.selected_seats == ['Main Floor-A-2']
        assert result.selection_summary == ['AB (Main Floor-A-2)']

    @pytest.mark.asyncio
    async def test_read_only_event_chart(self):
        self.event_seating_query_repo.get_event_seating.return_value = EventSeatingSnapshot(
            event_id=5, document=self.document
        )

        result = await self.use_case.render_event_chart(event_id=5, interactive=False)

        assert result.chart.context is RenderContext.REFERENCE_CHART
        assert not any(seat.interactable for seat in result.chart.seats)

    @pytest.mark.asyncio
    async def test_event_without_seating(self):
        self.event_seating_query_repo.get_event_seating.return_value = EventSeatingSnapshot(
            event_id=5, document=self.document, seating_enabled=False
        )

        with pytest.raises(DomainError):
            await self.use_case.render_event_chart(event_id=5)
