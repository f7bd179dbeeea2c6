from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.exception.exceptions import DomainError, SeatConflictError, VenueApiError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.submit_seat_request_use_case import SubmitSeatRequestUseCase
from src.service.seating.app.dto.seat_request_dto import SeatRequestCommand, SeatRequestContact
from src.service.seating.app.query.render_seating_chart_use_case import RenderSeatingChartUseCase
from src.service.seating.app.renderer.seating_renderer import RenderedChart
from src.service.seating.driving_adapter.schema.seating_schema import (
    EventSeatingChartResponse,
    FitTransformResponse,
    LayoutElementResponse,
    LegendItemResponse,
    SeatingChartResponse,
    SeatRequestCreateRequest,
    SeatRequestResponse,
    SeatResponse,
    StageResponse,
)


router = APIRouter()


def _viewport(width: Optional[float], height: Optional[float]) -> Optional[tuple[float, float]]:
    if width is None or height is None:
        return None
    return width, height


def _chart_to_response(chart: RenderedChart) -> SeatingChartResponse:
    return SeatingChartResponse(
        context=chart.context.value,
        canvas_width=chart.canvas_width,
        canvas_height=chart.canvas_height,
        stage=StageResponse(
            pos_x=chart.stage.pos_x,
            pos_y=chart.stage.pos_y,
            width=chart.stage.width,
            height=chart.stage.height,
        ),
        elements=[
            LayoutElementResponse(
                element_id=element.element_id,
                element_type=element.element_type.value,
                shape=element.shape,
                pos_x=element.pos_x,
                pos_y=element.pos_y,
                rotation=element.rotation,
                width=element.width,
                height=element.height,
                section_label=element.section_label,
                row_label=element.row_label,
                seats=[
                    SeatResponse(
                        seat_id=seat.seat_id,
                        seat_number=seat.seat_number,
                        label=seat.label,
                        x=seat.x,
                        y=seat.y,
                        size=seat.size,
                        status=seat.status.value,
                        interactable=seat.interactable,
                        disable_reason=seat.disable_reason.value if seat.disable_reason else None,
                        tooltip=seat.tooltip,
                    )
                    for seat in element.seats
                ],
            )
            for element in chart.elements
        ],
        legend=[
            LegendItemResponse(status=item.status.value, label=item.label, tooltip=item.tooltip)
            for item in chart.legend
        ],
        fit=FitTransformResponse(
            scale=chart.fit.scale, offset_x=chart.fit.offset_x, offset_y=chart.fit.offset_y
        )
        if chart.fit
        else None,
    )


@router.get('/layout/default/chart', status_code=status.HTTP_200_OK)
@Logger.io
async def get_default_layout_chart(
    viewport_width: Optional[float] = None,
    viewport_height: Optional[float] = None,
    use_case: RenderSeatingChartUseCase = Depends(RenderSeatingChartUseCase.depends),
) -> SeatingChartResponse:
    chart = await use_case.render_layout_preview(
        viewport=_viewport(viewport_width, viewport_height)
    )
    return _chart_to_response(chart)


@router.get('/layout/{layout_id}/chart', status_code=status.HTTP_200_OK)
@Logger.io
async def get_layout_chart(
    layout_id: int,
    viewport_width: Optional[float] = None,
    viewport_height: Optional[float] = None,
    use_case: RenderSeatingChartUseCase = Depends(RenderSeatingChartUseCase.depends),
) -> SeatingChartResponse:
    chart = await use_case.render_layout_preview(
        layout_id=layout_id, viewport=_viewport(viewport_width, viewport_height)
    )
    return _chart_to_response(chart)


@router.get('/event/{event_id}/chart', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event_chart(
    event_id: int,
    selected: List[str] = Query(default=[]),
    interactive: bool = True,
    viewport_width: Optional[float] = None,
    viewport_height: Optional[float] = None,
    use_case: RenderSeatingChartUseCase = Depends(RenderSeatingChartUseCase.depends),
) -> EventSeatingChartResponse:
    result = await use_case.render_event_chart(
        event_id=event_id,
        selected=selected,
        interactive=interactive,
        viewport=_viewport(viewport_width, viewport_height),
    )
    return EventSeatingChartResponse(
        event_id=event_id,
        chart=_chart_to_response(result.chart),
        selected_seats=result.selected_seats,
        selection_summary=result.selection_summary,
    )


@router.post('/event/{event_id}/seat-request', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_seat_request(
    event_id: int,
    request: SeatRequestCreateRequest,
    use_case: SubmitSeatRequestUseCase = Depends(SubmitSeatRequestUseCase.depends),
) -> SeatRequestResponse:
    result = await use_case.submit(
        command=SeatRequestCommand(
            event_id=event_id,
            customer_name=request.customer_name,
            contact=SeatRequestContact(phone=request.phone, email=request.email),
            selected_seats=request.selected_seats,
            special_requests=request.special_requests,
        )
    )
    if not result.success:
        if result.reason_code == 'seat_conflict':
            raise SeatConflictError(result.message, result.conflicts)
        if result.reason_code == 'network_error':
            raise VenueApiError(result.message, reason_code=result.reason_code)
        raise DomainError(result.message, reason_code=result.reason_code)

    return SeatRequestResponse(
        success=True,
        message=result.message,
        request_id=result.request_id,
        hold_expires_at=result.hold_expires_at,
    )
