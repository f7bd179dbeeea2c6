"""
Seating Renderer

Read-only projection of a layout document plus an availability snapshot into
a drawable chart. The same projection backs the editor preview, the public
reference chart and the per-event booking modal; only the render context
differs. Seat status and click-ability always come from the availability
resolver.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import Optional

import attrs

from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.domain.entity.layout_element import LayoutElement
from src.service.seating.domain.enum.element_type import ElementType
from src.service.seating.domain.enum.seat_status import SeatDisableReason, SeatStatus
from src.service.seating.domain.canvas_transform import FitTransform, fit_to_viewport
from src.service.seating.domain.layout_geometry import (
    build_seat_lookup_map,
    describe_seat_selection,
    header_labels_for,
    seat_count_of,
    seat_id_for,
    seat_label_for,
)
from src.service.seating.domain.seat_availability import (
    EMPTY_SNAPSHOT,
    AvailabilitySnapshot,
    SeatStatusVisual,
    legend,
    visual_for,
)
from src.service.seating.domain.seat_shape_geometry import DEFAULT_BASE_SIZE, geometry_for


DEFAULT_MARKER_WIDTH = 120
DEFAULT_MARKER_HEIGHT = 40


class RenderContext(StrEnum):
    EDITOR_PREVIEW = 'editor_preview'
    REFERENCE_CHART = 'reference_chart'
    BOOKING_MODAL = 'booking_modal'

    @property
    def shows_availability(self) -> bool:
        return self is not RenderContext.EDITOR_PREVIEW

    @property
    def interactive(self) -> bool:
        return self is RenderContext.BOOKING_MODAL


@attrs.define(frozen=True)
class RenderedSeat:
    seat_id: str
    seat_number: int
    label: str
    x: float
    y: float
    size: int
    status: SeatStatus
    interactable: bool
    disable_reason: Optional[SeatDisableReason]
    tooltip: str


@attrs.define(frozen=True)
class RenderedElement:
    element_id: str
    element_type: ElementType
    shape: str
    pos_x: float
    pos_y: float
    rotation: float
    width: float
    height: float
    section_label: str
    row_label: str
    seats: list[RenderedSeat] = attrs.field(factory=list)


@attrs.define(frozen=True)
class RenderedStage:
    pos_x: float
    pos_y: float
    width: int
    height: int


@attrs.define(frozen=True)
class RenderedChart:
    context: RenderContext
    canvas_width: int
    canvas_height: int
    stage: RenderedStage
    elements: list[RenderedElement]
    legend: list[SeatStatusVisual]
    fit: Optional[FitTransform] = None

    @property
    def seats(self) -> list[RenderedSeat]:
        return [seat for element in self.elements for seat in element.seats]


class SeatingRenderer:
    def __init__(self, *, base_size: int = DEFAULT_BASE_SIZE, viewport_padding: float = 16.0):
        self.base_size = base_size
        self.viewport_padding = viewport_padding

    def visible_elements(self, document: LayoutDocument) -> list[LayoutElement]:
        """Active, placed tables/chairs/markers; areas and unplaced rows are skipped"""
        visible = []
        for element in document.elements:
            if element.is_active is False or not element.is_placed:
                continue
            kind = ElementType.parse(element.element_type)
            if kind.is_seat_bearing or kind is ElementType.MARKER:
                visible.append(element)
        return visible

    def render(
        self,
        document: LayoutDocument,
        *,
        context: RenderContext,
        availability: Optional[AvailabilitySnapshot] = None,
        selected: Iterable[str] = (),
        viewport: Optional[tuple[float, float]] = None,
    ) -> RenderedChart:
        snapshot = availability if availability and context.shows_availability else EMPTY_SNAPSHOT
        selected_set = frozenset(selected) if context.shows_availability else frozenset()

        elements = [
            self._render_element(element, context, snapshot, selected_set)
            for element in self.visible_elements(document)
        ]
        canvas = document.canvas_settings
        fit = None
        if viewport is not None:
            fit = fit_to_viewport(
                canvas.width,
                canvas.height,
                viewport[0],
                viewport[1],
                padding=self.viewport_padding,
            )
        return RenderedChart(
            context=context,
            canvas_width=canvas.width,
            canvas_height=canvas.height,
            stage=RenderedStage(
                pos_x=document.stage_position.x,
                pos_y=document.stage_position.y,
                width=document.stage_size.width,
                height=document.stage_size.height,
            ),
            elements=elements,
            legend=legend() if context.shows_availability else [],
            fit=fit,
        )

    def selection_summary(self, document: LayoutDocument, selected: Iterable[str]) -> list[str]:
        lookup = build_seat_lookup_map(self.visible_elements(document))
        return [describe_seat_selection(seat_id, lookup.get(seat_id)) for seat_id in selected]

    def _render_element(
        self,
        element: LayoutElement,
        context: RenderContext,
        snapshot: AvailabilitySnapshot,
        selected: frozenset[str],
    ) -> RenderedElement:
        kind = ElementType.parse(element.element_type)
        headers = header_labels_for(element)
        if not kind.is_seat_bearing:
            return RenderedElement(
                element_id=element.id,
                element_type=kind,
                shape=kind.value,
                pos_x=element.pos_x or 0.0,
                pos_y=element.pos_y or 0.0,
                rotation=element.rotation,
                width=element.width or DEFAULT_MARKER_WIDTH,
                height=element.height or DEFAULT_MARKER_HEIGHT,
                section_label=headers.section_label,
                row_label=str(element.row_label or '').strip(),
            )

        geometry = geometry_for(element.table_shape, seat_count_of(element), self.base_size)
        seats = []
        for placement in geometry.seats:
            seat_id = seat_id_for(element, placement.seat_number)
            label = seat_label_for(element, placement.seat_number)
            status = snapshot.status_of(seat_id, selected)
            visual = visual_for(status)
            seats.append(
                RenderedSeat(
                    seat_id=seat_id,
                    seat_number=placement.seat_number,
                    label=label,
                    x=placement.x,
                    y=placement.y,
                    size=placement.size,
                    status=status,
                    interactable=context.interactive and status.is_interactable,
                    disable_reason=snapshot.disable_reason_for(seat_id),
                    tooltip=f'{describe_seat_selection(seat_id, label)}: {visual.tooltip}',
                )
            )
        return RenderedElement(
            element_id=element.id,
            element_type=kind,
            shape=geometry.shape,
            pos_x=element.pos_x or 0.0,
            pos_y=element.pos_y or 0.0,
            rotation=element.rotation,
            width=geometry.width,
            height=geometry.height,
            section_label=headers.section_label,
            row_label=headers.row_label,
            seats=seats,
        )
