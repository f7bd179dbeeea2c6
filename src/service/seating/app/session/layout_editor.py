"""
Layout Editor

In-memory authoring session over one layout document. Every mutating
operation records an undo checkpoint first; nothing reaches the venue API
until `save()`, which writes the whole document atomically.

Element lifecycle: unplaced -> placed (first drop) -> placed (moved, rotated,
resized; repeatable) -> removed (terminal). The stage and canvas are
singletons that are only ever moved or resized.
"""

import copy
from enum import StrEnum
from typing import Any, Optional

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.save_layout_use_case import SaveLayoutUseCase
from src.service.seating.app.dto.layout_dto import SaveLayoutResult
from src.service.seating.app.query.get_layout_use_case import GetLayoutUseCase
from src.service.seating.domain.canvas_transform import (
    CanvasPoint,
    clamp_percent,
    clamp_zoom,
    normalize_rotation,
    pixel_delta_to_percent,
    rotate_by,
    screen_to_canvas_percent,
    snap_to_grid,
)
from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.domain.entity.layout_element import LayoutElement, new_element_id
from src.service.seating.domain.enum.element_type import ElementType
from src.service.seating.domain.layout_geometry import (
    default_seat_label,
    in_range_seat_labels,
    is_seat_bearing,
    seat_capacity_for,
    seat_count_of,
    seat_id_for,
)
from src.service.seating.domain.value_object.canvas import (
    CanvasRect,
    CanvasSettings,
    PanOffset,
    StagePosition,
    StageSize,
)


ROTATION_STEP = 15
ROTATION_STEP_COARSE = 45
ZOOM_STEP = 0.1
MIN_ELEMENT_SIZE = 10
MIN_STAGE_WIDTH = 40
MIN_STAGE_HEIGHT = 20
MIN_CANVAS_SIZE = 200
CENTER = 50.0


class ElementState(StrEnum):
    UNPLACED = 'unplaced'
    PLACED = 'placed'
    REMOVED = 'removed'


@attrs.define(frozen=True)
class SeatLabelField:
    """One editable override box: current override (may be blank) and the derived default"""

    seat_number: int
    seat_id: str
    value: str
    placeholder: str


def new_document() -> LayoutDocument:
    return LayoutDocument(
        stage_position=StagePosition(x=settings.DEFAULT_STAGE_X, y=settings.DEFAULT_STAGE_Y),
        stage_size=StageSize(
            width=settings.DEFAULT_STAGE_WIDTH, height=settings.DEFAULT_STAGE_HEIGHT
        ),
        canvas_settings=CanvasSettings(
            width=settings.DEFAULT_CANVAS_WIDTH, height=settings.DEFAULT_CANVAS_HEIGHT
        ),
    )


class LayoutEditor:
    def __init__(
        self,
        document: Optional[LayoutDocument] = None,
        *,
        save_layout_use_case: Optional[SaveLayoutUseCase] = None,
        grid_enabled: bool = False,
        grid_size: float = settings.DEFAULT_GRID_SIZE,
        history_limit: int = settings.EDITOR_HISTORY_LIMIT,
    ) -> None:
        self._document = copy.deepcopy(document) if document else new_document()
        self.save_layout_use_case = save_layout_use_case
        self.grid_enabled = grid_enabled
        self.grid_size = grid_size
        self.history_limit = max(history_limit, 1)
        self.locked = False
        self.zoom = 1.0
        self.pan = PanOffset()
        self.dirty = False
        self._undo: list[LayoutDocument] = []
        self._redo: list[LayoutDocument] = []
        self._removed_ids: set[str] = set()

    @classmethod
    async def open(
        cls,
        get_layout_use_case: GetLayoutUseCase,
        *,
        layout_id: Optional[int] = None,
        save_layout_use_case: Optional[SaveLayoutUseCase] = None,
        **options: Any,
    ) -> 'LayoutEditor':
        """Start a session on a stored template; no id opens the venue's default"""
        document = await get_layout_use_case.get(layout_id=layout_id)
        return cls(document, save_layout_use_case=save_layout_use_case, **options)

    @property
    def document(self) -> LayoutDocument:
        return self._document

    # ====== History =======

    def _checkpoint(self) -> None:
        self._undo.append(copy.deepcopy(self._document))
        if len(self._undo) > self.history_limit:
            del self._undo[0]
        self._redo.clear()
        self.dirty = True

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self._document)
        self._document = self._undo.pop()
        self.dirty = True
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self._document)
        self._document = self._redo.pop()
        self.dirty = True
        return True

    # ====== Elements =======

    def _element(self, element_id: str) -> LayoutElement:
        try:
            return self._document.find(element_id)
        except NotFoundError:
            if element_id in self._removed_ids:
                raise DomainError(f'Layout element {element_id} was removed')
            raise

    def _ensure_unlocked(self) -> None:
        if self.locked:
            raise DomainError('Layout is locked')

    def element_state(self, element_id: str) -> ElementState:
        if element_id in self._removed_ids and not any(
            e.id == element_id for e in self._document.elements
        ):
            return ElementState.REMOVED
        element = self._document.find(element_id)
        return ElementState.PLACED if element.is_placed else ElementState.UNPLACED

    def add_element(
        self,
        *,
        element_type: ElementType | str = ElementType.TABLE,
        section_name: str = '',
        row_label: str = '',
        table_shape: Optional[str] = None,
        total_seats: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> LayoutElement:
        """New elements start unplaced; they appear on the canvas once dropped"""
        element = LayoutElement.create(
            element_type=element_type,
            section_name=section_name,
            row_label=row_label,
            table_shape=table_shape,
            total_seats=total_seats,
            width=width,
            height=height,
        )
        self._checkpoint()
        self._document.elements.append(element)
        Logger.base.info(f'➕ [EDITOR] Added {element.element_type} {element.id}')
        return element

    def duplicate_element(self, element_id: str) -> LayoutElement:
        source = self._element(element_id)
        clone = copy.deepcopy(source)
        clone.id = new_element_id()
        if clone.is_placed:
            clone.pos_x = clamp_percent((clone.pos_x or 0) + 2)
            clone.pos_y = clamp_percent((clone.pos_y or 0) + 2)
        self._checkpoint()
        self._document.elements.append(clone)
        return clone

    def snap(self, point: CanvasPoint) -> CanvasPoint:
        return CanvasPoint(
            snap_to_grid(point.x, self.grid_size, self.grid_enabled),
            snap_to_grid(point.y, self.grid_size, self.grid_enabled),
        )

    def pointer_to_percent(
        self, client_x: float, client_y: float, canvas_rect: CanvasRect
    ) -> CanvasPoint:
        """Drag ghost position; `drop_element` commits exactly this value"""
        return self.snap(
            screen_to_canvas_percent(client_x, client_y, canvas_rect, self.zoom, self.pan)
        )

    def drop_element(
        self, element_id: str, client_x: float, client_y: float, canvas_rect: CanvasRect
    ) -> LayoutElement:
        self._ensure_unlocked()
        point = self.pointer_to_percent(client_x, client_y, canvas_rect)
        return self.place_element(element_id, point.x, point.y)

    def place_element(
        self, element_id: str, x: Optional[float] = None, y: Optional[float] = None
    ) -> LayoutElement:
        """Numeric placement; an element placed without coordinates lands in the centre"""
        self._ensure_unlocked()
        element = self._element(element_id)
        point = self.snap(
            CanvasPoint(CENTER if x is None else float(x), CENTER if y is None else float(y))
        )
        self._checkpoint()
        element.pos_x, element.pos_y = point.x, point.y
        return element

    def nudge_element(self, element_id: str, dx: float, dy: float) -> LayoutElement:
        """Move a placed element by a percent delta; the result is snapped like a drop"""
        self._ensure_unlocked()
        element = self._element(element_id)
        if not element.is_placed:
            raise DomainError(f'Layout element {element_id} is not placed')
        return self.place_element(
            element_id, (element.pos_x or 0) + dx, (element.pos_y or 0) + dy
        )

    def drag_element_by(self, element_id: str, dx: float, dy: float) -> LayoutElement:
        """Move a placed element by an on-screen pixel delta"""
        canvas = self._document.canvas_settings
        delta = pixel_delta_to_percent(dx, dy, canvas.width, canvas.height, self.zoom)
        return self.nudge_element(element_id, delta.x, delta.y)

    def rotate_element(self, element_id: str, delta: float = ROTATION_STEP) -> LayoutElement:
        element = self._element(element_id)
        self._checkpoint()
        element.rotation = rotate_by(element.rotation, delta)
        return element

    def set_rotation(self, element_id: str, degrees: float) -> LayoutElement:
        element = self._element(element_id)
        self._checkpoint()
        element.rotation = normalize_rotation(degrees)
        return element

    def resize_element(self, element_id: str, width: int, height: int) -> LayoutElement:
        element = self._element(element_id)
        self._checkpoint()
        element.width = max(int(width), MIN_ELEMENT_SIZE)
        element.height = max(int(height), MIN_ELEMENT_SIZE)
        return element

    def change_shape(self, element_id: str, table_shape: str) -> LayoutElement:
        """A new shape resets the seat count to the shape's canonical capacity"""
        element = self._element(element_id)
        if not is_seat_bearing(element):
            raise DomainError('Only tables and chairs have a seat shape')
        self._checkpoint()
        element.table_shape = table_shape
        element.total_seats = seat_capacity_for(table_shape)
        element.seat_labels = in_range_seat_labels(element)
        return element

    def set_total_seats(self, element_id: str, total_seats: int) -> LayoutElement:
        element = self._element(element_id)
        if not is_seat_bearing(element):
            raise DomainError('Only tables and chairs carry seats')
        if total_seats < 0:
            raise DomainError('Seat count cannot be negative')
        self._checkpoint()
        element.total_seats = int(total_seats)
        element.seat_labels = in_range_seat_labels(element)
        return element

    def update_details(
        self,
        element_id: str,
        *,
        section_name: Optional[str] = None,
        row_label: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> LayoutElement:
        element = self._element(element_id)
        self._checkpoint()
        if section_name is not None:
            element.section_name = section_name
        if row_label is not None:
            element.row_label = row_label
        if is_active is not None:
            element.is_active = is_active
        return element

    def seat_label_fields(self, element_id: str) -> list[SeatLabelField]:
        element = self._element(element_id)
        total = seat_count_of(element)
        overrides = in_range_seat_labels(element)
        return [
            SeatLabelField(
                seat_number=n,
                seat_id=seat_id_for(element, n),
                value=overrides.get(str(n), ''),
                placeholder=default_seat_label(element.row_label, n, total),
            )
            for n in range(1, total + 1)
        ]

    def set_seat_label(self, element_id: str, seat_number: int, text: str) -> LayoutElement:
        """Blank text clears the override so the seat shows its derived label again"""
        element = self._element(element_id)
        total = seat_count_of(element)
        if not 1 <= seat_number <= total:
            raise DomainError(f'Seat {seat_number} is outside 1..{total}')
        self._checkpoint()
        labels = in_range_seat_labels(element)
        cleaned = (text or '').strip()
        if cleaned:
            labels[str(seat_number)] = cleaned
        else:
            labels.pop(str(seat_number), None)
        element.seat_labels = labels
        return element

    def remove_element(self, element_id: str) -> None:
        element = self._element(element_id)
        self._checkpoint()
        self._document.elements.remove(element)
        self._removed_ids.add(element_id)
        Logger.base.info(f'🗑️ [EDITOR] Removed element {element_id}')

    # ====== Stage and canvas =======

    def set_locked(self, locked: bool) -> None:
        self.locked = locked

    def move_stage(self, x: float, y: float) -> StagePosition:
        self._ensure_unlocked()
        point = self.snap(CanvasPoint(x, y))
        self._checkpoint()
        self._document.stage_position = StagePosition(x=point.x, y=point.y)
        return self._document.stage_position

    def drag_stage_by(self, dx: float, dy: float) -> StagePosition:
        canvas = self._document.canvas_settings
        delta = pixel_delta_to_percent(dx, dy, canvas.width, canvas.height, self.zoom)
        stage = self._document.stage_position
        return self.move_stage(stage.x + delta.x, stage.y + delta.y)

    def resize_stage(self, width: int, height: int) -> StageSize:
        self._ensure_unlocked()
        self._checkpoint()
        self._document.stage_size = StageSize(
            width=max(int(width), MIN_STAGE_WIDTH), height=max(int(height), MIN_STAGE_HEIGHT)
        )
        return self._document.stage_size

    def resize_canvas(self, width: int, height: int) -> CanvasSettings:
        self._checkpoint()
        self._document.canvas_settings = CanvasSettings(
            width=max(int(width), MIN_CANVAS_SIZE), height=max(int(height), MIN_CANVAS_SIZE)
        )
        return self._document.canvas_settings

    def set_grid(self, enabled: bool, grid_size: Optional[float] = None) -> None:
        if grid_size is not None:
            if grid_size <= 0:
                raise DomainError('Grid size must be positive')
            self.grid_size = grid_size
        self.grid_enabled = enabled

    # ====== View (never persisted) =======

    def set_zoom(self, zoom: float) -> float:
        self.zoom = round(clamp_zoom(zoom), 2)
        return self.zoom

    def zoom_in(self) -> float:
        return self.set_zoom(self.zoom + ZOOM_STEP)

    def zoom_out(self) -> float:
        return self.set_zoom(self.zoom - ZOOM_STEP)

    def set_pan(self, x: float, y: float) -> None:
        self.pan = PanOffset(x=x, y=y)

    def reset_view(self) -> None:
        self.zoom = 1.0
        self.pan = PanOffset()

    # ====== Save =======

    async def save(
        self, *, name: Optional[str] = None, description: Optional[str] = None
    ) -> SaveLayoutResult:
        if self.save_layout_use_case is None:
            raise DomainError('Layout editor has no save target')
        draft = copy.deepcopy(self._document)
        if name is not None:
            draft.name = name
        if description is not None:
            draft.description = description

        result = await self.save_layout_use_case.save(document=draft)
        if result.success:
            self._document.name = draft.name.strip()
            self._document.description = draft.description
            self._document.id = result.layout_id
            self.dirty = False
        return result
