from typing import Any, Optional

import attrs
import uuid_utils

from src.service.seating.domain.enum.element_type import ElementType
from src.service.seating.domain.enum.table_shape import TableShape
from src.service.seating.domain.layout_geometry import normalize_seat_labels, resolve_shape


def _pick(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _optional_percent(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _int_or(value: Any, default: int) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def _float_or(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _flag(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in ('0', 'false', 'no', '')
    return bool(value)


def _default_shape(kind: ElementType) -> str:
    return TableShape.CHAIR.value if kind is ElementType.CHAIR else TableShape.TABLE_6.value


def new_element_id() -> str:
    return str(uuid_utils.uuid7())


@attrs.define
class LayoutElement:
    """
    One object on the seating canvas. pos_x/pos_y are the centre in percent of
    the canvas; None means the element has not been placed yet.
    """

    id: str
    element_type: ElementType = attrs.field(default=ElementType.TABLE, converter=ElementType.parse)
    section_name: str = ''
    row_label: str = ''
    table_shape: str = 'table-6'
    total_seats: int = 0
    pos_x: Optional[float] = None
    pos_y: Optional[float] = None
    rotation: float = 0
    width: Optional[int] = None
    height: Optional[int] = None
    seat_labels: dict[str, str] = attrs.field(factory=dict)
    is_active: bool = True

    @property
    def is_placed(self) -> bool:
        return self.pos_x is not None and self.pos_y is not None

    @classmethod
    def create(
        cls,
        *,
        element_type: ElementType | str = ElementType.TABLE,
        section_name: str = '',
        row_label: str = '',
        table_shape: Optional[str] = None,
        total_seats: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> 'LayoutElement':
        kind = ElementType.parse(element_type)
        table_shape = table_shape or _default_shape(kind)
        if not kind.is_seat_bearing:
            seats = 0
        elif total_seats is None:
            seats = resolve_shape(table_shape).capacity
        else:
            seats = max(int(total_seats), 0)
        return cls(
            id=new_element_id(),
            element_type=kind,
            section_name=section_name,
            row_label=row_label,
            table_shape=table_shape,
            total_seats=seats,
            width=width,
            height=height,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LayoutElement':
        """Decode one element from the venue API; snake_case and camelCase keys both accepted"""
        kind = ElementType.parse(_pick(data, 'element_type', 'elementType', 'type'))
        table_shape = str(_pick(data, 'table_shape', 'tableShape') or _default_shape(kind))
        raw_total = _pick(data, 'total_seats', 'totalSeats', 'capacity')
        if not kind.is_seat_bearing:
            total_seats = 0
        elif raw_total is None:
            total_seats = resolve_shape(table_shape).capacity
        else:
            total_seats = max(_int_or(raw_total, 0), 0)

        width = _pick(data, 'width')
        height = _pick(data, 'height')
        return cls(
            id=str(_pick(data, 'id') or new_element_id()),
            element_type=kind,
            section_name=str(_pick(data, 'section_name', 'sectionName', 'section') or ''),
            row_label=str(_pick(data, 'row_label', 'rowLabel', 'row') or ''),
            table_shape=table_shape,
            total_seats=total_seats,
            pos_x=_optional_percent(_pick(data, 'pos_x', 'posX')),
            pos_y=_optional_percent(_pick(data, 'pos_y', 'posY')),
            rotation=_float_or(_pick(data, 'rotation'), 0.0) % 360,
            width=None if width is None else _int_or(width, 0) or None,
            height=None if height is None else _int_or(height, 0) or None,
            seat_labels=normalize_seat_labels(_pick(data, 'seat_labels', 'seatLabels')),
            is_active=_flag(_pick(data, 'is_active', 'isActive')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'element_type': self.element_type.value,
            'section_name': self.section_name,
            'row_label': self.row_label,
            'table_shape': self.table_shape,
            'total_seats': self.total_seats,
            'pos_x': None if self.pos_x is None else round(self.pos_x, 2),
            'pos_y': None if self.pos_y is None else round(self.pos_y, 2),
            'rotation': self.rotation,
            'width': self.width,
            'height': self.height,
            'seat_labels': dict(self.seat_labels),
            'is_active': self.is_active,
        }
