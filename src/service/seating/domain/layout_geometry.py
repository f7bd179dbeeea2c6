"""
Layout Geometry Model

Pure derivations over layout elements: which elements carry seats, the
seat ids and guest-facing labels of their seats, row header labels and the
canonical seat count of a table shape.

Seat ids are the join key between the layout, the availability sets of an
event and every guest-facing summary, so every caller goes through this
module instead of formatting ids itself.
"""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

import attrs
import orjson

from src.service.seating.domain.enum.element_type import ElementType
from src.service.seating.domain.enum.table_shape import (
    DEFAULT_STANDING_CAPACITY,
    FALLBACK_SHAPE,
    SHAPE_ALIASES,
    SHAPE_CAPACITY,
    SHAPE_FAMILY,
    STANDING_PREFIX,
    ShapeFamily,
    TableShape,
)
from src.service.seating.domain.value_object.seat_position import DEFAULT_ROW, SeatPosition


if TYPE_CHECKING:
    from src.service.seating.domain.entity.layout_element import LayoutElement


ALPHABET_SIZE = 26


@attrs.define(frozen=True)
class ResolvedShape:
    """A shape string resolved to its template; unknown shapes resolve to the fallback"""

    name: str
    family: ShapeFamily
    capacity: int
    is_fallback: bool = False


@attrs.define(frozen=True)
class HeaderLabels:
    section_label: str
    row_label: str


def resolve_shape(table_shape: object) -> ResolvedShape:
    raw = str(table_shape or '').strip().lower()
    if raw.startswith(STANDING_PREFIX):
        count = raw[len(STANDING_PREFIX) :]
        capacity = int(count) if count.isdigit() and int(count) > 0 else DEFAULT_STANDING_CAPACITY
        return ResolvedShape(
            name=f'{STANDING_PREFIX}{capacity}', family=ShapeFamily.STANDING, capacity=capacity
        )

    shape = SHAPE_ALIASES.get(raw)
    if shape is None:
        try:
            shape = TableShape(raw)
        except ValueError:
            return ResolvedShape(
                name=FALLBACK_SHAPE.value,
                family=SHAPE_FAMILY[FALLBACK_SHAPE],
                capacity=SHAPE_CAPACITY[FALLBACK_SHAPE],
                is_fallback=True,
            )
    return ResolvedShape(
        name=shape.value, family=SHAPE_FAMILY[shape], capacity=SHAPE_CAPACITY[shape]
    )


def seat_capacity_for(table_shape: object) -> int:
    return resolve_shape(table_shape).capacity


def is_seat_bearing(element: 'LayoutElement') -> bool:
    return ElementType.parse(element.element_type).is_seat_bearing


def seat_count_of(element: 'LayoutElement') -> int:
    if not is_seat_bearing(element):
        return 0
    return max(int(element.total_seats or 0), 0)


def normalize_seat_labels(value: Any) -> dict[str, str]:
    """
    Accepts a mapping or its JSON text. Keys become strings, values are
    trimmed and blanks dropped. Anything unparseable is treated as no overrides.
    """
    if not value:
        return {}
    labels = value
    if isinstance(labels, str | bytes):
        try:
            labels = orjson.loads(labels)
        except orjson.JSONDecodeError:
            return {}
    if not isinstance(labels, Mapping):
        return {}
    normalized: dict[str, str] = {}
    for key, raw in labels.items():
        text = '' if raw is None else str(raw).strip()
        if text:
            normalized[str(key)] = text
    return normalized


def seat_id_for(element: 'LayoutElement', seat_number: int) -> str:
    return SeatPosition(
        section=element.section_name, row=element.row_label, seat_number=seat_number
    ).seat_id


def seat_ids_for(element: 'LayoutElement') -> list[str]:
    return [seat_id_for(element, n) for n in range(1, seat_count_of(element) + 1)]


def default_seat_label(row_label: str | None, seat_number: int, total_seats: int) -> str:
    """
    Row label plus a letter per seat: A..Z, then AA, BB, ... ZZ, AAA, ...
    Single-seat elements use the bare row label.
    """
    base = row_label or DEFAULT_ROW
    if total_seats <= 1:
        return base
    index = seat_number - 1
    if index < ALPHABET_SIZE:
        return f'{base}{chr(65 + index)}'
    repeat = index // ALPHABET_SIZE + 1
    return f'{base}{chr(65 + index % ALPHABET_SIZE) * repeat}'


def seat_label_for(element: 'LayoutElement', seat_number: int) -> str:
    override = normalize_seat_labels(element.seat_labels).get(str(seat_number))
    if override:
        return override
    return default_seat_label(element.row_label, seat_number, int(element.total_seats or 0))


def in_range_seat_labels(element: 'LayoutElement') -> dict[str, str]:
    """Overrides for seats 1..totalSeats only; stray keys are ignored"""
    total = seat_count_of(element)
    return {
        key: label
        for key, label in normalize_seat_labels(element.seat_labels).items()
        if key.isdigit() and 1 <= int(key) <= total
    }


def header_labels_for(element: 'LayoutElement') -> HeaderLabels:
    section_label = str(element.section_name or '').strip()
    row_label = str(element.row_label or '').strip()
    if int(element.total_seats or 0) <= 1 or not row_label:
        row_label = seat_label_for(element, 1)
    return HeaderLabels(section_label=section_label, row_label=row_label)


def build_seat_lookup_map(elements: Iterable['LayoutElement']) -> dict[str, str]:
    lookup: dict[str, str] = {}
    for element in elements:
        if not is_seat_bearing(element):
            continue
        for seat_number in range(1, seat_count_of(element) + 1):
            lookup[seat_id_for(element, seat_number)] = seat_label_for(element, seat_number)
    return lookup


def describe_seat_selection(seat_id: str, label: str | None) -> str:
    if not label or label == seat_id:
        return seat_id
    return f'{label} ({seat_id})'

