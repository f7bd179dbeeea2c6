from typing import Any, Optional

import attrs
import orjson

from src.platform.exception.exceptions import NotFoundError
from src.service.seating.domain.entity.layout_element import LayoutElement
from src.service.seating.domain.value_object.canvas import CanvasSettings, StagePosition, StageSize


def _element_rows(raw: Any) -> list[dict[str, Any]]:
    if isinstance(raw, str | bytes):
        try:
            raw = orjson.loads(raw)
        except orjson.JSONDecodeError:
            return []
    if not isinstance(raw, list):
        return []
    return [row for row in raw if isinstance(row, dict)]


def _sub_object(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if isinstance(value, str | bytes):
            try:
                value = orjson.loads(value)
            except orjson.JSONDecodeError:
                continue
        if isinstance(value, dict):
            return value
    return None


@attrs.define
class LayoutDocument:
    """Full description of a venue layout: ordered elements plus stage and canvas"""

    elements: list[LayoutElement] = attrs.field(factory=list)
    stage_position: StagePosition = attrs.field(factory=StagePosition)
    stage_size: StageSize = attrs.field(factory=StageSize)
    canvas_settings: CanvasSettings = attrs.field(factory=CanvasSettings)
    id: Optional[int] = None
    name: str = ''
    description: str = ''
    is_default: bool = False

    def find(self, element_id: str) -> LayoutElement:
        for element in self.elements:
            if element.id == element_id:
                return element
        raise NotFoundError(f'Layout element not found: {element_id}')

    @property
    def placed_elements(self) -> list[LayoutElement]:
        return [e for e in self.elements if e.is_placed]

    @property
    def unplaced_elements(self) -> list[LayoutElement]:
        return [e for e in self.elements if not e.is_placed]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LayoutDocument':
        """
        Decode a layout template (`layout_data`) or an event's seating
        snapshot (`seating`). A `{"layout": {...}}` envelope is unwrapped.
        """
        if isinstance(data.get('layout'), dict):
            data = data['layout']
        raw_elements = next(
            (data[key] for key in ('layout_data', 'seating', 'elements') if data.get(key)),
            [],
        )
        raw_id = data.get('id')
        return cls(
            elements=[LayoutElement.from_dict(row) for row in _element_rows(raw_elements)],
            stage_position=StagePosition.from_dict(
                _sub_object(data, 'stage_position', 'stagePosition')
            ),
            stage_size=StageSize.from_dict(_sub_object(data, 'stage_size', 'stageSize')),
            canvas_settings=CanvasSettings.from_dict(
                _sub_object(data, 'canvas_settings', 'canvasSettings')
            ),
            id=int(raw_id) if raw_id is not None and str(raw_id).isdigit() else None,
            name=str(data.get('name') or ''),
            description=str(data.get('description') or ''),
            is_default=str(data.get('is_default', data.get('isDefault', ''))).lower()
            in ('1', 'true'),
        )

    def to_payload(self) -> dict[str, Any]:
        """Body of the atomic layout write"""
        return {
            'name': self.name,
            'description': self.description,
            'is_default': self.is_default,
            'layout_data': [element.to_dict() for element in self.elements],
            'stage_position': self.stage_position.to_dict(),
            'stage_size': self.stage_size.to_dict(),
            'canvas_settings': self.canvas_settings.to_dict(),
        }
