from collections.abc import Callable
from typing import Any

import pytest

from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.domain.entity.layout_element import LayoutElement
from src.service.seating.domain.value_object.canvas import CanvasSettings, StagePosition, StageSize


ElementFactory = Callable[..., LayoutElement]


@pytest.fixture
def make_element() -> ElementFactory:
    """Factory for layout elements with stable ids"""

    def _create(element_id: str = 'el-1', **overrides: Any) -> LayoutElement:
        fields: dict[str, Any] = {
            'element_type': 'table',
            'section_name': 'Main Floor',
            'row_label': 'A',
            'table_shape': 'table-6',
            'total_seats': 6,
            'pos_x': 25.0,
            'pos_y': 40.0,
        }
        fields |= overrides
        return LayoutElement.from_dict({'id': element_id, **fields})

    return _create


@pytest.fixture
def sample_document(make_element: ElementFactory) -> LayoutDocument:
    """
    Main Floor row A (six-top), a single chair in row B, a stage marker,
    a decorative area and one table still waiting to be placed.
    """
    return LayoutDocument(
        id=7,
        name='Friday Dinner',
        description='Dinner service',
        elements=[
            make_element('table-a'),
            make_element(
                'chair-b',
                element_type='chair',
                row_label='B',
                table_shape='chair',
                total_seats=1,
                pos_x=60.0,
                pos_y=70.0,
            ),
            make_element('bar-marker', element_type='marker', row_label='Bar', pos_x=90.0),
            make_element('patio', element_type='area', pos_x=10.0, pos_y=90.0),
            make_element('table-c', row_label='C', pos_x=None, pos_y=None),
        ],
        stage_position=StagePosition(x=50.0, y=10.0),
        stage_size=StageSize(width=200, height=80),
        canvas_settings=CanvasSettings(width=1200, height=800),
    )
