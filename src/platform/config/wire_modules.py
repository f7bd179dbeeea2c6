"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seating.app.command import (
    manage_layout_template_use_case,
    save_layout_use_case,
    submit_seat_request_use_case,
)
from src.service.seating.app.query import (
    get_event_seating_use_case,
    get_layout_use_case,
    render_seating_chart_use_case,
)
from src.service.seating.driving_adapter.http_controller import seating_controller


WIRE_MODULES: list[ModuleType] = [
    get_layout_use_case,
    get_event_seating_use_case,
    render_seating_chart_use_case,
    save_layout_use_case,
    manage_layout_template_use_case,
    submit_seat_request_use_case,
    seating_controller,
]
