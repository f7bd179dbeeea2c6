"""Event seating DTO: the layout an event uses plus its live availability."""

import attrs

from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.domain.seat_availability import AvailabilitySnapshot


@attrs.define
class EventSeatingSnapshot:
    event_id: int
    document: LayoutDocument
    availability: AvailabilitySnapshot = attrs.field(factory=AvailabilitySnapshot)
    seating_enabled: bool = True
