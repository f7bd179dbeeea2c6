from typing import List, Optional

from pydantic import BaseModel, Field


class SeatResponse(BaseModel):
    seat_id: str
    seat_number: int
    label: str
    x: float
    y: float
    size: int
    status: str
    interactable: bool
    disable_reason: Optional[str] = None
    tooltip: str


class LayoutElementResponse(BaseModel):
    element_id: str
    element_type: str
    shape: str
    pos_x: float
    pos_y: float
    rotation: float
    width: float
    height: float
    section_label: str
    row_label: str
    seats: List[SeatResponse] = []


class StageResponse(BaseModel):
    pos_x: float
    pos_y: float
    width: int
    height: int


class LegendItemResponse(BaseModel):
    status: str
    label: str
    tooltip: str


class FitTransformResponse(BaseModel):
    scale: float
    offset_x: float
    offset_y: float


class SeatingChartResponse(BaseModel):
    context: str
    canvas_width: int
    canvas_height: int
    stage: StageResponse
    elements: List[LayoutElementResponse]
    legend: List[LegendItemResponse]
    fit: Optional[FitTransformResponse] = None


class EventSeatingChartResponse(BaseModel):
    event_id: int
    chart: SeatingChartResponse
    selected_seats: List[str]
    selection_summary: List[str]


class SeatRequestCreateRequest(BaseModel):
    customer_name: str
    phone: str
    email: str = ''
    selected_seats: List[str] = Field(default_factory=list)
    special_requests: str = ''

    class Config:
        json_schema_extra = {
            'example': {
                'customer_name': 'Dana Whitfield',
                'phone': '555-0142',
                'email': 'dana@example.com',
                'selected_seats': ['Main Floor-A-1', 'Main Floor-A-2'],
                'special_requests': 'Anniversary dinner',
            }
        }


class SeatRequestResponse(BaseModel):
    success: bool
    message: str
    request_id: Optional[int] = None
    hold_expires_at: Optional[str] = None
