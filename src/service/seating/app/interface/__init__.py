from src.service.seating.app.interface.i_event_seating_query_repo import IEventSeatingQueryRepo
from src.service.seating.app.interface.i_layout_repo import ILayoutRepo
from src.service.seating.app.interface.i_seat_request_gateway import ISeatRequestGateway

__all__ = ['IEventSeatingQueryRepo', 'ILayoutRepo', 'ISeatRequestGateway']
