"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.http.venue_api_client import VenueApiClient
from src.service.seating.app.renderer.seating_renderer import SeatingRenderer
from src.service.seating.driven_adapter.gateway.seat_request_gateway_impl import (
    SeatRequestGatewayImpl,
)
from src.service.seating.driven_adapter.repo.event_seating_query_repo_impl import (
    EventSeatingQueryRepoImpl,
)
from src.service.seating.driven_adapter.repo.layout_repo_impl import LayoutRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Venue REST API client (one pooled httpx client per process)
    venue_api_client = providers.Singleton(
        VenueApiClient,
        base_url=config_service.provided.VENUE_API_BASE_URL,
        token=config_service.provided.VENUE_API_TOKEN,
    )

    # Repositories / gateways
    layout_repo = providers.Singleton(LayoutRepoImpl, venue_api_client=venue_api_client)
    event_seating_query_repo = providers.Singleton(
        EventSeatingQueryRepoImpl, venue_api_client=venue_api_client
    )
    seat_request_gateway = providers.Singleton(
        SeatRequestGatewayImpl, venue_api_client=venue_api_client
    )

    # Stateless projection
    seating_renderer = providers.Singleton(
        SeatingRenderer, base_size=config_service.provided.SEAT_BASE_SIZE
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
