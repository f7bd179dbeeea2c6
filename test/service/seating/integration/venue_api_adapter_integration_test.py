"""
Integration tests for the venue API driven adapters

The venue REST API is replaced by an httpx.MockTransport; everything from
the adapter down to the wire encoding is real.
"""

import httpx
import orjson
import pytest

from src.platform.exception.exceptions import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    VenueApiError,
)
from src.service.seating.app.dto.seat_request_dto import SeatRequestCommand, SeatRequestContact
from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.driven_adapter.gateway.seat_request_gateway_impl import (
    SUBMITTED_MESSAGE,
    SeatRequestGatewayImpl,
)
from src.service.seating.driven_adapter.repo.event_seating_query_repo_impl import (
    EventSeatingQueryRepoImpl,
)
from src.service.seating.driven_adapter.repo.layout_repo_impl import LayoutRepoImpl


pytestmark = pytest.mark.integration

LAYOUT_BODY = {
    'layout': {
        'id': 3,
        'name': 'Friday Dinner',
        'is_default': True,
        'layout_data': [
            {
                'id': 't1',
                'element_type': 'table',
                'section_name': 'Main Floor',
                'row_label': 'A',
                'table_shape': 'table-6',
                'total_seats': 6,
                'pos_x': '25.00',
                'pos_y': '40.00',
                'seat_labels': '{"2": "VIP"}',
            }
        ],
        'stage_position': {'x': 50, 'y': 10},
        'stage_size': {'width': 240, 'height': 80},
        'canvas_settings': {'width': 1200, 'height': 800},
    }
}


def json_response(status_code: int, body: dict) -> httpx.Response:
    return httpx.Response(status_code, content=orjson.dumps(body))


class TestLayoutRepoImpl:
    @pytest.mark.asyncio
    async def test_get_default(self, venue_api_client_factory):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(200, LAYOUT_BODY)

        repo = LayoutRepoImpl(venue_api_client=venue_api_client_factory(handler))

        document = await repo.get_default()

        assert seen[0].url.path == '/api/seating-layouts/default'
        assert document.id == 3
        assert document.is_default is True
        assert document.elements[0].pos_x == 25.0
        assert document.elements[0].seat_labels == {'2': 'VIP'}
        assert document.stage_size.width == 240

    @pytest.mark.asyncio
    async def test_create_posts_whole_document(self, venue_api_client_factory, sample_document):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(201, {'success': True, 'id': 42})

        repo = LayoutRepoImpl(venue_api_client=venue_api_client_factory(handler))
        sample_document.id = None

        stored = await repo.save(document=sample_document)

        assert stored.id == 42
        assert seen[0].method == 'POST'
        body = orjson.loads(seen[0].content)
        assert body['name'] == 'Friday Dinner'
        assert len(body['layout_data']) == len(sample_document.elements)
        assert body['canvas_settings'] == {'width': 1200, 'height': 800}

    @pytest.mark.asyncio
    async def test_update_puts_to_layout_id(self, venue_api_client_factory, sample_document):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(200, {'success': True})

        repo = LayoutRepoImpl(venue_api_client=venue_api_client_factory(handler))

        stored = await repo.save(document=sample_document)

        assert (seen[0].method, seen[0].url.path) == ('PUT', '/api/seating-layouts/7')
        assert stored.id == 7

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'status_code,error',
        [
            (404, NotFoundError),
            (403, ForbiddenError),
            (422, DomainError),
            (500, VenueApiError),
        ],
    )
    async def test_failures_map_to_errors(self, venue_api_client_factory, status_code, error):
        repo = LayoutRepoImpl(
            venue_api_client=venue_api_client_factory(
                lambda request: json_response(status_code, {'success': False, 'message': 'x'})
            )
        )

        with pytest.raises(error):
            await repo.get_by_id(layout_id=9)

    @pytest.mark.asyncio
    async def test_delete(self, venue_api_client_factory):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(200, {'success': True})

        repo = LayoutRepoImpl(venue_api_client=venue_api_client_factory(handler))

        await repo.delete(layout_id=9)

        assert (seen[0].method, seen[0].url.path) == ('DELETE', '/api/seating-layouts/9')


class TestEventSeatingQueryRepoImpl:
    @pytest.mark.asyncio
    async def test_snapshot_carries_layout_and_availability(self, venue_api_client_factory):
        body = {
            'seating': LAYOUT_BODY['layout']['layout_data'],
            'stagePosition': {'x': 45, 'y': 12},
            'reservedSeats': ['Main Floor-A-1'],
            'pendingSeats': ['Main Floor-A-2'],
            'holdSeats': ['Main Floor-A-3', None],
            'seatingEnabled': True,
        }
        repo = EventSeatingQueryRepoImpl(
            venue_api_client=venue_api_client_factory(lambda request: json_response(200, body))
        )

        snapshot = await repo.get_event_seating(event_id=5)

        assert snapshot.event_id == 5
        assert snapshot.seating_enabled is True
        assert snapshot.availability.reserved == frozenset({'Main Floor-A-1'})
        assert snapshot.availability.pending == frozenset({'Main Floor-A-2'})
        assert snapshot.availability.hold == frozenset({'Main Floor-A-3'})
        assert [e.id for e in snapshot.document.elements] == ['t1']
        assert snapshot.document.stage_position.x == 45

    @pytest.mark.asyncio
    async def test_seating_disabled_flag(self, venue_api_client_factory):
        repo = EventSeatingQueryRepoImpl(
            venue_api_client=venue_api_client_factory(
                lambda request: json_response(200, {'seating_enabled': False})
            )
        )

        snapshot = await repo.get_event_seating(event_id=5)

        assert snapshot.seating_enabled is False
        assert snapshot.document.elements == []

    @pytest.mark.asyncio
    async def test_unknown_event(self, venue_api_client_factory):
        repo = EventSeatingQueryRepoImpl(
            venue_api_client=venue_api_client_factory(
                lambda request: json_response(404, {'error': 'Event not found'})
            )
        )

        with pytest.raises(NotFoundError):
            await repo.get_event_seating(event_id=5)

    @pytest.mark.asyncio
    async def test_server_error(self, venue_api_client_factory):
        repo = EventSeatingQueryRepoImpl(
            venue_api_client=venue_api_client_factory(lambda request: json_response(500, {}))
        )

        with pytest.raises(VenueApiError):
            await repo.get_event_seating(event_id=5)


class TestSeatRequestGatewayImpl:
    COMMAND = SeatRequestCommand(
        event_id=5,
        customer_name='Dana Whitfield',
        contact=SeatRequestContact(phone='555-0142', email='dana@example.com'),
        selected_seats=['Main Floor-A-1'],
    )

    @pytest.mark.asyncio
    async def test_accepted(self, venue_api_client_factory):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(
                201,
                {
                    'success': True,
                    'seat_request': {'id': 12},
                    'hold_expires_at': '2026-10-20T18:00:00Z',
                },
            )

        gateway = SeatRequestGatewayImpl(venue_api_client=venue_api_client_factory(handler))

        result = await gateway.submit(command=self.COMMAND)

        assert result.success is True
        assert result.message == SUBMITTED_MESSAGE
        assert result.request_id == 12
        assert result.hold_expires_at == '2026-10-20T18:00:00Z'
        assert orjson.loads(seen[0].content)['selected_seats'] == ['Main Floor-A-1']

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'status_code,body,reason_code',
        [
            (409, {'message': 'Seats taken', 'conflicts': ['Main Floor-A-1']}, 'seat_conflict'),
            (404, {'message': 'Event not found'}, 'event_not_found'),
            (500, {'message': 'boom'}, 'server_error'),
            (
                400,
                {'message': 'Reserved seating is not available for this event'},
                'event_not_seating_enabled',
            ),
            (400, {'message': 'Phone is required'}, 'runtime_validation_error'),
            (418, {'message': 'teapot'}, 'unknown'),
        ],
    )
    async def test_rejections_carry_reason_code(
        self, venue_api_client_factory, status_code, body, reason_code
    ):
        gateway = SeatRequestGatewayImpl(
            venue_api_client=venue_api_client_factory(
                lambda request: json_response(status_code, {'success': False, **body})
            )
        )

        result = await gateway.submit(command=self.COMMAND)

        assert result.success is False
        assert result.reason_code == reason_code
        assert result.message == body['message']

    @pytest.mark.asyncio
    async def test_conflict_lists_seats(self, venue_api_client_factory):
        gateway = SeatRequestGatewayImpl(
            venue_api_client=venue_api_client_factory(
                lambda request: json_response(
                    409, {'success': False, 'conflicts': ['Main Floor-A-1']}
                )
            )
        )

        result = await gateway.submit(command=self.COMMAND)

        assert result.conflicts == ['Main Floor-A-1']
        assert result.message == ''
