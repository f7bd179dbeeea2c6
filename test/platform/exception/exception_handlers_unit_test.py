from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    SeatConflictError,
    VenueApiError,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/raise/{kind}')
    async def raise_error(kind: str) -> None:
        errors = {
            'domain': DomainError('Seat count cannot be negative'),
            'forbidden': ForbiddenError('Cannot delete the default layout'),
            'not_found': NotFoundError('Layout not found'),
            'conflict': SeatConflictError('Seats taken', ['Main Floor-A-1']),
            'venue': VenueApiError('Venue API unreachable'),
            'value': ValueError('bad value'),
            'reason': DomainError('Customer name is required', reason_code='missing_customer_name'),
        }
        raise errors[kind]

    return TestClient(app)


class TestExceptionHandlers:
    @pytest.mark.parametrize(
        'kind,status_code,detail',
        [
            ('domain', 400, 'Seat count cannot be negative'),
            ('forbidden', 403, 'Cannot delete the default layout'),
            ('not_found', 404, 'Layout not found'),
            ('venue', 502, 'Venue API unreachable'),
            ('value', 400, 'bad value'),
        ],
    )
    def test_errors_map_to_status(self, client, kind, status_code, detail):
        response = client.get(f'/raise/{kind}')

        assert response.status_code == status_code
        assert response.json() == {'detail': detail}

    def test_seat_conflict_lists_seats(self, client):
        response = client.get('/raise/conflict')

        assert response.status_code == 409
        assert response.json() == {
            'detail': 'Seats taken',
            'reason': 'seat_conflict',
            'conflicts': ['Main Floor-A-1'],
        }

    def test_reason_code_is_exposed(self, client):
        response = client.get('/raise/reason')

        assert response.status_code == 400
        assert response.json() == {
            'detail': 'Customer name is required',
            'reason': 'missing_customer_name',
        }
