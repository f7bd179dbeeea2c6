from collections.abc import AsyncIterator, Callable, Iterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.testclient import TestClient
import httpx
import pytest

from src.platform.app_factory import create_app
from src.platform.http.venue_api_client import VenueApiClient


VENUE_BASE_URL = 'http://venue.test/api'

Handler = Callable[[httpx.Request], httpx.Response]


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """No tracing exporter and no container wiring; routes get their use cases via overrides"""
    yield


@pytest.fixture
def venue_api_client_factory() -> Callable[[Handler], VenueApiClient]:
    """Venue API client whose transport is answered by `handler`"""

    def _create(handler: Handler, **kwargs: Any) -> VenueApiClient:
        return VenueApiClient(
            base_url=VENUE_BASE_URL, transport=httpx.MockTransport(handler), **kwargs
        )

    return _create


@pytest.fixture
def app() -> FastAPI:
    return create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
