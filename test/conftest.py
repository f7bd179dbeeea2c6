"""
Test Configuration

Environment setup MUST happen before any application import so that
settings and the loguru sinks pick up the test values.

Architecture:
- Unit tests (test/**/unit/): every port is an AsyncMock
- Integration tests: the venue API is an httpx.MockTransport, the HTTP
  surface is driven through FastAPI's TestClient
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('VENUE_API_BASE_URL', 'http://venue.test/api')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.config.di import cleanup  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container_singletons():
    yield
    cleanup()
