from datetime import datetime, timezone

from pydantic import SecretStr
import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import (
    access_log_level,
    is_quiet_access_log,
    log_file_path,
)
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    build_call_target_func_path,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)
from src.service.seating.app.dto.seat_request_dto import SeatRequestCommand, SeatRequestContact


pytestmark = pytest.mark.unit


class TestMasking:
    @pytest.mark.parametrize('key', ['phone', 'email', 'VENUE_API_TOKEN', 'password'])
    def test_sensitive_keys_are_masked(self, key):
        assert should_mask_keyword(key, 'value') == MASK

    def test_other_keys_pass_through(self):
        assert should_mask_keyword('selected_seats', ['Main Floor-A-1']) == ['Main Floor-A-1']

    def test_secret_values_are_masked(self):
        assert mask_sensitive(SecretStr('s3cret')) == MASK
        assert mask_sensitive('plain') == 'plain'

    def test_nested_kwargs_are_masked(self):
        io = Logger.io()

        masked = io.mask_sensitive({'contact': {'phone': '555-0142', 'name': 'Dana'}})

        assert masked == {'contact': {'phone': MASK, 'name': 'Dana'}}

    def test_attrs_commands_hide_guest_contact(self):
        command = SeatRequestCommand(
            event_id=5,
            customer_name='Dana Reyes',
            contact=SeatRequestContact(phone='555-0142', email='dana@example.com'),
            selected_seats=['Main Floor-A-1'],
        )

        masked = Logger.io().mask_sensitive(command)['SeatRequestCommand']

        assert masked['customer_name'] == 'Dana Reyes'
        assert masked['contact'] == {'SeatRequestContact': {'phone': MASK, 'email': MASK}}
        assert masked['selected_seats'] == ['Main Floor-A-1']


class TestTruncate:
    def test_short_content_is_untouched(self):
        assert truncate_content('abc') == 'abc'

    def test_long_content_is_cut(self):
        text = 'x' * (MAX_CONTENT_LENGTH + 20)

        assert truncate_content(text) == f'{"x" * MAX_CONTENT_LENGTH}...(+20 chars)'


class TestLoggerIO:
    def test_call_target_path(self):
        def render_chart():
            pass

        assert build_call_target_func_path(render_chart).endswith(
            'loguru_io_unit_test.TestLoggerIO.test_call_target_path.<locals>.render_chart'
        )

    def test_sync_return_value_is_preserved(self):
        @Logger.io
        def seat_count(total: int) -> int:
            return total * 2

        assert seat_count(3) == 6

    @pytest.mark.asyncio
    async def test_async_errors_are_reraised(self):
        @Logger.io
        async def load_layout(layout_id: int) -> None:
            raise NotFoundError(f'Layout {layout_id} not found')

        with pytest.raises(NotFoundError):
            await load_layout(3)

    def test_bad_call_signature_fails_fast(self):
        @Logger.io
        def place(x: float, y: float) -> tuple[float, float]:
            return x, y

        with pytest.raises(TypeError):
            place(1.0)

    def test_swallowed_errors_return_none(self):
        @Logger.io(reraise=False)
        def move_locked_element() -> float:
            raise DomainError('Layout is locked')

        assert move_locked_element() is None

    def test_error_is_logged_once_across_layers(self):
        @Logger.io
        def inner() -> None:
            raise DomainError('Seat 7 is outside 1..6')

        @Logger.io
        def outer() -> None:
            inner()

        with pytest.raises(DomainError) as exc_info:
            outer()

        assert getattr(exc_info.value, '_has_logged', False) is True


class TestAccessLog:
    @pytest.mark.parametrize(
        'line,level',
        [
            ('127.0.0.1 - "GET /api/seating/layout/3/chart HTTP/1.1" - 200 - 8ms', 'SUCCESS'),
            ('127.0.0.1 - "POST /api/seating/event/5/seat-request HTTP/1.1" - 409 - 30ms', 'ERROR'),
            ('127.0.0.1:5000 - "GET /api/seating/layout/9/chart HTTP/1.1" 502', 'CRITICAL'),
            ('127.0.0.1:5000 - "GET / HTTP/1.1" 307', 'WARNING'),
        ],
    )
    def test_level_follows_status(self, line, level):
        assert access_log_level(line) == level

    def test_non_access_lines_are_left_alone(self):
        assert access_log_level('Started server process') is None

    def test_passing_health_check_is_quiet(self):
        assert is_quiet_access_log('10.0.0.7 - "GET /health HTTP/1.1" - 200 - 1ms')
        assert not is_quiet_access_log('10.0.0.7 - "GET /health HTTP/1.1" - 503 - 1ms')

    def test_test_runs_log_into_test_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv('TEST_LOG_DIR', str(tmp_path))

        path = log_file_path(datetime(2026, 10, 19, 14, tzinfo=timezone.utc))

        assert path == tmp_path / 'test_2026-10-19_14.log'
