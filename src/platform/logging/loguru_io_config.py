"""
Loguru sink setup shared by `Logger.base` and `@Logger.io`.

Importing this module configures the process once: a stdout sink, an hourly
file sink when DEBUG is on (under TEST_LOG_DIR during tests), and stdlib
logging (granian, httpx, fastapi) routed into loguru.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR as DEFAULT_LOG_DIR
from src.platform.logging.service_context import get_service_context


# Guest contact details and venue API credentials never reach the logs
SENSITIVE_KEYWORDS = {
    'password',
    'token',
    'authorization',
    'email',
    'phone',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


# granian: '127.0.0.1 - "GET /api/seating/layout/3/chart HTTP/1.1" - 200 - 8ms'
# uvicorn: '127.0.0.1:5000 - "GET /health HTTP/1.1" 200'
_ACCESS_LOG = re.compile(r'"(?P<method>[A-Z]+) (?P<path>\S+) HTTP/[\d.]+"[\s-]*(?P<status>\d{3})')

_STATUS_LEVELS = ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS'))

# Polled by the load balancer every few seconds
QUIET_PATHS = frozenset({'/health'})


def access_log_level(message: str) -> str | None:
    """Level for an access-log line, keyed on its HTTP status; None for other lines"""
    match = _ACCESS_LOG.search(message)
    if match is None:
        return None
    status = int(match['status'])
    return next((level for floor, level in _STATUS_LEVELS if status >= floor), 'INFO')


def is_quiet_access_log(message: str) -> bool:
    match = _ACCESS_LOG.search(message)
    return match is not None and match['path'] in QUIET_PATHS and match['status'] == '200'


class InterceptHandler(logging.Handler):
    """Route stdlib records into loguru, keeping the caller's frame"""

    _bound: 'LoguruLogger | None' = None

    @classmethod
    def bound_logger(cls) -> 'LoguruLogger':
        if cls._bound is None:
            cls._bound = loguru_logger.bind(**default_extra())
        return cls._bound

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()

        # Outbound calls are already traced by @Logger.io on the venue API adapters
        if record.levelno <= logging.DEBUG and record.name.startswith(('httpx', 'httpcore')):
            return
        if is_quiet_access_log(message):
            return

        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self.bound_logger().opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def log_file_path(now: datetime | None = None) -> Path:
    now = now or datetime.now().astimezone()
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    stamp = now.strftime('%Y-%m-%d_%H')
    if test_log_dir:
        return Path(test_log_dir) / f'test_{stamp}.log'
    return DEFAULT_LOG_DIR / f'{stamp}.log'


def configure_sinks(*, debug: bool) -> 'LoguruLogger':
    loguru_logger.remove()
    bound = loguru_logger.bind(**default_extra())
    level = 'DEBUG' if debug else 'INFO'

    bound.add(sys.stdout, format=io_log_format, level=level, enqueue=True)
    if debug:
        bound.add(
            str(log_file_path()),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return bound


custom_logger = configure_sinks(debug=settings.DEBUG)
