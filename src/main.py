"""
Seating service entrypoint.

    granian --interface asgi --host 0.0.0.0 --port 8100 src.main:app

Charts and seat requests are served from the venue REST API; nothing is stored locally.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Seating Service] Starting up...')

    tracing = TracingConfig()
    tracing.setup()
    tracing.instrument_httpx()
    Logger.base.info('📊 [Seating Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Seating Service] Dependency injection wired')

    yield

    Logger.base.info('🛑 [Seating Service] Shutting down...')

    await container.venue_api_client().aclose()
    Logger.base.info('🌐 [Seating Service] Venue API client closed')

    tracing.shutdown()
    container.unwire()
    Logger.base.info('👋 [Seating Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
