"""
FastAPI app factory shared by the production entrypoint and the test client.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.seating.driving_adapter.http_controller.seating_controller import (
    router as seating_router,
)


# (router, prefix, tag)
ROUTERS: list[tuple[APIRouter, str, str]] = [
    (seating_router, '/api/seating', 'seating'),
]


def _add_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['*'],
    )


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Venue seating layouts and seat requests',
    service_name: str | None = None,
) -> FastAPI:
    """
    Build the seating API.

    Args:
        lifespan: startup/shutdown context (tracing, DI wiring, client cleanup)
        title_suffix: appended to the title, e.g. " (Test)"
        description: OpenAPI description
        service_name: tracing service name, defaults to settings.SERVICE_NAME
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Instrument before routes are mounted
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)
    _add_cors(app)
    register_exception_handlers(app)

    for router, prefix, tag in ROUTERS:
        app.include_router(router, prefix=prefix, tags=[tag])

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {
            'status': 'healthy',
            'service': settings.PROJECT_NAME,
            'version': settings.VERSION,
        }

    return app
