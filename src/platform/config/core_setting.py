from typing import Annotated, List

import orjson
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.platform.constant.path import resolve_env_file


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(resolve_env_file()),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Venue Seating'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables io tracing and the file sink

    # CORS: comma separated or a JSON list; NoDecode hands the raw string to the validator
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return [str(i).strip() for i in orjson.loads(v) if str(i).strip()]
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Venue REST API (layouts, event seating, seat requests)
    VENUE_API_BASE_URL: str = 'http://localhost:8000/api'
    VENUE_API_TOKEN: SecretStr | None = None  # Bearer token for admin layout writes

    # Layout document defaults
    DEFAULT_CANVAS_WIDTH: int = 1200
    DEFAULT_CANVAS_HEIGHT: int = 800
    DEFAULT_STAGE_X: float = 50.0  # percent
    DEFAULT_STAGE_Y: float = 10.0  # percent
    DEFAULT_STAGE_WIDTH: int = 200  # px
    DEFAULT_STAGE_HEIGHT: int = 80  # px

    # Editor
    DEFAULT_GRID_SIZE: float = 5.0  # percent
    EDITOR_HISTORY_LIMIT: int = 200

    # Renderer
    SEAT_BASE_SIZE: int = 60  # px footprint of a table before shape scaling

    # Tracing
    SERVICE_NAME: str = 'venue-seating'
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None
    OTEL_CONSOLE_EXPORT: bool = False
    TRACE_SAMPLE_RATIO: float = 1.0


settings = Settings()  # type: ignore
