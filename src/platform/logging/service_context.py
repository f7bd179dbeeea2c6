"""
Service context stamped on every log line.

Tells apart granian workers (and deployments) that share one log sink.
"""

from functools import lru_cache
import os

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{settings.SERVICE_NAME}@{deploy_env}:{os.getpid()}'
