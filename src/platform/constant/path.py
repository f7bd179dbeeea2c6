from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[3]

# .env wins; .env.example keeps a fresh checkout bootable
ENV_FILE = PROJECT_ROOT / '.env'
ENV_EXAMPLE_FILE = PROJECT_ROOT / '.env.example'

LOG_DIR = PROJECT_ROOT / 'logs'


def resolve_env_file() -> Path:
    return ENV_FILE if ENV_FILE.exists() else ENV_EXAMPLE_FILE
