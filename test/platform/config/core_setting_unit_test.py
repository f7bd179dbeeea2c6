import pytest

from src.platform.config.core_setting import Settings
from src.platform.constant.path import ENV_EXAMPLE_FILE


pytestmark = pytest.mark.unit


class TestCorsOrigins:
    @pytest.fixture(autouse=True)
    def _clear_cors_env(self, monkeypatch):
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

    def test_sample_env_file_loads(self):
        # Given: the .env.example a fresh checkout falls back to
        settings = Settings(_env_file=str(ENV_EXAMPLE_FILE))

        # Then
        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']

    def test_comma_separated_env_var(self, monkeypatch):
        monkeypatch.setenv(
            'BACKEND_CORS_ORIGINS', 'http://localhost:3000, https://tickets.example.com'
        )

        settings = Settings(_env_file=None)

        assert settings.BACKEND_CORS_ORIGINS == [
            'http://localhost:3000',
            'https://tickets.example.com',
        ]

    def test_json_list_env_file(self, tmp_path):
        env_file = tmp_path / '.env'
        env_file.write_text('BACKEND_CORS_ORIGINS=["https://admin.example.com"]\n')

        settings = Settings(_env_file=str(env_file))

        assert settings.BACKEND_CORS_ORIGINS == ['https://admin.example.com']
