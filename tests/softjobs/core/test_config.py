import pytest

from softjobs.core.config import DEFAULT_SECRET_KEY, Settings, load_settings, validate_runtime_config

DB_VARIABLES = ['DATABASE_URL', 'DB_USER', 'DB_PASSWORD', 'DB_HOST', 'DB_PORT', 'DB_NAME']


def test_load_settings_builds_database_url_from_parts(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in DB_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('DB_USER', 'jobs')
    monkeypatch.setenv('DB_PASSWORD', 'pw')
    monkeypatch.setenv('DB_HOST', 'db.internal')
    monkeypatch.setenv('DB_PORT', '6543')
    monkeypatch.setenv('DB_NAME', 'softjobs_test')

    settings = load_settings()

    assert settings.database_url == 'postgresql+psycopg2://jobs:pw@db.internal:6543/softjobs_test'


def test_load_settings_prefers_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///./softjobs.db')

    assert load_settings().database_url == 'sqlite:///./softjobs.db'


def test_load_settings_reads_token_and_cors_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('SECRET_KEY', 'from-env')
    monkeypatch.setenv('JWT_EXPIRES_MINUTES', '15')
    monkeypatch.setenv('CORS_ORIGINS', 'http://a.test, http://b.test')
    monkeypatch.setenv('PORT', '8080')

    settings = load_settings()

    assert settings.secret_key == 'from-env'
    assert settings.jwt_expires_minutes == 15
    assert settings.cors_origins == ['http://a.test', 'http://b.test']
    assert settings.port == 8080


def test_settings_are_immutable() -> None:
    settings = Settings()

    with pytest.raises(AttributeError):
        settings.secret_key = 'changed'


def test_validate_runtime_config_rejects_default_secret_in_production() -> None:
    with pytest.raises(RuntimeError):
        validate_runtime_config(Settings(app_env='production', secret_key=DEFAULT_SECRET_KEY))


def test_validate_runtime_config_allows_default_secret_in_development() -> None:
    validate_runtime_config(Settings(app_env='development'))
    validate_runtime_config(Settings(app_env='production', secret_key='a-real-secret'))
