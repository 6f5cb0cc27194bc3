import pytest
from fastapi.testclient import TestClient

from softjobs.core.config import Settings
from softjobs.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        secret_key='tests-secret-key',
        bcrypt_rounds=4,
        database_url='sqlite://',
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
