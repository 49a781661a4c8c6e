"""Fixtures for API integration tests.

Each test gets its own SQLite file under tmp_path. Tests that only care
about HTTP behaviour swap the Authenticator for one backed by the
in-memory credential store.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from credgate.application.services import Authenticator
from credgate.presentation.api import create_app
from credgate.presentation.api.dependencies import get_authenticator
from credgate_auth.persistence import InMemoryCredentialRepository
from credgate_config import Settings
from tests.shared.constants import TEST_BCRYPT_ROUNDS, TEST_ISSUER, TEST_SECRET_KEY


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "credgate.db"


@pytest.fixture
def settings(db_path) -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret_key=TEST_SECRET_KEY,
        jwt_issuer=TEST_ISSUER,
        database_url=f"sqlite+aiosqlite:///{db_path}",
        password_hash_rounds=TEST_BCRYPT_ROUNDS,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def use_repository(app):
    """Serve logins from the given repository instead of the database."""
    state = app.state

    def _use(repository) -> None:
        def _authenticator() -> Authenticator:
            return Authenticator(
                credential_repository=repository,
                signing_context=state.signing_context,
                password_service=state.password_service,
                token_issuer=state.token_issuer,
            )

        app.dependency_overrides[get_authenticator] = _authenticator

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, damian, use_repository):
    use_repository(InMemoryCredentialRepository([damian]))
    with TestClient(app) as client:
        yield client
