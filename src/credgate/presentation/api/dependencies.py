"""FastAPI dependency injection for the credgate API.

Provides dependencies for:
- Application settings
- Database sessions
- The Authenticator service

Long-lived objects (signing context, password service, token issuer,
engine) are built once by ``create_app`` and kept on ``app.state``.
"""

import logging
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from credgate.application.services import Authenticator
from credgate_auth.persistence.sqlalchemy import CredentialRepositorySQLAlchemy
from credgate_config.settings import Settings

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine for the credential database.

    Parameters
    ----------
    database_url
        SQLAlchemy async database URL

    Returns
    -------
    AsyncEngine (no connection is opened yet)
    """
    # Ensure data directory exists for file-based SQLite
    if _is_sqlite_file(database_url):
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(database_url, pool_pre_ping=True)


def _is_sqlite_file(database_url: str) -> bool:
    return database_url.startswith("sqlite") and ":memory:" not in database_url


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the duration of one request."""
    async with request.app.state.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_authenticator(
    request: Request,
    session: DBSession,
    settings: SettingsDep,
) -> Authenticator:
    """Build an Authenticator bound to the request's database session."""
    state = request.app.state
    return Authenticator(
        credential_repository=CredentialRepositorySQLAlchemy(session),
        signing_context=state.signing_context,
        password_service=state.password_service,
        token_issuer=state.token_issuer,
        lookup_timeout=settings.credential_lookup_timeout_seconds,
    )


AuthenticatorDep = Annotated[Authenticator, Depends(get_authenticator)]
