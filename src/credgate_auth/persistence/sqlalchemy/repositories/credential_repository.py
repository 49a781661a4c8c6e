"""SQLAlchemy implementation of CredentialRepository.

Provides read access to CredentialModel and maps driver failures to
StoreUnavailableError.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from credgate_auth.exceptions import StoreUnavailableError
from credgate_auth.persistence.sqlalchemy.models import CredentialModel
from credgate_auth.repositories import CredentialRepository
from credgate_auth.schemas import Credential

logger = logging.getLogger(__name__)


class CredentialRepositorySQLAlchemy(CredentialRepository):
    """
    SQLAlchemy implementation of CredentialRepository.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    def _to_data(self, model: CredentialModel) -> Credential:
        """Map SQLAlchemy model to credential record."""
        return Credential(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
        )

    async def find_by_username(self, username: str) -> Credential | None:
        """
        Find a credential by username.

        Parameters
        ----------
        username
            The exact login name

        Returns
        -------
        Credential if found, None otherwise

        Raises
        ------
        StoreUnavailableError
            If the database cannot be queried
        """
        stmt = select(CredentialModel).where(CredentialModel.username == username)
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            # Driver messages may contain connection strings
            logger.error("Credential lookup failed: %s", type(e).__name__)
            raise StoreUnavailableError from e

        model = result.scalar_one_or_none()
        return self._to_data(model) if model else None
