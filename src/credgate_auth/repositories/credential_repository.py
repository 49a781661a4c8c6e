"""Abstract repository interface for login credentials.

This interface defines the lookup contract the authentication flow needs.
Implementations can use SQLAlchemy, an in-memory mapping, or any other
storage. Credentials are created and changed by an external
administration process, so the interface is read-only.
"""

from abc import ABC, abstractmethod

from credgate_auth.schemas import Credential


class CredentialRepository(ABC):
    """
    Abstract repository interface for login credentials.

    Implementations must translate storage failures (connection errors,
    driver errors) into ``StoreUnavailableError`` so callers can tell an
    unavailable store from a missing credential.

    Example implementation:
        class CredentialRepositorySQLAlchemy(CredentialRepository):
            def __init__(self, session: AsyncSession):
                self._session = session

            async def find_by_username(self, username: str) -> Credential | None:
                # SQLAlchemy-specific implementation
                ...
    """

    @abstractmethod
    async def find_by_username(self, username: str) -> Credential | None:
        """
        Find a credential by its exact, case-sensitive username.

        Parameters
        ----------
        username
            The login name to look up

        Returns
        -------
        Credential if found, None otherwise

        Raises
        ------
        StoreUnavailableError
            If the underlying store cannot be reached
        """
