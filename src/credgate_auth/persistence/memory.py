"""In-memory implementation of CredentialRepository."""

from collections.abc import Iterable

from credgate_auth.repositories import CredentialRepository
from credgate_auth.schemas import Credential


class InMemoryCredentialRepository(CredentialRepository):
    """Credential lookup backed by a dict keyed on username.

    The mapping is built once at construction and never changed, so a
    single instance can be shared between concurrent logins.
    """

    def __init__(self, credentials: Iterable[Credential] = ()):
        self._by_username = {c.username: c for c in credentials}

    async def find_by_username(self, username: str) -> Credential | None:
        return self._by_username.get(username)
