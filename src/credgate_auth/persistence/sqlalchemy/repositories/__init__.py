from credgate_auth.persistence.sqlalchemy.repositories.credential_repository import (
    CredentialRepositorySQLAlchemy,
)

__all__ = ["CredentialRepositorySQLAlchemy"]
