"""SQLAlchemy implementation for credgate_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- CredentialModel: SQLAlchemy model for credentials
- CredentialRepositorySQLAlchemy: Repository implementation

Note: The consuming application should include AuthBase.metadata
in its migrations to create the credentials table.

Examples
--------
# In your Alembic env.py or migration setup:
from credgate_auth.persistence.sqlalchemy import AuthBase
target_metadata = AuthBase.metadata
"""

from credgate_auth.persistence.sqlalchemy.base import AuthBase
from credgate_auth.persistence.sqlalchemy.models import CredentialModel
from credgate_auth.persistence.sqlalchemy.repositories import (
    CredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "CredentialModel",
    "CredentialRepositorySQLAlchemy",
]
