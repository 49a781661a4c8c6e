"""Repository interfaces for credgate_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies (SQLAlchemy, in-memory, etc.).

The implementations live in credgate_auth.persistence.
"""

from credgate_auth.repositories.credential_repository import CredentialRepository

__all__ = ["CredentialRepository"]
