"""Persistence implementations for credgate_auth.

This package contains implementations of the repository interfaces
defined in credgate_auth.repositories.

Structure:
    persistence/
    ├── memory.py       # dict-backed implementation
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation

Usage:
    from credgate_auth.persistence import InMemoryCredentialRepository
    from credgate_auth.persistence.sqlalchemy import (
        CredentialRepositorySQLAlchemy,
        CredentialModel,
        AuthBase,
    )
"""

from credgate_auth.persistence.memory import InMemoryCredentialRepository

__all__ = ["InMemoryCredentialRepository"]
