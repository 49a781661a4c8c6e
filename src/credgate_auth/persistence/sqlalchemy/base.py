"""SQLAlchemy declarative base for credgate_auth models.

This provides a separate Base for auth models. An application that owns
the credentials table elsewhere can map its own schema instead and only
reuse the repository.

Examples
--------
# In Alembic env.py:
from credgate_auth.persistence.sqlalchemy import AuthBase

target_metadata = AuthBase.metadata
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for credgate_auth models."""
