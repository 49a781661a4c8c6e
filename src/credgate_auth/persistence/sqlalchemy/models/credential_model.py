"""SQLAlchemy model for login credentials.

This model stores usernames, contact emails and password hashes.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from credgate_auth.persistence.sqlalchemy.base import AuthBase


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class CredentialModel(AuthBase):
    """
    SQLAlchemy model for login credentials.

    Rows are written by the administration process that owns accounts;
    the authentication flow only reads them.

    Table: credentials
    """

    __tablename__ = "credentials"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Compared with "=" so lookups stay case-sensitive
    username: Mapped[str] = mapped_column(
        String(150),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # bcrypt (~60 chars) or legacy SHA-256 hex (64 chars)
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Audit timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utc_now,
        onupdate=_utc_now,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<CredentialModel(id={self.id}, username={self.username})>"
