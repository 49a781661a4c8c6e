"""Authentication services.

Provides password hashing and JWT token issuing.
"""

from credgate_auth.services.password_service import (
    PasswordHashingService,
    digest,
    is_legacy_digest,
)
from credgate_auth.services.token_service import TokenIssuer

__all__ = [
    "PasswordHashingService",
    "TokenIssuer",
    "digest",
    "is_legacy_digest",
]
