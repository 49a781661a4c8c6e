"""credgate auth - Credential verification and token issuing.

This package provides authentication infrastructure that is independent
of any transport or storage. It handles:
- Password hashing and verification (bcrypt, legacy SHA-256)
- Signed JWT identity tokens
- Credential lookup (with pluggable persistence)

Architecture:
    credgate_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    # Import core services and interfaces
    from credgate_auth import PasswordHashingService, TokenIssuer

    # Import SQLAlchemy implementation
    from credgate_auth.persistence.sqlalchemy import (
        CredentialRepositorySQLAlchemy,
        CredentialModel,
        AuthBase,
    )
"""

from credgate_auth.exceptions import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    SigningConfigurationError,
    StoreUnavailableError,
)
from credgate_auth.repositories import CredentialRepository
from credgate_auth.schemas import (
    ConfigurationProvider,
    Credential,
    LoginOutcome,
    LoginRequest,
    LoginResult,
    SigningContext,
    TokenPayload,
)
from credgate_auth.services import PasswordHashingService, TokenIssuer, digest

__all__ = [
    # Services
    "PasswordHashingService",
    "TokenIssuer",
    "digest",
    # Repositories (interfaces)
    "CredentialRepository",
    # Schemas
    "ConfigurationProvider",
    "Credential",
    "LoginOutcome",
    "LoginRequest",
    "LoginResult",
    "SigningContext",
    "TokenPayload",
    # Exceptions
    "INVALID_CREDENTIALS_MESSAGE",
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "SigningConfigurationError",
    "StoreUnavailableError",
]
