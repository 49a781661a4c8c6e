"""Auth schemas and data structures.

These are simple data classes used for transferring credential, login
and token data between components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Protocol, Union

from credgate_auth.exceptions import SigningConfigurationError

# HS256 keys shorter than the digest size weaken the signature
MIN_SECRET_KEY_BYTES = 32
DEFAULT_TOKEN_LIFETIME = timedelta(minutes=30)

SIGNING_KEY_CONFIG_KEY = "jwt:key"
SIGNING_ISSUER_CONFIG_KEY = "jwt:issuer"
SIGNING_EXPIRE_MINUTES_CONFIG_KEY = "jwt:expire_minutes"

SecretKey = Union[str, bytes]


def validate_signing_material(secret_key: SecretKey | None, issuer: str | None) -> None:
    """Validate a signing key and issuer pair.

    Parameters
    ----------
    secret_key
        Symmetric key used for HMAC signing
    issuer
        Issuer identity written to the ``iss`` and ``aud`` claims

    Raises
    ------
    SigningConfigurationError
        If the key is empty or shorter than ``MIN_SECRET_KEY_BYTES``,
        or if the issuer is empty
    """
    if not secret_key:
        msg = "JWT secret key cannot be empty"
        raise SigningConfigurationError(msg)

    key_bytes = secret_key.encode("utf-8") if isinstance(secret_key, str) else secret_key
    if len(key_bytes) < MIN_SECRET_KEY_BYTES:
        msg = f"JWT secret key must be at least {MIN_SECRET_KEY_BYTES} bytes"
        raise SigningConfigurationError(msg)

    if not issuer or not issuer.strip():
        msg = "JWT issuer cannot be empty"
        raise SigningConfigurationError(msg)


class ConfigurationProvider(Protocol):
    """Key/value configuration source."""

    def get_value(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class Credential:
    """Stored identity record used to verify a login attempt.

    Attributes
    ----------
    id
        Opaque identity reference (numeric or string)
    username
        Unique, case-sensitive login name
    email
        Contact address embedded in issued tokens
    password_hash
        One-way digest of the password, never the plaintext
    """

    id: int | str
    username: str
    email: str
    password_hash: str = field(repr=False)


@dataclass(frozen=True)
class LoginRequest:
    """Submitted login attempt. Never persisted."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class LoginResult:
    """Success payload of a login."""

    token: str
    expires_at: datetime


@dataclass(frozen=True)
class LoginOutcome:
    """Result of a login: either a success payload or a list of errors.

    Exactly one of ``result`` and ``errors`` is populated.
    """

    result: LoginResult | None = None
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.result is None and not self.errors:
            msg = "LoginOutcome needs either a result or at least one error"
            raise ValueError(msg)
        if self.result is not None and self.errors:
            msg = "LoginOutcome cannot carry both a result and errors"
            raise ValueError(msg)

    @classmethod
    def success(cls, result: LoginResult) -> LoginOutcome:
        return cls(result=result)

    @classmethod
    def failure(cls, *errors: str) -> LoginOutcome:
        return cls(errors=tuple(errors))

    @property
    def is_error(self) -> bool:
        return len(self.errors) > 0


@dataclass(frozen=True)
class SigningContext:
    """Immutable token signing configuration.

    Validated on construction so misconfiguration surfaces at startup
    rather than on the first login.
    """

    secret_key: SecretKey = field(repr=False)
    issuer: str
    token_lifetime: timedelta = DEFAULT_TOKEN_LIFETIME

    def __post_init__(self) -> None:
        validate_signing_material(self.secret_key, self.issuer)
        if self.token_lifetime <= timedelta(0):
            msg = "Token lifetime must be positive"
            raise SigningConfigurationError(msg)

    @classmethod
    def from_provider(cls, provider: ConfigurationProvider) -> SigningContext:
        """Build a signing context from a key/value configuration source.

        Reads ``jwt:key``, ``jwt:issuer`` and the optional
        ``jwt:expire_minutes``.
        """
        secret_key = provider.get_value(SIGNING_KEY_CONFIG_KEY)
        issuer = provider.get_value(SIGNING_ISSUER_CONFIG_KEY)
        if secret_key is None:
            msg = f"Missing configuration value: {SIGNING_KEY_CONFIG_KEY}"
            raise SigningConfigurationError(msg)
        if issuer is None:
            msg = f"Missing configuration value: {SIGNING_ISSUER_CONFIG_KEY}"
            raise SigningConfigurationError(msg)

        expire_minutes = provider.get_value(SIGNING_EXPIRE_MINUTES_CONFIG_KEY)
        if expire_minutes is None:
            return cls(secret_key=secret_key, issuer=issuer)

        try:
            lifetime = timedelta(minutes=int(expire_minutes))
        except ValueError as e:
            msg = f"Invalid {SIGNING_EXPIRE_MINUTES_CONFIG_KEY}: {expire_minutes!r}"
            raise SigningConfigurationError(msg) from e
        return cls(secret_key=secret_key, issuer=issuer, token_lifetime=lifetime)


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    subject
        Stringified credential id (``sub`` claim)
    name
        Display name (``name`` claim)
    email
        Email address (``email`` claim)
    issuer
        Token issuer (``iss`` claim)
    issued_at
        Issue timestamp
    expires_at
        Expiration timestamp
    """

    subject: str
    name: str
    email: str
    issuer: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
