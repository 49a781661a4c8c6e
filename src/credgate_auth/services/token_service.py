"""JWT token issuing service.

Provides signed identity token creation and verification for
authenticated credentials.
"""

from datetime import datetime, timedelta, timezone

import jwt

from credgate_auth.exceptions import InvalidTokenError, SigningConfigurationError
from credgate_auth.schemas import (
    DEFAULT_TOKEN_LIFETIME,
    Credential,
    SecretKey,
    SigningContext,
    TokenPayload,
    validate_signing_material,
)


class TokenIssuer:
    """Service for JWT identity token creation and verification.

    Tokens carry the credential's display name, email and stringified id
    and are signed with HMAC-SHA256. The issuer is written to both the
    ``iss`` and ``aud`` claims.

    Examples
    --------
    >>> issuer = TokenIssuer()
    >>> token = issuer.issue_token(credential, secret_key, "credgate")
    >>> payload = issuer.verify_token(token, secret_key, "credgate")
    >>> print(payload.subject)
    """

    ALGORITHM = "HS256"

    def __init__(self, default_lifetime: timedelta = DEFAULT_TOKEN_LIFETIME):
        """Initialize the token issuer.

        Parameters
        ----------
        default_lifetime
            Lifetime applied when ``issue_token`` gets no expiration
            (default 30 minutes)
        """
        if default_lifetime <= timedelta(0):
            msg = "Default token lifetime must be positive"
            raise SigningConfigurationError(msg)

        self._default_lifetime = default_lifetime

    def issue_token(
        self,
        credential: Credential,
        secret_key: SecretKey,
        issuer: str,
        expires_at: datetime | None = None,
    ) -> str:
        """Issue a signed token for an authenticated credential.

        Parameters
        ----------
        credential
            The authenticated credential
        secret_key
            Symmetric signing key (at least 32 bytes)
        issuer
            Issuer identity, also used as audience
        expires_at
            Expiration timestamp. Defaults to now plus the default lifetime.

        Returns
        -------
        The encoded JWT token string

        Raises
        ------
        SigningConfigurationError
            If the key or issuer is missing or invalid
        """
        validate_signing_material(secret_key, issuer)

        now = datetime.now(tz=timezone.utc)
        if expires_at is None:
            expires_at = now + self._default_lifetime

        payload = {
            "sub": str(credential.id),
            "name": credential.username,
            "email": credential.email,
            "iss": issuer,
            "aud": issuer,
            "iat": now,
            "exp": expires_at,
        }

        return jwt.encode(payload, secret_key, algorithm=self.ALGORITHM)

    def issue_token_with_context(
        self,
        credential: Credential,
        signing: SigningContext,
        expires_at: datetime | None = None,
    ) -> str:
        """Issue a token using a signing context.

        Uses the context's token lifetime when no expiration is given.
        """
        if expires_at is None:
            expires_at = datetime.now(tz=timezone.utc) + signing.token_lifetime
        return self.issue_token(
            credential,
            signing.secret_key,
            signing.issuer,
            expires_at=expires_at,
        )

    def verify_token(self, token: str, secret_key: SecretKey, issuer: str) -> TokenPayload:
        """Verify and decode a token.

        Parameters
        ----------
        token
            The JWT token string to verify
        secret_key
            Key the token was signed with
        issuer
            Expected issuer and audience

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                secret_key,
                algorithms=[self.ALGORITHM],
                audience=issuer,
                issuer=issuer,
                options={"require": ["exp", "iat", "sub"]},
            )

            return TokenPayload(
                subject=payload["sub"],
                name=payload["name"],
                email=payload["email"],
                issuer=payload["iss"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
