"""Authentication service for username/password login."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from credgate_auth import (
    Credential,
    InvalidCredentialsError,
    LoginOutcome,
    LoginRequest,
    LoginResult,
    PasswordHashingService,
    SigningContext,
    StoreUnavailableError,
    TokenIssuer,
)
from credgate_auth.repositories import CredentialRepository

logger = logging.getLogger(__name__)


class Authenticator:
    """
    Application service for credential login.

    Orchestrates credgate_auth infrastructure (credential lookup, password
    verification, JWT issuing) to turn a LoginRequest into a LoginOutcome.

    Holds no mutable state, so one instance can serve concurrent logins.
    Unknown usernames and wrong passwords produce the same failure; store
    and signing problems are raised instead of being folded into it.
    """

    def __init__(
        self,
        credential_repository: CredentialRepository,
        signing_context: SigningContext,
        password_service: PasswordHashingService,
        token_issuer: TokenIssuer,
        lookup_timeout: float | None = None,
    ):
        self._credential_repo = credential_repository
        self._signing = signing_context
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._lookup_timeout = lookup_timeout

    async def _find_credential(self, username: str) -> Credential | None:
        lookup = self._credential_repo.find_by_username(username)
        try:
            if self._lookup_timeout is None:
                return await lookup
            return await asyncio.wait_for(lookup, timeout=self._lookup_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(
                "Credential lookup timed out after %.2fs",
                self._lookup_timeout,
            )
            msg = "Credential store did not respond in time"
            raise StoreUnavailableError(msg) from e
        except OSError as e:
            logger.warning("Credential store unreachable: %s", type(e).__name__)
            raise StoreUnavailableError from e

    async def authenticate(self, username: str, password: str) -> Credential:
        """Verify a username/password pair.

        Raises
        ------
        InvalidCredentialsError
            If the username is unknown or the password does not match
        StoreUnavailableError
            If the credential store cannot be reached
        """
        credential = await self._find_credential(username)

        if credential is None:
            # Pay the hashing cost anyway so timing does not reveal the miss
            await asyncio.to_thread(
                self._password_service.verify,
                password,
                self._password_service.dummy_hash,
            )
            logger.info("Login failed for username: %s", username)
            raise InvalidCredentialsError

        matches = await asyncio.to_thread(
            self._password_service.verify,
            password,
            credential.password_hash,
        )
        if not matches:
            logger.info("Login failed for username: %s", username)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(credential.password_hash):
            logger.debug("Credential %s uses an outdated password hash", credential.id)

        return credential

    def _issue(self, credential: Credential) -> LoginResult:
        expires_at = datetime.now(tz=timezone.utc) + self._signing.token_lifetime
        token = self._token_issuer.issue_token(
            credential,
            self._signing.secret_key,
            self._signing.issuer,
            expires_at=expires_at,
        )
        return LoginResult(token=token, expires_at=expires_at)

    async def login(self, request: LoginRequest) -> LoginOutcome:
        """Log in with a username and password.

        Returns
        -------
        A success outcome carrying a signed token, or a failure outcome
        with the single generic invalid-credentials message

        Raises
        ------
        StoreUnavailableError
            If the credential store cannot be reached
        SigningConfigurationError
            If the token cannot be signed with the configured key
        """
        try:
            credential = await self.authenticate(request.username, request.password)
        except InvalidCredentialsError as e:
            return LoginOutcome.failure(e.message)

        result = self._issue(credential)
        logger.info("User logged in: %s", credential.id)
        return LoginOutcome.success(result)
