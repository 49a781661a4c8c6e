"""Unit tests for TokenIssuer."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from credgate_auth import Credential, SigningContext
from credgate_auth.exceptions import InvalidTokenError, SigningConfigurationError
from credgate_auth.services import TokenIssuer, digest
from tests.shared.constants import TEST_ISSUER, TEST_SECRET_KEY


def _credential() -> Credential:
    return Credential(
        id=42,
        username="damian",
        email="damian@wp.pl",
        password_hash=digest("qwerty"),
    )


class TestTokenIssuerInit:
    """Tests for TokenIssuer initialization."""

    def test_init_with_defaults(self):
        """Test that issuer initializes with the default lifetime."""
        assert TokenIssuer() is not None

    def test_init_with_non_positive_lifetime_raises(self):
        """Test that a zero lifetime is rejected."""
        with pytest.raises(SigningConfigurationError, match="positive"):
            TokenIssuer(default_lifetime=timedelta(0))


class TestIssueToken:
    """Tests for token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.issuer = TokenIssuer()
        self.credential = _credential()

    def test_issue_token_returns_jwt(self):
        """Test that a compact JWT is returned."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, TEST_ISSUER)

        assert isinstance(token, str)
        assert token.count(".") == 2
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_verify_returns_identity_claims(self):
        """Test that subject, name and email round-trip."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, TEST_ISSUER)

        payload = self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)

        assert payload.subject == "42"
        assert payload.name == "damian"
        assert payload.email == "damian@wp.pl"
        assert payload.issuer == TEST_ISSUER
        assert payload.is_expired() is False

    def test_token_carries_issuer_as_audience(self):
        """Test that iss and aud both hold the issuer."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, TEST_ISSUER)
        claims = jwt.decode(token, options={"verify_signature": False})

        assert claims["iss"] == TEST_ISSUER
        assert claims["aud"] == TEST_ISSUER

    def test_token_never_contains_password_hash(self):
        """Test that no claim leaks the stored digest."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, TEST_ISSUER)
        claims = jwt.decode(token, options={"verify_signature": False})

        assert set(claims) == {"sub", "name", "email", "iss", "aud", "iat", "exp"}
        assert self.credential.password_hash not in claims.values()

    def test_default_expiry_is_bounded(self):
        """Test that a token without explicit expiry still expires."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, TEST_ISSUER)

        payload = self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)
        lifetime = payload.expires_at - payload.issued_at

        assert timedelta(minutes=29) < lifetime <= timedelta(minutes=30)

    def test_explicit_expiry_is_used(self):
        """Test that a given expiration is written to the token."""
        expires_at = datetime.now(tz=timezone.utc) + timedelta(hours=2)

        token = self.issuer.issue_token(
            self.credential,
            TEST_SECRET_KEY,
            TEST_ISSUER,
            expires_at=expires_at,
        )
        payload = self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)

        assert abs(payload.expires_at - expires_at) < timedelta(seconds=1)

    def test_bytes_secret_key(self):
        """Test that a bytes key signs and verifies."""
        key = TEST_SECRET_KEY.encode()
        token = self.issuer.issue_token(self.credential, key, TEST_ISSUER)

        assert self.issuer.verify_token(token, key, TEST_ISSUER).subject == "42"

    def test_string_id_is_kept(self):
        """Test that non-numeric ids are used as-is for the subject."""
        credential = Credential(
            id="a1b2",
            username="anna",
            email="anna@example.com",
            password_hash=digest("pw"),
        )
        token = self.issuer.issue_token(credential, TEST_SECRET_KEY, TEST_ISSUER)

        assert self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER).subject == "a1b2"

    def test_issue_token_with_context_uses_context_lifetime(self):
        """Test that the signing context lifetime applies."""
        signing = SigningContext(
            secret_key=TEST_SECRET_KEY,
            issuer=TEST_ISSUER,
            token_lifetime=timedelta(minutes=5),
        )

        token = self.issuer.issue_token_with_context(self.credential, signing)
        payload = self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)

        assert payload.expires_at - payload.issued_at <= timedelta(minutes=5)
        assert payload.expires_at - payload.issued_at > timedelta(minutes=4)


class TestSigningValidation:
    """Tests for signing key and issuer validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.issuer = TokenIssuer()
        self.credential = _credential()

    def test_empty_secret_key_raises(self):
        """Test that an empty key is a configuration error."""
        with pytest.raises(SigningConfigurationError, match="cannot be empty"):
            self.issuer.issue_token(self.credential, "", TEST_ISSUER)

    def test_short_secret_key_raises(self):
        """Test that a key below 32 bytes is rejected."""
        with pytest.raises(SigningConfigurationError, match="at least 32 bytes"):
            self.issuer.issue_token(self.credential, "too-short", TEST_ISSUER)

    def test_empty_issuer_raises(self):
        """Test that an empty issuer is rejected."""
        with pytest.raises(SigningConfigurationError, match="issuer"):
            self.issuer.issue_token(self.credential, TEST_SECRET_KEY, "")

    def test_blank_issuer_raises(self):
        """Test that a whitespace issuer is rejected."""
        with pytest.raises(SigningConfigurationError, match="issuer"):
            self.issuer.issue_token(self.credential, TEST_SECRET_KEY, "   ")


class TestVerifyToken:
    """Tests for token verification failures."""

    def setup_method(self):
        """Set up test fixtures."""
        self.issuer = TokenIssuer()
        self.credential = _credential()

    def test_verify_expired_token_raises(self):
        """Test that expired token raises InvalidTokenError."""
        token = self.issuer.issue_token(
            self.credential,
            TEST_SECRET_KEY,
            TEST_ISSUER,
            expires_at=datetime.now(tz=timezone.utc) - timedelta(minutes=1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)

    def test_verify_invalid_token_raises(self):
        """Test that garbage raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            self.issuer.verify_token("invalid.token.string", TEST_SECRET_KEY, TEST_ISSUER)

    def test_verify_tampered_token_raises(self):
        """Test that tampered token raises InvalidTokenError."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, TEST_ISSUER)
        tampered = token[:-5] + ("xxxxx" if not token.endswith("xxxxx") else "yyyyy")

        with pytest.raises(InvalidTokenError):
            self.issuer.verify_token(tampered, TEST_SECRET_KEY, TEST_ISSUER)

    def test_verify_wrong_secret_raises(self):
        """Test that token from different secret raises InvalidTokenError."""
        token = self.issuer.issue_token(self.credential, "x" * 40, TEST_ISSUER)

        with pytest.raises(InvalidTokenError):
            self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)

    def test_verify_wrong_issuer_raises(self):
        """Test that a token from another issuer is rejected."""
        token = self.issuer.issue_token(self.credential, TEST_SECRET_KEY, "someone-else")

        with pytest.raises(InvalidTokenError):
            self.issuer.verify_token(token, TEST_SECRET_KEY, TEST_ISSUER)
