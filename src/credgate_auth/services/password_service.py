"""Password hashing service using bcrypt.

Provides password hashing for new credentials and verification against
both bcrypt hashes and legacy unsalted SHA-256 hex digests.
"""

import hashlib
import hmac
import re

import bcrypt

_LEGACY_DIGEST_PATTERN = re.compile(r"^[0-9a-f]{64}$")
_DUMMY_PASSWORD = "credgate-timing-equalization"

# bcrypt ignores (<5.0) or rejects (>=5.0) input beyond 72 bytes
MAX_PASSWORD_BYTES = 72


def digest(plaintext: str) -> str:
    """Return the legacy SHA-256 digest of a password as lowercase hex.

    Deterministic and unsalted. Kept so credentials created by older
    administration tooling still verify; new credentials should use
    ``PasswordHashingService.hash``.

    Parameters
    ----------
    plaintext
        The plaintext password

    Returns
    -------
    64 character lowercase hex string
    """
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def is_legacy_digest(password_hash: str) -> bool:
    """Check whether a stored hash is a legacy SHA-256 hex digest."""
    return bool(_LEGACY_DIGEST_PATTERN.match(password_hash))


class PasswordHashingService:
    """Hashes new passwords with bcrypt and verifies stored hashes.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("qwerty")
    >>> service.verify("qwerty", stored)
    True
    >>> service.verify("qwerty", digest("qwerty"))
    True
    """

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt work factor (log2 of iterations) for new hashes and
            for the timing dummy hash
        """
        self._rounds = rounds
        self._dummy_hash: str | None = None

    @property
    def dummy_hash(self) -> str:
        """A bcrypt hash of a throwaway password with the current work factor.

        Verifying against it costs the same as a real check, which keeps
        unknown-username logins as slow as wrong-password logins.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(_DUMMY_PASSWORD)
        return self._dummy_hash

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        ValueError
            If the password is longer than ``MAX_PASSWORD_BYTES`` when
            encoded as UTF-8
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            msg = f"Password must not exceed {MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)

        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(encoded, salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a stored hash.

        Both bcrypt hashes and legacy SHA-256 hex digests are accepted.
        Comparison is constant-time in both cases. A legacy check also runs
        one bcrypt check against ``dummy_hash`` so it costs as much as a
        bcrypt check.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The stored hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        if is_legacy_digest(password_hash):
            self._checkpw(password, self.dummy_hash)
            return hmac.compare_digest(digest(password), password_hash)

        if not password_hash.startswith("$2"):
            # Unknown format: still pay for one bcrypt check
            self._checkpw(password, self.dummy_hash)
            return False

        return self._checkpw(password, password_hash)

    def _checkpw(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash needs to be rehashed.

        Legacy digests always need rehashing. bcrypt hashes need it when
        their work factor differs from the configured one.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        if is_legacy_digest(password_hash):
            return True
        try:
            # Extract rounds from hash (bcrypt format: $2b$XX$...)
            parts = password_hash.split("$")
            if len(parts) >= 3:
                current_rounds = int(parts[2])
                return current_rounds != self._rounds
        except (ValueError, IndexError):
            pass
        return True
