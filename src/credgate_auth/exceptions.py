"""Authentication exceptions.

These exceptions are raised by the credgate_auth package and should be
caught and handled by the application layer (Authenticator) or translated
by the transport layer.
"""

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidCredentialsError(AuthError):
    """Raised when username or password is incorrect during login.

    Unknown usernames and wrong passwords share the same message so that
    callers cannot tell which one failed.
    """

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE):
        super().__init__(message)


class StoreUnavailableError(AuthError):
    """Raised when the credential store fails to answer a lookup.

    Callers may retry with backoff.
    """

    def __init__(self, message: str = "Credential store is unavailable"):
        super().__init__(message)


class SigningConfigurationError(AuthError):
    """Raised when the token signing key or issuer is missing or invalid.

    Fatal for the current process configuration, not retryable.
    """

    def __init__(self, message: str = "Token signing is not configured correctly"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
