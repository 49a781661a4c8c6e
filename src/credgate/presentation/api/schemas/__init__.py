from credgate.presentation.api.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
)

__all__ = ["ErrorResponse", "LoginRequest", "LoginResponse"]
