"""Authentication router for username/password login."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from credgate.presentation.api.dependencies import AuthenticatorDep
from credgate.presentation.api.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
)
from credgate_auth import LoginRequest as LoginAttempt

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
        503: {"description": "Credential store unavailable"},
    },
)
async def login(
    request: LoginRequest,
    authenticator: AuthenticatorDep,
):
    """
    Authenticate with username and password.

    Returns a signed access token on success. Unknown usernames and wrong
    passwords get the same 400 response.
    """
    outcome = await authenticator.login(
        LoginAttempt(username=request.username, password=request.password),
    )

    if outcome.is_error:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(errors=list(outcome.errors)).model_dump(),
        )

    result = outcome.result
    return LoginResponse(token=result.token, expires_at=result.expires_at)
