"""Registration, login (JWT issuance) and admin user deletion."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import get_credential_service, require_role
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from app.schemas.common import MessageResponse
from app.services.identity import CredentialService

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_CREDENTIALS = "Invalid username or password"


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={400: {"model": MessageResponse}},
)
def register(
    body: RegisterRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> RegisterResponse | JSONResponse:
    """Create an account. Returns the new user id; 400 if the username is taken."""
    result = service.register(body.username, body.password, email=body.email)
    if not result.succeeded:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": result.errors[0]},
        )
    return RegisterResponse(user_id=result.value)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": MessageResponse}},
)
def login(
    body: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> TokenResponse | JSONResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    if not service.validate_credentials(body.username, body.password):
        logger.info("Login failed", extra={"username": body.username})
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": INVALID_CREDENTIALS},
        )
    token = service.generate_token(body.username)
    service.record_login(body.username)
    return TokenResponse(token=token)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": MessageResponse}},
)
def delete_user(
    user_id: str,
    service: Annotated[CredentialService, Depends(get_credential_service)],
    _admin: Annotated[CurrentUser, Depends(require_role("admin"))],
) -> Response:
    """Delete a user account (admin only)."""
    result = service.delete_user(user_id)
    if not result.succeeded:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": result.errors[0]},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
