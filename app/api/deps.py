"""FastAPI dependencies: service wiring per request, bearer authentication and role checks."""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import PasswordHasher, TokenIssuer
from app.repositories.products import ProductStore
from app.repositories.users import UserStore
from app.schemas.auth import CurrentUser
from app.services.identity import CredentialService
from app.services.pipeline import Pipeline, build_product_pipeline

security = HTTPBearer(auto_error=False)


def get_token_issuer(request: Request) -> TokenIssuer:
    """The issuer built once by create_app from the startup JwtSettings."""
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_credential_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CredentialService:
    return CredentialService(UserStore(db), hasher, tokens)


def get_product_pipeline(db: Annotated[Session, Depends(get_db)]) -> Pipeline:
    return build_product_pipeline(ProductStore(db))


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = tokens.decode(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token") from None
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise _unauthorized("Invalid token payload") from None
    user = UserStore(db).find_by_id(user_id)
    if user is None:
        raise _unauthorized("User not found")
    return CurrentUser(id=user.id, username=user.username, roles=list(user.roles or []))


def require_role(role: str) -> Callable[[CurrentUser], CurrentUser]:
    """Dependency factory: require an authenticated user holding `role`. Raises 403 otherwise."""

    def _require(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if role not in current_user.roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{role}' required",
            )
        return current_user

    return _require
