"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from grocery.database import get_db
from grocery.models.user import User
from grocery.services.auth import get_user, resolve_user_id
from grocery.services.gateway import GroceryGateway

# Missing credentials are reported by get_current_user so every auth failure is a 401
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None or not credentials.credentials.strip():
        raise _unauthorized("Missing bearer token")

    user_id = resolve_user_id(credentials.credentials.strip())
    if user_id is None:
        raise _unauthorized("Invalid authentication credentials")

    user = get_user(db, user_id)
    if user is None:
        raise _unauthorized("User not found")

    return user


def get_gateway(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> GroceryGateway:
    """Data access scoped to the caller, valid for this request only."""
    return GroceryGateway(db, current_user.id)
