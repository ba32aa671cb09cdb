"""
Shared FastAPI dependencies: data-access handle and the current user.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Path, status
from sqlmodel import Session

from domain.constants import MAX_ROW_ID
from domain.models.user import User
from app.services.user_app_service import UserAppService
from infra.auth.identity import IdentityError, decode_identity_token
from infra.database.connection import get_session
from infra.storage import DatabaseStorage
from utils.logger import get_logger

logger = get_logger(__name__)

UNAUTHORIZED = "Unauthorized"

# パスパラメータの id
RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


def get_storage(session: Session = Depends(get_session)) -> DatabaseStorage:
    return DatabaseStorage(session)


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED)


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise _unauthorized()

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise _unauthorized()

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise _unauthorized()
    return token


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


def get_current_user(
    token: str = Depends(get_bearer_token),
    storage: DatabaseStorage = Depends(get_storage),
) -> User:
    """
    Verify the provider token and keep the local profile in sync with its claims.
    """
    try:
        claims = decode_identity_token(token)
    except IdentityError as e:
        logger.warning(f"Rejected identity token: {e}")
        raise _unauthorized()

    return UserAppService(storage).sync_from_claims(claims)
