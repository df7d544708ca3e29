"""
Authorization gate.

Each capability is a plain predicate over the verified credential, wrapped in
a FastAPI dependency that short-circuits the request before the handler runs:

- public routes declare no dependency
- ``ensure_logged_in``: 401 without a valid credential
- ``ensure_admin``: 401 without a credential, 403 for non-admins
- ``ensure_correct_user_or_admin``: 401 without a credential, 403 unless the
  credential matches the ``{username}`` path parameter or is an admin
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from jobly.core.errors import UnauthorizedError, ForbiddenError
from jobly.core.security import TokenPayload, decode_access_token
from jobly.db.session import SessionLocal

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================
# Predicates
# ============================================

def is_authenticated(credential: Optional[TokenPayload]) -> bool:
    return credential is not None


def is_admin(credential: Optional[TokenPayload]) -> bool:
    return credential is not None and credential.is_admin


def is_self_or_admin(credential: Optional[TokenPayload], username: str) -> bool:
    """True when the credential belongs to ``username`` or carries the admin role."""
    if credential is None:
        return False
    return credential.is_admin or credential.username == username


# ============================================
# Dependencies
# ============================================

def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[TokenPayload]:
    """
    Verify the bearer token if one was sent.

    Never fails: an absent or invalid token yields None so public routes can
    still read who is calling.
    """
    if not token:
        return None
    return decode_access_token(token)


def ensure_logged_in(
    credential: Optional[TokenPayload] = Depends(get_current_user),
) -> TokenPayload:
    if not is_authenticated(credential):
        raise UnauthorizedError()
    return credential


def ensure_admin(
    credential: Optional[TokenPayload] = Depends(get_current_user),
) -> TokenPayload:
    if not is_authenticated(credential):
        raise UnauthorizedError()
    if not is_admin(credential):
        logger.warning(f"Admin access denied: username={credential.username}")
        raise ForbiddenError()
    return credential


def ensure_correct_user_or_admin(
    username: str,
    credential: Optional[TokenPayload] = Depends(get_current_user),
) -> TokenPayload:
    """``username`` is resolved from the route's path parameter of the same name."""
    if not is_authenticated(credential):
        raise UnauthorizedError()
    if not is_self_or_admin(credential, username):
        logger.warning(
            f"Access to user denied: username={credential.username}, target={username}"
        )
        raise ForbiddenError()
    return credential
