import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from jose import jwt as jose_jwt

from .config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM, SECRET_KEY
from .exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must reach the service as "no identity"
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Resolved caller identity, threaded explicitly into every operation"""

    id: str
    email: Optional[str] = None


def require_user(user: Optional[CurrentUser]) -> CurrentUser:
    """Return the caller identity or fail closed with ``UnauthorizedError``"""
    if user is None or not user.id:
        raise UnauthorizedError()
    return user


def create_access_token(
    user_id: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed bearer token for ``user_id``

    Args:
        user_id: Value stored in the ``sub`` claim
        email: Optional email claim
        expires_delta: Token lifetime (default ACCESS_TOKEN_EXPIRE_MINUTES)
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": user_id, "exp": expire}
    if email:
        to_encode["email"] = email
    return jose_jwt.encode(to_encode, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[CurrentUser]:
    """
    Verify and decode a bearer token

    Returns:
        CurrentUser if the token is valid and names a subject, None otherwise
    """
    try:
        payload = jose_jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"⚠️ JWT verification failed: {e}")
        return None

    user_id = payload.get("sub")
    if not user_id:
        logger.warning(f"⚠️ Token missing subject claim. Available claims: {list(payload.keys())}")
        return None

    return CurrentUser(id=str(user_id), email=payload.get("email"))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[CurrentUser]:
    """Resolve the caller from the Authorization header, or None when absent/invalid"""
    if not credentials:
        logger.debug("No credentials provided")
        return None

    user = decode_access_token(credentials.credentials)
    if user:
        logger.debug(f"✅ User authenticated: {user.id}")
    return user
