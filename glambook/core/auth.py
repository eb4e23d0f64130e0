"""
Session token and password hashing utilities
"""

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from typing import Dict, Optional
import uuid

from glambook.core.config import get_settings

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """Check a password; runs a dummy verification when there is no hash"""
    if password_hash is None:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(password, password_hash)


def new_session_id() -> str:
    return uuid.uuid4().hex


def create_session_token(
    session_id: str,
    tenant_id: str,
    issued_at: Optional[datetime] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create the signed bearer token handed to the client for a session"""
    issued_at = issued_at or datetime.now(timezone.utc)
    if expires_delta is None and settings.SESSION_EXPIRE_MINUTES:
        expires_delta = timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)

    to_encode = {
        "sub": tenant_id,
        "jti": session_id,
        "iat": issued_at,
    }
    if expires_delta is not None:
        to_encode["exp"] = issued_at + expires_delta

    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_session_token(token: str) -> Optional[Dict]:
    """Decode and validate a session token, None when it is not ours or expired"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None

    if not payload.get("jti") or not payload.get("sub"):
        return None
    return payload
