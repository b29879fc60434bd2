import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from animelog.core.config import get_settings
from animelog.core.exceptions import NOT_AUTHENTICATED
from animelog.db import get_db
from animelog.models.user import User
from animelog.repositories.user_repository import AuthSessionRepository

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")

def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Optional[dict]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError as e:
        logger.info(f"Rejected access token: {str(e)}")
        return None

def resolve_user(token: Optional[str], db: Session) -> Optional[User]:
    """Return the user behind a token whose server-side session is still live"""
    if not token:
        return None
    payload = decode_access_token(token)
    if not payload or "sub" not in payload or "sid" not in payload:
        return None
    session = AuthSessionRepository(db).get_valid_session(payload["sid"], datetime.now(timezone.utc))
    if session is None:
        return None
    try:
        user_id = UUID(payload["sub"])
    except ValueError:
        return None
    if session.user_id != user_id:
        return None
    return session.user

def get_optional_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> Optional[User]:
    """Current user, or None for anonymous requests"""
    return resolve_user(token, db)

def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user

def get_current_token(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    return token
