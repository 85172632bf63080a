# app/auth/auth.py
"""
Authentication utilities: password hashing, JWT tokens, current-user dependencies.
"""

import os
import warnings
from datetime import datetime, timedelta

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.sentry_config import set_user_context
from app.database.database import User, get_db

# Configuration - reads from environment variables for security
DEFAULT_SECRET_KEY = "your-secret-key-change-this-in-production"
SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7  # 7 dagar
AUTH_COOKIE_NAME = "access_token"

# Validate SECRET_KEY in production
is_production = os.getenv("PRODUCTION", "false").lower() == "true"
if SECRET_KEY == DEFAULT_SECRET_KEY:
    if is_production:
        raise RuntimeError("SECRET_KEY must be set in production!")
    warnings.warn(
        "WARNING: Using default SECRET_KEY! Set SECRET_KEY environment variable for production.",
        RuntimeWarning,
        stacklevel=2,
    )

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Token scheme; missing header falls back to the cookie
security = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get user by username."""
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get user by ID."""
    return db.get(User, user_id)


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """Authenticate a user with username and password."""
    user = get_user_by_username(db, username)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def _extract_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    if credentials is not None:
        return credentials.credentials

    token = request.cookies.get(AUTH_COOKIE_NAME)
    if not token:
        return None

    # Remove "Bearer " prefix if present
    if token.startswith("Bearer "):
        token = token[7:]
    return token


async def get_current_user_optional(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User | None:
    """Get current user if authenticated (header or cookie), None otherwise."""
    token = _extract_token(request, credentials)
    if not token:
        return None

    payload = decode_token(token)
    if payload is None:
        return None

    subject = payload.get("sub")
    if subject is None:
        return None

    try:
        user = get_user_by_id(db, int(subject))
    except ValueError:
        return None

    if user is not None:
        # Picked up by RequestLoggingMiddleware
        request.state.user = user
        set_user_context(user_id=user.id, username=user.username)
    return user


async def get_current_user(current_user: User | None = Depends(get_current_user_optional)) -> User:
    """Get current authenticated user. Raises 401 if not authenticated."""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def set_auth_cookie(response: Response, token: str) -> None:
    """Set authentication cookie."""
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=f"Bearer {token}",
        httponly=True,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="lax",
        secure=is_production,  # True in production with HTTPS
    )


def clear_auth_cookie(response: Response) -> None:
    """Clear authentication cookie."""
    response.delete_cookie(key=AUTH_COOKIE_NAME)
