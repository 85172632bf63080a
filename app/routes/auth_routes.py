# app/routes/auth_routes.py
"""
Authentication routes: register, login, logout, current user.
"""

from fastapi import APIRouter, Depends, Form, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from app.auth.auth import (
    authenticate_user,
    clear_auth_cookie,
    create_access_token,
    get_current_user,
    get_current_user_optional,
    get_password_hash,
    get_user_by_username,
    set_auth_cookie,
)
from app.core.logging_config import get_logger
from app.core.models import UserCreate, UserOut
from app.core.request_logging import log_auth_event
from app.core.sentry_config import add_breadcrumb, clear_user_context, set_user_context
from app.core.validators import validate_not_blank
from app.database.database import User, get_db

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _token_response(response: Response, user: User) -> dict:
    access_token = create_access_token(data={"sub": str(user.id)})
    set_auth_cookie(response, access_token)
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": UserOut.model_validate(user).model_dump(),
    }


@router.post("/register", status_code=status.HTTP_201_CREATED, name="register")
async def register(
    payload: UserCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create a user account and log it in."""
    username = validate_not_blank(payload.username, "username")
    validate_not_blank(payload.password, "password")

    if get_user_by_username(db, username):
        log_auth_event(
            event_type="register",
            username=username,
            success=False,
            details={"ip": _client_ip(request), "reason": "username taken"},
        )
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    user = User(
        username=username,
        password_hash=get_password_hash(payload.password),
        name=payload.name.strip() or username,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    log_auth_event(event_type="register", username=user.username, user_id=user.id, success=True)
    return _token_response(response, user)


@router.post("/login", name="login")
async def login(
    request: Request,
    response: Response,
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    """Process login form; sets the auth cookie and returns the token."""
    user = authenticate_user(db, username, password)
    if not user:
        log_auth_event(
            event_type="login",
            username=username,
            success=False,
            details={"ip": _client_ip(request)},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    log_auth_event(
        event_type="login",
        username=user.username,
        user_id=user.id,
        success=True,
        details={"ip": _client_ip(request)},
    )

    # Set Sentry user context for error tracking
    set_user_context(user_id=user.id, username=user.username)
    add_breadcrumb(message=f"User {user.username} logged in", category="auth", level="info")

    return _token_response(response, user)


@router.post("/logout", name="logout")
async def logout(response: Response, current_user: User | None = Depends(get_current_user_optional)):
    """Log out user."""
    if current_user:
        log_auth_event(
            event_type="logout",
            username=current_user.username,
            user_id=current_user.id,
            success=True,
        )
        clear_user_context()

    clear_auth_cookie(response)
    return {"status": "logged out"}


@router.get("/me", response_model=UserOut, name="me")
async def me(current_user: User = Depends(get_current_user)):
    """Current authenticated user."""
    return current_user
