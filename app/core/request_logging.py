# app/core/request_logging.py
"""
Request logging middleware and auth/security event helpers.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging_config import get_logger

logger = get_logger(__name__)

# Paths logged at DEBUG instead of INFO
QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every HTTP request with timing and status code.

    Each request gets an id, returned to the client as ``X-Request-ID``.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        status_code = 500
        error = None

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            error = str(e)
            raise
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000

            log_data = {
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration": duration_ms,
            }

            # Set by get_current_user on authenticated requests
            user = getattr(request.state, "user", None)
            if user is not None:
                log_data["user_id"] = user.id
                log_data["username"] = user.username

            extra = {"extra_fields": log_data}
            message = f"{request.method} {request.url.path} - {status_code} ({duration_ms:.2f}ms)"

            if error:
                logger.error(f"{message} - ERROR: {error}", extra=extra, exc_info=True)
            elif status_code >= 500:
                logger.error(message, extra=extra)
            elif status_code >= 400:
                logger.warning(message, extra=extra)
            elif request.url.path in QUIET_PATHS:
                logger.debug(message, extra=extra)
            else:
                logger.info(message, extra=extra)

        response.headers["X-Request-ID"] = request_id
        return response


def log_auth_event(
    event_type: str,
    username: str,
    user_id: int | None = None,
    success: bool = True,
    details: dict | None = None,
) -> None:
    """
    Log authentication-related events.

    Args:
        event_type: Type of event (login, logout, register)
        username: Username involved
        user_id: User ID if known
        success: Whether the event was successful
        details: Additional details to log
    """
    log_data = {
        "event_type": event_type,
        "username": username,
        "success": success,
    }

    if user_id:
        log_data["user_id"] = user_id

    if details:
        log_data.update(details)

    extra = {"extra_fields": log_data}

    if success:
        logger.info(f"Auth event: {event_type} - {username} - SUCCESS", extra=extra)
    else:
        logger.warning(f"Auth event: {event_type} - {username} - FAILED", extra=extra)


def log_security_event(event_type: str, details: dict, level: str = "warning") -> None:
    """
    Log security-related events, e.g. access to another user's record.

    Args:
        event_type: Type of security event
        details: Event details
        level: Log level (info, warning, error)
    """
    extra = {"extra_fields": {"event_type": event_type, **details}}

    message = f"Security event: {event_type}"

    if level == "error":
        logger.error(message, extra=extra)
    elif level == "warning":
        logger.warning(message, extra=extra)
    else:
        logger.info(message, extra=extra)
