# app/core/sentry_config.py
"""
Sentry configuration for error tracking in production.

Outside production, or without SENTRY_DSN, Sentry is never initialized and
the helpers below are no-ops.
"""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = ("cookie", "authorization", "x-api-key")


def init_sentry() -> bool:
    """
    Initialize Sentry error tracking.

    Returns:
        True if Sentry was initialized, False otherwise.
    """
    is_production = os.getenv("PRODUCTION", "false").lower() == "true"
    sentry_dsn = os.getenv("SENTRY_DSN", "").strip()

    if not is_production:
        logger.info("Sentry disabled in development mode")
        return False

    if not sentry_dsn:
        logger.warning(
            "SENTRY_DSN not set. Error tracking disabled. "
            "Set SENTRY_DSN environment variable to enable Sentry in production."
        )
        return False

    environment = os.getenv("SENTRY_ENVIRONMENT", "production")

    try:
        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
                # Breadcrumbs from INFO, events from ERROR
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
            ],
            traces_sample_rate=0.1,
            sample_rate=1.0,
            release=os.getenv("RELEASE_VERSION", "work-tracker@0.1.0"),
            environment=environment,
            send_default_pii=False,
            attach_stacktrace=True,
            before_send=before_send_hook,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}", exc_info=True)
        return False

    logger.info(f"Sentry initialized successfully (environment: {environment})")
    return True


def before_send_hook(event, hint):
    """
    Filter sensitive data before sending to Sentry.

    Returns:
        Modified event
    """
    request = event.get("request")
    if not request:
        return event

    headers = request.get("headers")
    if headers:
        for header in SENSITIVE_HEADERS:
            if header in headers:
                headers[header] = "[Filtered]"

    query = request.get("query_string")
    if query and ("password" in query.lower() or "token" in query.lower()):
        request["query_string"] = "[Filtered]"

    return event


def set_user_context(user_id: int, username: str | None = None):
    """Attach the authenticated user to subsequent Sentry events."""
    sentry_sdk.set_user({"id": user_id, "username": username})


def clear_user_context():
    """Clear user context (e.g., after logout)."""
    sentry_sdk.set_user(None)


def add_breadcrumb(message: str, category: str = "default", level: str = "info", data: dict | None = None):
    """
    Add a breadcrumb for debugging.

    Breadcrumbs are trails of events that happened before an error.
    """
    sentry_sdk.add_breadcrumb(message=message, category=category, level=level, data=data or {})
