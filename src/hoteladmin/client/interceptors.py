"""
Standard pipeline steps: bearer authorization, payload unwrapping and
failure diagnostics.
"""
from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Optional

import httpx

from hoteladmin.client.pipeline import Pipeline
from hoteladmin.session import SessionStore, TokenProvider

logger = logging.getLogger(__name__)


class FailureCategory(str, enum.Enum):
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not found"
    SERVER_ERROR = "server error"
    UNEXPECTED_STATUS = "unexpected error"
    NETWORK_FAILURE = "unknown error"


STATUS_CATEGORIES: Dict[int, FailureCategory] = {
    401: FailureCategory.UNAUTHORIZED,
    403: FailureCategory.FORBIDDEN,
    404: FailureCategory.NOT_FOUND,
    500: FailureCategory.SERVER_ERROR,
}

DIAGNOSTIC_MESSAGES: Dict[FailureCategory, str] = {
    FailureCategory.UNAUTHORIZED: "Unauthorized access - credentials missing or expired.",
    FailureCategory.FORBIDDEN: "Forbidden - No permission to access this resource.",
    FailureCategory.NOT_FOUND: "Resource not found.",
    FailureCategory.SERVER_ERROR: "Internal server error.",
    FailureCategory.UNEXPECTED_STATUS: "An unexpected error occurred.",
    FailureCategory.NETWORK_FAILURE: "An unknown error occurred.",
}


def status_code_of(exc: Exception) -> Optional[int]:
    """Status code of the server response behind ``exc``, or None if nothing came back."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def classify_failure(exc: Exception) -> FailureCategory:
    status = status_code_of(exc)
    if status is None:
        return FailureCategory.NETWORK_FAILURE
    return STATUS_CATEGORIES.get(status, FailureCategory.UNEXPECTED_STATUS)


# ------------------------------------
# Request steps
# ------------------------------------
class BearerAuth:
    """Sets ``Authorization: Bearer <token>`` when the provider has a token."""

    def __init__(self, token_provider: TokenProvider):
        self.token_provider = token_provider

    def __call__(self, request: httpx.Request) -> httpx.Request:
        token = self.token_provider.current_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return request


# ------------------------------------
# Response steps
# ------------------------------------
def raise_for_status(response: httpx.Response) -> httpx.Response:
    response.raise_for_status()
    return response


def json_payload(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        # Non-JSON success bodies (HTML maintenance pages) come back as text
        logger.warning(f"Non-JSON response body ({response.headers.get('content-type', 'unknown')}), returning text")
        return response.text


# ------------------------------------
# Failure steps
# ------------------------------------
def log_failure(exc: Exception) -> None:
    category = classify_failure(exc)
    status = status_code_of(exc)
    message = DIAGNOSTIC_MESSAGES[category]
    if status is not None:
        logger.error(
            f"{message} ({status} {exc.request.method} {exc.request.url})",
            extra={"failure_category": category.value, "status_code": status},
        )
    else:
        logger.error(message, extra={"failure_category": category.value, "status_code": None})
    logger.debug(f"API Error: {exc!r}")


def clear_session_on_unauthorized(session: SessionStore):
    """Failure step that drops the stored token and user after a 401.

    Not part of the default pipeline; add it explicitly to log users out on
    rejected credentials.
    """

    def _step(exc: Exception) -> None:
        if classify_failure(exc) is FailureCategory.UNAUTHORIZED:
            logger.info("Clearing session after unauthorized response")
            session.clear()

    return _step


def default_pipeline(token_provider: TokenProvider) -> Pipeline:
    return Pipeline(
        request_steps=[BearerAuth(token_provider)],
        response_steps=[raise_for_status, json_payload],
        failure_steps=[log_failure],
    )
