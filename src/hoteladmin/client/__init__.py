from .pipeline import Pipeline
from .interceptors import (
    BearerAuth,
    FailureCategory,
    classify_failure,
    clear_session_on_unauthorized,
    default_pipeline,
    json_payload,
    log_failure,
    raise_for_status,
)
from .http_client import ApiClient, get_client, set_client

__all__ = [
    "Pipeline",
    "BearerAuth",
    "FailureCategory",
    "classify_failure",
    "clear_session_on_unauthorized",
    "default_pipeline",
    "json_payload",
    "log_failure",
    "raise_for_status",
    "ApiClient",
    "get_client",
    "set_client",
]
