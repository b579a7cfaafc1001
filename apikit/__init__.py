"""HTTP application errors and JSON response helpers."""
from .app_errors import (
    AppError,
    bad_request,
    find_app_error,
    forbidden,
    internal,
    not_found,
    status_code_of,
    unauthorized,
    validation_failed,
    wrap,
)
from .handlers import register_error_handlers
from .log import configure_logging
from .responses import (
    INTERNAL_ERROR_BODY,
    ErrorBody,
    write_error_response,
    write_json_response,
)

__all__ = [
    "AppError",
    "ErrorBody",
    "INTERNAL_ERROR_BODY",
    "bad_request",
    "configure_logging",
    "find_app_error",
    "forbidden",
    "internal",
    "not_found",
    "register_error_handlers",
    "status_code_of",
    "unauthorized",
    "validation_failed",
    "wrap",
    "write_error_response",
    "write_json_response",
]
