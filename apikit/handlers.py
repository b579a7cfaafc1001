"""FastAPI exception handlers that render AppError failures as JSON."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response

from .app_errors import AppError, find_app_error, status_code_of
from .config import get_settings
from .responses import write_error_response

logger = logging.getLogger(__name__)


def _log_app_error(request: Request, exc: AppError, code: int) -> None:
    if not get_settings().LOG_ERROR_CAUSES:
        return
    level = logging.ERROR if code >= 500 else logging.WARNING
    logger.log(
        level,
        "%s %s -> %d: %s",
        request.method,
        request.url.path,
        code,
        exc.display_string(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register AppError and catch-all handlers on the application.

    Args:
        app: The FastAPI application instance.
    """

    async def handle_app_error(request: Request, exc: AppError) -> Response:
        _log_app_error(request, exc, exc.code)
        return write_error_response(exc)

    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        app_err = find_app_error(exc)
        if app_err is not None:
            _log_app_error(request, app_err, status_code_of(exc))
        else:
            logger.error(
                "Unexpected error on %s %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
                exc_info=exc,
            )
        return write_error_response(exc)

    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(Exception, handle_unexpected)
