"""JSON response helpers for successful payloads and AppError failures."""
from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from .app_errors import find_app_error, status_code_of

logger = logging.getLogger(__name__)


class ErrorBody(BaseModel):
    """Wire shape of every error response. Never carries the root cause."""

    code: int
    message: str


INTERNAL_ERROR_BODY = ErrorBody(
    code=HTTPStatus.INTERNAL_SERVER_ERROR.value,
    message="Internal Server Error",
)


def write_json_response(status_code: int, payload: Any) -> Response:
    """Render `payload` as an application/json response with `status_code`.

    The body is rendered before the response is sent, so an encoding failure
    becomes a single plain-text 500 instead of a second status line.
    """
    try:
        return JSONResponse(
            status_code=status_code,
            content=jsonable_encoder(payload),
            media_type="application/json",
        )
    except (TypeError, ValueError, RecursionError):
        logger.exception("Failed to encode JSON response (status=%s)", status_code)
        return PlainTextResponse(
            "Error encoding JSON response",
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR.value,
            headers={"X-Content-Type-Options": "nosniff"},
        )


def write_error_response(err: Optional[BaseException]) -> Response:
    """Render `err` as `{"code", "message"}`; unknown errors become a generic 500."""
    if err is None:
        return Response(status_code=HTTPStatus.OK.value)

    code = status_code_of(err)
    app_err = find_app_error(err)
    if app_err is not None:
        return write_json_response(code, ErrorBody(code=code, message=app_err.message))

    return write_json_response(INTERNAL_ERROR_BODY.code, INTERNAL_ERROR_BODY)
