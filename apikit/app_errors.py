"""Application error primitives with HTTP status mapping."""
from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional

_READ_ONLY_FIELDS = frozenset({"code", "message", "cause"})


@dataclass(eq=False)
class AppError(Exception):
    """Failure with an HTTP status, a client-safe message and an optional root cause.

    `cause` is for diagnostics only and is never part of a response body.
    """

    code: int
    message: str
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.cause))

    def __setattr__(self, name: str, value: object) -> None:
        if name in _READ_ONLY_FIELDS and name in self.__dict__:
            raise AttributeError(f"AppError.{name} is read-only")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return self.display_string()

    def display_string(self) -> str:
        """Message plus root cause, for logs only."""
        if self.cause is None:
            return self.message
        return f"{self.message} | root error: {self.cause}"

    @property
    def http_status(self) -> HTTPStatus | None:
        try:
            return HTTPStatus(self.code)
        except ValueError:
            return None


def bad_request(message: str) -> AppError:
    return AppError(code=HTTPStatus.BAD_REQUEST.value, message=message)


def not_found(message: str) -> AppError:
    return AppError(code=HTTPStatus.NOT_FOUND.value, message=message)


def validation_failed(message: str) -> AppError:
    return AppError(code=HTTPStatus.UNPROCESSABLE_ENTITY.value, message=message)


def internal(message: str) -> AppError:
    return AppError(code=HTTPStatus.INTERNAL_SERVER_ERROR.value, message=message)


def unauthorized(message: str) -> AppError:
    return AppError(code=HTTPStatus.UNAUTHORIZED.value, message=message)


def forbidden(message: str) -> AppError:
    return AppError(code=HTTPStatus.FORBIDDEN.value, message=message)


def wrap(code: int, message: str, cause: Optional[BaseException]) -> AppError:
    """Attach an HTTP status and client message to an existing error."""
    return AppError(code=code, message=message, cause=cause)


def find_app_error(err: Optional[BaseException]) -> AppError | None:
    """Return the nearest AppError, depth-first through `raise ... from` chaining
    and exception group members.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if current is None or id(current) in seen:
            continue
        if isinstance(current, AppError):
            return current
        seen.add(id(current))
        stack.append(current.__cause__)
        if isinstance(current, BaseExceptionGroup):
            stack.extend(reversed(current.exceptions))
    return None


def status_code_of(err: Optional[BaseException]) -> int:
    """HTTP status for `err`: 200 when absent, the AppError code when found, else 500."""
    if err is None:
        return HTTPStatus.OK.value
    app_err = find_app_error(err)
    if app_err is not None:
        return app_err.code
    return HTTPStatus.INTERNAL_SERVER_ERROR.value
