"""Exceptions carrying a structured API error.

Every failure surfaced to a client carries an action tag (which operation
was attempted), an HTTP status, a machine-readable code and a message.
"""

from http import HTTPStatus


class ApiError(Exception):
    """Base class for errors rendered as an error envelope."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        action: str,
        code: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.action = action
        self.code = code
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(action={self.action!r}, status_code={self.status_code}, "
            f"code={self.code!r}, message={self.message!r})"
        )


class ConflictError(ApiError):
    """Raised when a name is already in use."""

    status_code = HTTPStatus.CONFLICT


class NotFoundError(ApiError):
    """Raised when an identifier does not resolve to a record."""

    status_code = HTTPStatus.NOT_FOUND


_ERRORS_BY_STATUS: dict[int, type[ApiError]] = {
    HTTPStatus.CONFLICT: ConflictError,
    HTTPStatus.NOT_FOUND: NotFoundError,
}


def error_class_for_status(status_code: int) -> type[ApiError]:
    """Return the most specific ApiError subclass for an HTTP status."""
    return _ERRORS_BY_STATUS.get(status_code, ApiError)
