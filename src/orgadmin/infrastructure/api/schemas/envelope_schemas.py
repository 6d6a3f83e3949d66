"""Response envelope schemas.

Every successful response is wrapped as ``{status, data, message}`` and
every failure as ``{status, action, code, message}``.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope.

    Attributes:
        status: HTTP status code of the response.
        data: Response payload.
        message: Human-readable outcome.
    """

    status: int = Field(..., description="HTTP status code")
    data: T = Field(..., description="Response payload")
    message: str = Field(..., description="Human-readable outcome")


class ValidationErrorDetail(BaseModel):
    """Detail for a single validation error."""

    field: str = Field(..., description="Dotted location of the invalid value")
    message: str = Field(..., description="Human-readable error message")
    type: str | None = Field(None, description="Machine-readable error type")


class ApiErrorResponse(BaseModel):
    """Error envelope.

    Attributes:
        status: HTTP status code of the response.
        action: Operation that was attempted.
        code: Machine-readable error code clients can branch on.
        message: Human-readable error message.
        details: Per-field problems, only for request validation failures.
    """

    status: int = Field(..., description="HTTP status code")
    action: str = Field(..., description="Operation that was attempted")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ValidationErrorDetail] | None = Field(
        None, description="Validation problems, if any"
    )
