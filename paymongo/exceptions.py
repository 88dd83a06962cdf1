"""
Exceptions for the PayMongo SDK.

Three kinds of failure reach the caller:

- ``PayMongoConfigError``: the client was built with missing or malformed keys.
- ``PayMongoNetworkError``: the request never completed (DNS, connect, timeout).
- ``PayMongoAPIError``: PayMongo answered with a non-2xx status.

Status-specific subclasses of ``PayMongoAPIError`` exist so callers can branch
with ``except`` clauses; they carry exactly the same fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class ErrorSource(BaseModel):
    """Where in the request an error points to."""

    model_config = ConfigDict(extra="allow", frozen=True)

    pointer: str | None = None
    attribute: str | None = None


class ErrorDetail(BaseModel):
    """A single entry of the ``errors`` array in a PayMongo error response."""

    model_config = ConfigDict(extra="allow", frozen=True)

    code: str | None = None
    detail: str | None = None
    source: ErrorSource | None = None


def _parse_error_detail(item: dict[str, Any]) -> ErrorDetail:
    """Parse one ``errors`` entry, keeping code and detail when the rest is malformed."""
    try:
        return ErrorDetail.model_validate(item)
    except ValidationError:
        code = item.get("code")
        detail = item.get("detail")
        return ErrorDetail(
            code=code if isinstance(code, str) else None,
            detail=detail if isinstance(detail, str) else None,
        )


class PayMongoError(Exception):
    """Base exception for all PayMongo SDK errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize PayMongoError.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class PayMongoConfigError(PayMongoError):
    """Raised when the client is misconfigured (missing or invalid API keys)."""

    pass


class PayMongoNetworkError(PayMongoError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Initialize PayMongoNetworkError.

        Args:
            message: Error message
            original_error: The transport exception that caused the failure
        """
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.original_error is not None:
            data["original_error"] = repr(self.original_error)
        return data


class PayMongoAPIError(PayMongoError):
    """Raised when the PayMongo API responds with a non-success status."""

    def __init__(
        self,
        message: str,
        status: int,
        code: str,
        errors: list[ErrorDetail] | None = None,
        raw_response: Any = None,
    ) -> None:
        """
        Initialize PayMongoAPIError.

        Args:
            message: Human readable message (the first error's detail)
            status: HTTP status code
            code: Machine readable code, e.g. ``parameter_invalid``
            errors: Every error detail returned by the API
            raw_response: The parsed response body, untouched
        """
        self.status = status
        self.code = code
        self.errors = errors or []
        self.raw_response = raw_response
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """Alias of ``status``."""
        return self.status

    @classmethod
    def from_response(cls, status: int, body: Any) -> "PayMongoAPIError":
        """
        Build the matching error from a PayMongo error response.

        The first entry of ``errors`` supplies the message and code. When the
        body carries no usable entry, a generic message and ``unknown_error``
        are used instead.

        Args:
            status: HTTP status code of the response
            body: Parsed response body (may be ``None``)

        Returns:
            A ``PayMongoAPIError`` (or status-specific subclass)
        """
        raw_errors = body.get("errors") if isinstance(body, dict) else None
        if not isinstance(raw_errors, list):
            raw_errors = []
        errors = [_parse_error_detail(item) for item in raw_errors if isinstance(item, dict)]
        first = errors[0] if errors else None

        message = (first.detail if first else None) or f"PayMongo API error (status {status})"
        code = (first.code if first else None) or "unknown_error"

        error_cls = _STATUS_ERRORS.get(status, cls)
        if not issubclass(error_cls, cls):
            error_cls = cls
        return error_cls(message, status, code, errors, body)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "status": self.status,
                "code": self.code,
                "errors": [error.model_dump(exclude_none=True) for error in self.errors],
            }
        )
        return data

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.message!r}, status={self.status}, "
            f"code={self.code!r})"
        )


class InvalidRequestError(PayMongoAPIError):
    """Raised for 400/422 responses: the request parameters were rejected."""

    pass


class AuthenticationError(PayMongoAPIError):
    """Raised for 401 responses: the API key was not accepted."""

    pass


class PermissionDeniedError(PayMongoAPIError):
    """Raised for 403 responses: the key may not perform this operation."""

    pass


class ResourceNotFoundError(PayMongoAPIError):
    """Raised for 404 responses."""

    pass


class RateLimitError(PayMongoAPIError):
    """Raised for 429 responses."""

    pass


_STATUS_ERRORS: dict[int, type[PayMongoAPIError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: ResourceNotFoundError,
    422: InvalidRequestError,
    429: RateLimitError,
}
