"""Custom exception hierarchy for the CloudSigma client."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .models import ErrorEntry


class CloudSigmaError(RuntimeError):
    """Base error for CloudSigma failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ConfigurationError(CloudSigmaError):
    """Raised when the client is configured with a malformed API endpoint."""


class ValidationError(CloudSigmaError):
    """Raised before any I/O when a call is given unusable arguments."""


class EmptyArgumentError(ValidationError):
    """Raised when a required identifier is empty."""

    def __init__(self, message: str = "argument cannot be empty") -> None:
        super().__init__(message)


class EmptyPayloadError(ValidationError):
    """Raised when a required payload is missing."""

    def __init__(self, message: str = "empty payload not allowed") -> None:
        super().__init__(message)


class CredentialsError(CloudSigmaError):
    """Raised when a credentials provider holds incomplete credentials."""


class EncodeError(CloudSigmaError):
    """Raised when a request body cannot be serialized to JSON."""


class RequestError(CloudSigmaError):
    """Raised when an HTTP request cannot be fulfilled."""


class ContextError(CloudSigmaError):
    """Raised when the context bound to a request is done."""


class Cancelled(ContextError):
    """The context was cancelled by the caller."""

    def __init__(self, message: str = "context canceled") -> None:
        super().__init__(message)


class DeadlineExceeded(ContextError):
    """The context deadline passed."""

    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


class ResponseError(CloudSigmaError):
    """Raised when the API answers with a status code outside the 2xx range.

    ``errors`` holds the decoded error entries and may be empty when the
    server sent no body.
    """

    def __init__(
        self,
        *,
        method: str,
        url: str,
        status_code: int,
        errors: list[ErrorEntry] | None = None,
        request_id: str | None = None,
        response: Any | None = None,
    ) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.errors: list[ErrorEntry] = list(errors or [])
        self.request_id = request_id
        self.response = response
        super().__init__(self._format(), status_code=status_code, details=self.errors)

    def _format(self) -> str:
        if self.request_id:
            return (
                f"{self.method} {self.url}: {self.status_code} "
                f'(request "{self.request_id}") {self.errors!r}'
            )
        return f"{self.method} {self.url}: {self.status_code} {self.errors!r}"

    def __str__(self) -> str:
        return self._format()


class UnexpectedResponseError(CloudSigmaError):
    """Raised when the API returns an unexpected payload structure."""
