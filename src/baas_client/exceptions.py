"""Custom exception hierarchy for the BaaS client."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .http import NormalizedResponse


class BaaSError(RuntimeError):
    """Base error for BaaS client failures."""

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


class ConfigurationError(BaaSError):
    """Raised when the client is constructed with unusable settings."""


class ValidationError(BaaSError):
    """Raised before any network activity when request parameters are invalid."""


class MissingParameterError(ValidationError):
    """Raised when an operation is called without one of its required parameters."""

    def __init__(self, parameter: str, *, operation: str | None = None) -> None:
        super().__init__(f"Missing required parameter: {parameter}", details=operation)
        self.parameter = parameter
        self.operation = operation


class TransportError(BaaSError):
    """Raised when no HTTP response could be obtained (DNS, refused, TLS)."""


class HTTPResponseError(BaaSError):
    """Raised when the API answers with a non-success status.

    The attached ``response`` has the same shape a successful call returns,
    so callers can branch on the status code and inspect the parsed body.
    """

    def __init__(self, response: NormalizedResponse) -> None:
        super().__init__(
            f"BaaS API error {response.status_code}: {response.status_message}",
            status_code=response.status_code,
            details=response.body,
        )
        self.response = response


class CodegenError(BaaSError):
    """Raised when the offline generator cannot load or render a service description."""
