"""Shared exceptions for the Graphify Backend API."""
from typing import Any, Dict, List, Optional


class GraphifyException(Exception):
    """Base exception for Graphify Backend API."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidPayloadError(GraphifyException):
    """Raised when a request payload fails validation. Never retried."""

    status_code = 400

    def __init__(
        self, message: str, errors: Optional[List[Dict[str, str]]] = None
    ):
        details = {"errors": errors} if errors else None
        super().__init__(message, "INVALID_PAYLOAD", details)

    @property
    def errors(self) -> List[Dict[str, str]]:
        return self.details.get("errors", [])


class StoreUnavailableError(GraphifyException):
    """Raised when a document store operation fails or times out."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "STORE_UNAVAILABLE", details)


class ClientConfigMissingError(GraphifyException):
    """Raised when a public client setting has not been configured."""

    status_code = 503

    def __init__(self, setting: str, message: str):
        super().__init__(message, "CLIENT_CONFIG_MISSING", {"setting": setting})


class UpstreamUnavailableError(GraphifyException):
    """Raised when the completion service is unconfigured or timed out."""

    status_code = 503

    def __init__(self, service: str, message: str):
        super().__init__(message, "UPSTREAM_UNAVAILABLE", {"service": service})


class UpstreamError(GraphifyException):
    """Raised when an upstream call fails; carries the upstream HTTP status."""

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = {"service": service, "upstream_status": status_code}
        if details:
            error_details.update(details)
        super().__init__(message, "UPSTREAM_ERROR", error_details, status_code)


class EmptyCompletionError(GraphifyException):
    """Raised when the completion response has no extractable content."""

    status_code = 500

    def __init__(self, service: str, model: str):
        message = f"No content returned from {service}"
        super().__init__(message, "EMPTY_COMPLETION", {"service": service, "model": model})
