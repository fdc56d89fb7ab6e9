from typing import Any, Dict, Optional


class ResourceClientError(Exception):
    """Base error for client failures."""


class ResourceValidationError(ResourceClientError, ValueError):
    """Raised before any request when a required addressing value is missing."""

    def __init__(self, field: str):
        super().__init__(f"{field} value is mandatory and cannot be empty")
        self.field = field


class TransportError(ResourceClientError):
    """Raised when dispatching a request fails."""


class ResourceHTTPError(TransportError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_json = response_json
        self.response_text = response_text


class ResourceParseError(TransportError):
    pass


__all__ = [
    "ResourceClientError",
    "ResourceValidationError",
    "TransportError",
    "ResourceHTTPError",
    "ResourceParseError",
]
