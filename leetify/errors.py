"""Custom error classes for the Leetify API client."""

from typing import Optional, Dict, Any


class LeetifyError(Exception):
    """Base exception for Leetify client errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize LeetifyError.

        Args:
            message: Error message
            status_code: HTTP status code, when the error came from a response
            response_data: Decoded error body, when the API returned JSON
        """
        super().__init__(message)
        self.status_code: Optional[int] = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.message: str = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"Leetify API Error {self.status_code}: {self.message}"
        return f"Leetify API Error: {self.message}"


class InvalidIdentifierError(LeetifyError, ValueError):
    """Player id matches neither the Leetify UUID nor the Steam64 shape."""

    def __init__(self, value: str, expected: Optional[str] = None) -> None:
        if expected:
            message = f"Invalid {expected} id: {value!r}"
        else:
            message = f"Invalid player id: {value!r}"
        super().__init__(message)
        self.value = value


class MissingParameterError(LeetifyError, ValueError):
    """A required request parameter was empty."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing required parameter: {parameter}")
        self.parameter = parameter


class InvalidConfigError(LeetifyError, ValueError):
    """Client builder validation failed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid client configuration for {field}: {reason}")
        self.field = field


class InvalidApiKeyError(LeetifyError):
    """Authentication error (401/403) or no API key configured."""

    pass


class HttpError(LeetifyError):
    """Transport-level failure (connection, TLS, timeout)."""

    pass


class ApiError(LeetifyError):
    """Non-success response with the status and message reported by the API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message, status_code=status_code, response_data=response_data
        )


class DecodeError(LeetifyError):
    """Response body could not be parsed into the expected model."""

    pass
