"""
Custom exceptions for videotoken.

All videotoken exceptions inherit from VideoTokenError for easy catching.
Errors raised while parsing user input also inherit from ValueError.
"""

from __future__ import annotations

from typing import Any


class VideoTokenError(Exception):
    """Base exception for all videotoken errors.

    Attributes:
        message: Human-readable error message
        category: Error classification (e.g., "invalid_format", "too_long")
        value: The input (or token) the error refers to
        details: Additional diagnostic information
    """

    category = "unknown"

    def __init__(
        self,
        message: str,
        *,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.value = value
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for API error responses."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
            "category": self.category,
        }
        if self.value is not None:
            result["value"] = self.value
        if self.details:
            result["details"] = self.details
        return result


class InvalidFormatError(VideoTokenError, ValueError):
    """Input looks like a URL we cannot read, or a known host carries no token.

    Raised both for URL-shaped input from an unrecognized host and for a
    recognized YouTube URL from which no video token can be extracted
    (channel pages included).
    """

    category = "invalid_format"

    def __init__(
        self,
        message: str,
        *,
        value: str | None = None,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, value=value, details=details)
        self.provider = provider


class TokenTooLongError(VideoTokenError, ValueError):
    """Resolved token exceeds the maximum token length."""

    category = "too_long"

    def __init__(
        self,
        message: str,
        *,
        value: str | None = None,
        max_length: int | None = None,
    ):
        details: dict[str, Any] = {}
        if max_length is not None:
            details["max_length"] = max_length
        if value is not None:
            details["length"] = len(value)
        super().__init__(message, value=value, details=details)
        self.max_length = max_length


class ProviderRequiredError(VideoTokenError, ValueError):
    """No provider could be determined from hint, URL or token shape."""

    category = "provider_required"


class UnsupportedProviderError(VideoTokenError):
    """Provider is outside the supported set (youtube, vimeo)."""

    category = "unsupported_provider"

    def __init__(self, provider: str, message: str | None = None):
        self.provider = provider
        msg = message or f'Provider "{provider}" is not supported.'
        super().__init__(msg, details={"provider": provider})
