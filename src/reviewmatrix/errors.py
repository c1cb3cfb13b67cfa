"""Custom exception types for the review matrix."""

from __future__ import annotations

from typing import Optional


class ReviewMatrixError(Exception):
    """Base exception for all recoverable review matrix errors."""


class ConfigurationError(ReviewMatrixError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(ReviewMatrixError):
    """Raised when no GitHub access token is available locally.

    Invalid tokens are reported by the remote API as an HTTP error status and
    surface as :class:`NetworkError` instead.
    """


class FetchError(ReviewMatrixError):
    """Base class for failures tied to a specific request URL and stage."""

    def __init__(self, message: str, url: Optional[str] = None, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url
        self.stage = stage


class NetworkError(FetchError):
    """Raised when a GitHub API call cannot complete or returns a non-2xx status."""


class ParseError(FetchError):
    """Raised when a GitHub API response body does not have the expected shape."""
