"""Configuration parsing and validation for the review matrix."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import AuthenticationError, ConfigurationError

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Config:
    """Validated runtime settings for one aggregation run."""

    organization: str
    token: str
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = 30
    max_workers: int = 1


def load_config(
    organization: str,
    api_url: str | None = None,
    timeout_seconds: float = 30,
    max_workers: int = 1,
) -> Config:
    """Build and validate application configuration.

    Args:
        organization: GitHub organization login.
        api_url: GitHub REST API root. Falls back to ``GITHUB_API_URL`` and then
            to the public API.
        timeout_seconds: Per-request timeout in seconds.
        max_workers: Number of repositories whose pull requests are fetched
            concurrently.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If the organization is blank or a numeric setting
            is not greater than ``0``.
        AuthenticationError: If ``GITHUB_TOKEN`` is not configured.
    """
    if not organization.strip():
        raise ConfigurationError("Invalid value for 'organization': expected a non-empty name.")

    if timeout_seconds <= 0:
        raise ConfigurationError("Invalid value for 'timeout': expected a number greater than 0.")

    if max_workers <= 0:
        raise ConfigurationError("Invalid value for 'workers': expected an integer greater than 0.")

    token: str = os.getenv("GITHUB_TOKEN", "").strip()
    if not token:
        raise AuthenticationError(
            "Missing required GitHub access token. "
            "Set the 'GITHUB_TOKEN' environment variable before running the review matrix."
        )

    resolved_api_url = api_url or os.getenv("GITHUB_API_URL", "").strip() or DEFAULT_API_URL

    return Config(
        organization=organization,
        token=token,
        api_url=resolved_api_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
        max_workers=max_workers,
    )
