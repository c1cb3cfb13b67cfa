"""Reviewer x repository matrix of open GitHub pull request review requests."""

from .aggregator import fetch_organization_data, rewrite_pull_request_url
from .errors import NetworkError, ParseError, ReviewMatrixError
from .models import Organization, PullRequest, Repository, Reviewer

__all__ = [
    "NetworkError",
    "Organization",
    "ParseError",
    "PullRequest",
    "Repository",
    "ReviewMatrixError",
    "Reviewer",
    "fetch_organization_data",
    "rewrite_pull_request_url",
]
