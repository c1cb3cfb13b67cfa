"""Domain models for the reviewer x repository matrix.

An ``Organization`` is rebuilt from scratch on every aggregation run; nothing
here is persisted between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True, frozen=True)
class Repository:
    """A repository that holds at least one reviewer assignment."""

    name: str


@dataclass(slots=True, frozen=True)
class PullRequest:
    """One open pull request as assigned to a single reviewer."""

    id: str
    url: str
    repo_name: str


@dataclass(slots=True, frozen=True)
class RawPullRequest:
    """The subset of a GitHub pull request payload used for aggregation."""

    number: int
    url: str
    reviewer_logins: List[str]


@dataclass(slots=True)
class Reviewer:
    """A user requested to review at least one open pull request."""

    name: str
    assigned_pull_requests: List[PullRequest] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Login with quote characters stripped, for rendering only."""
        return self.name.replace('"', "")

    @property
    def avatar_url(self) -> str:
        return f"https://github.com/{self.display_name}.png"

    def pull_requests_for(self, repo_name: str) -> List[PullRequest]:
        """Return this reviewer's assignments in one repository, in discovery order."""
        return [pr for pr in self.assigned_pull_requests if pr.repo_name == repo_name]


@dataclass(slots=True)
class Organization:
    """Aggregated review load for one organization."""

    reviewers: List[Reviewer] = field(default_factory=list)
    repositories: List[Repository] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repositories": [repository.name for repository in self.repositories],
            "reviewers": [
                {
                    "name": reviewer.name,
                    "avatar_url": reviewer.avatar_url,
                    "assigned_pull_requests": [
                        {"id": pr.id, "url": pr.url, "repo_name": pr.repo_name}
                        for pr in reviewer.assigned_pull_requests
                    ],
                }
                for reviewer in self.reviewers
            ],
        }
