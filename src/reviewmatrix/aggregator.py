"""Aggregation of open pull-request review requests into an ``Organization``.

The flow is strictly one way: organization -> repository names -> open pull
requests per repository -> reviewer x repository result. Any fetch failure
aborts the run; no partial ``Organization`` is ever returned.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple

from .config import DEFAULT_API_URL, Config
from .github_client import GitHubClient
from .models import Organization, PullRequest, RawPullRequest, Repository, Reviewer

logger = logging.getLogger(__name__)


def rewrite_pull_request_url(url: str) -> str:
    """Turn an API pull request URL into its web URL.

    ``https://api.github.com/repos/o/r/pulls/1`` becomes
    ``https://github.com/o/r/pull/1``. This is plain substring replacement, so
    applying it to an already rewritten URL leaves it unchanged.
    """
    return url.replace("api.", "").replace("repos/", "").replace("pulls", "pull")


class OrganizationBuilder:
    """Accumulates per-repository pull requests into deduplicated rows and columns.

    Reviewers and repositories are keyed by exact name (case-sensitive) in
    insertion-ordered dicts, so the result keeps first-seen order.
    """

    def __init__(self) -> None:
        self._repositories: Dict[str, Repository] = {}
        self._reviewers: Dict[str, Reviewer] = {}

    def add_pull_requests(self, repo_name: str, pull_requests: Iterable[RawPullRequest]) -> None:
        """Fold one repository's open pull requests into the result.

        A repository is only registered once a pull request in it names at
        least one reviewer.
        """
        for raw in pull_requests:
            if not raw.reviewer_logins:
                continue

            web_url = rewrite_pull_request_url(raw.url)
            pr_id = str(raw.number)

            if repo_name not in self._repositories:
                self._repositories[repo_name] = Repository(name=repo_name)

            for login in raw.reviewer_logins:
                reviewer = self._reviewers.get(login)
                if reviewer is None:
                    reviewer = Reviewer(name=login)
                    self._reviewers[login] = reviewer
                reviewer.assigned_pull_requests.append(
                    PullRequest(id=pr_id, url=web_url, repo_name=repo_name)
                )

    def build(self) -> Organization:
        return Organization(
            reviewers=list(self._reviewers.values()),
            repositories=list(self._repositories.values()),
        )


def _fetch_all_pull_requests(
    client: GitHubClient,
    organization: str,
    repo_names: List[str],
    max_workers: int,
) -> List[Tuple[str, List[RawPullRequest]]]:
    """Fetch every repository's open pull requests, keeping repository order."""
    if max_workers <= 1 or len(repo_names) <= 1:
        return [(name, client.list_open_pull_requests(organization, name)) for name in repo_names]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = executor.map(lambda name: client.list_open_pull_requests(organization, name), repo_names)
        return list(zip(repo_names, results))


def aggregate(client: GitHubClient, organization: str, max_workers: int = 1) -> Organization:
    """Run one aggregation pass against an existing client.

    Raises:
        NetworkError: If any request fails.
        ParseError: If a pull request listing has an unexpected shape.
    """
    repo_names = client.list_repositories(organization)
    fetched = _fetch_all_pull_requests(client, organization, repo_names, max_workers)

    builder = OrganizationBuilder()
    for repo_name, pull_requests in fetched:
        builder.add_pull_requests(repo_name, pull_requests)
    result = builder.build()

    logger.info(
        "Aggregated review requests",
        extra={
            "organization": organization,
            "repositories_listed": len(repo_names),
            "repositories_with_reviews": len(result.repositories),
            "reviewers": len(result.reviewers),
        },
    )
    return result


def fetch_organization_data(
    organization: str,
    token: str,
    *,
    api_url: str = DEFAULT_API_URL,
    timeout_seconds: float = 30,
    max_workers: int = 1,
    client: Optional[GitHubClient] = None,
) -> Organization:
    """Build the reviewer x repository result for ``organization``.

    Holds no state between calls: a fresh client (and session) is created for
    each run unless one is supplied, and is closed afterwards.

    Raises:
        NetworkError: If the repository list or any pull request list cannot be
            fetched.
        ParseError: If any pull request list is malformed.
    """
    owns_client = client is None
    if client is None:
        client = GitHubClient(
            Config(
                organization=organization,
                token=token,
                api_url=api_url,
                timeout_seconds=timeout_seconds,
                max_workers=max_workers,
            )
        )

    try:
        return aggregate(client, organization, max_workers=max_workers)
    finally:
        if owns_client:
            client.close()
