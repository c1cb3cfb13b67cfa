"""GitHub REST API client for listing repositories and open pull requests."""

from __future__ import annotations

import logging
from typing import Any, List
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter

from .config import Config
from .errors import NetworkError, ParseError
from .models import RawPullRequest

logger = logging.getLogger(__name__)

REPOSITORIES_STAGE = "repositories"
PULL_REQUESTS_STAGE = "pull requests"


class GitHubClient:
    """Thin client over the two GitHub endpoints the aggregation needs.

    One session is shared by every request of a run so connections are reused.
    Only the first page of each listing is read.
    """

    _USER_AGENT = "ibr"
    _DEFAULT_POOL_SIZE = 10

    def __init__(self, config: Config) -> None:
        """Initialize an authenticated GitHub API client.

        Args:
            config: Validated runtime configuration including the token.
        """
        self._config = config
        self._timeout_seconds = config.timeout_seconds
        self._base_url = config.api_url.rstrip("/")

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {config.token}",
                "User-Agent": self._USER_AGENT,
                "Accept": "application/vnd.github+json",
            }
        )
        # Every worker thread needs its own pooled connection
        if config.max_workers > self._DEFAULT_POOL_SIZE:
            adapter = HTTPAdapter(pool_maxsize=config.max_workers)
            self._session.mount("https://", adapter)
            self._session.mount("http://", adapter)

    def _build_url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _get(self, url: str, stage: str) -> requests.Response:
        """Execute a GET request and reject transport failures and non-2xx statuses.

        Raises:
            NetworkError: If the request cannot complete or returns HTTP >= 300.
        """
        logger.debug("GitHub request", extra={"url": url, "stage": stage})
        try:
            response = self._session.get(url, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to fetch {stage} from {url}: {exc}", url=url, stage=stage) from exc

        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"Failed to fetch {stage} from {url}: "
                f"HTTP {response.status_code} - {response.text}",
                url=url,
                stage=stage,
            )

        return response

    def list_repositories(self, organization: str) -> List[str]:
        """List repository names of an organization, in API order.

        A response body that is not a list of repository objects is treated as
        an empty organization rather than an error.
        """
        owner = quote(organization, safe="")
        url = self._build_url(f"orgs/{owner}/repos")
        response = self._get(url, REPOSITORIES_STAGE)

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Repository list is not valid JSON; treating as empty", extra={"url": url})
            return []

        if not isinstance(payload, list) or not all(
            isinstance(item, dict) and isinstance(item.get("name"), str) for item in payload
        ):
            logger.warning("Repository list has unexpected shape; treating as empty", extra={"url": url})
            return []

        names = [item["name"] for item in payload]
        logger.info("Listed repositories", extra={"organization": organization, "count": len(names)})
        return names

    def list_open_pull_requests(self, organization: str, repo_name: str) -> List[RawPullRequest]:
        """List open pull requests of a repository with their requested reviewers.

        Raises:
            NetworkError: If the request fails.
            ParseError: If the body is not a list of pull request objects, or a
                pull request lacks ``number``, ``url`` or a well-formed
                ``requested_reviewers`` list.
        """
        owner, repo = quote(organization, safe=""), quote(repo_name, safe="")
        url = self._build_url(f"repos/{owner}/{repo}/pulls?state=open")
        response = self._get(url, PULL_REQUESTS_STAGE)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(
                f"Failed to parse pull requests for repository '{repo_name}': invalid JSON from {url}",
                url=url,
                stage=PULL_REQUESTS_STAGE,
            ) from exc

        if not isinstance(payload, list):
            raise ParseError(
                f"Failed to parse pull requests for repository '{repo_name}': expected a list from {url}",
                url=url,
                stage=PULL_REQUESTS_STAGE,
            )

        pull_requests = [self._parse_pull_request(item, repo_name, url) for item in payload]
        logger.debug(
            "Listed open pull requests",
            extra={"repo_name": repo_name, "count": len(pull_requests)},
        )
        return pull_requests

    def _parse_pull_request(self, item: Any, repo_name: str, url: str) -> RawPullRequest:
        def fail(reason: str) -> ParseError:
            return ParseError(
                f"Failed to parse pull requests for repository '{repo_name}': {reason}",
                url=url,
                stage=PULL_REQUESTS_STAGE,
            )

        if not isinstance(item, dict):
            raise fail("pull request entry is not an object")

        number = item.get("number")
        api_url = item.get("url")
        # bool is an int subclass
        if not isinstance(number, int) or isinstance(number, bool):
            raise fail(f"pull request is missing an integer 'number': {item.get('number')!r}")
        if not isinstance(api_url, str):
            raise fail(f"pull request #{number} is missing a string 'url'")

        requested_reviewers = item.get("requested_reviewers")
        if not isinstance(requested_reviewers, list):
            raise fail(f"pull request #{number} has no 'requested_reviewers' list")

        logins: List[str] = []
        for reviewer in requested_reviewers:
            login = reviewer.get("login") if isinstance(reviewer, dict) else None
            if not isinstance(login, str):
                raise fail(f"pull request #{number} has a requested reviewer without a 'login'")
            logins.append(login)

        return RawPullRequest(number=number, url=api_url, reviewer_logins=logins)

    def close(self) -> None:
        self._session.close()
