"""GitHub API client.

Only public, unauthenticated endpoints are used:
    GET https://github.com/<user>.keys      newline separated public keys
    GET https://api.github.com/users/<user> profile JSON
    GET https://api.github.com/search/users search results JSON
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ask.config import get_settings
from ask.constants import SEARCH_PAGE_SIZE
from ask.models.schemas import GitHubUser, SearchResult
from ask.utils.http_client import get_general_client
from ask.utils.ssh_keys import parse_keys

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Base exception for GitHub errors."""

    pass


class GitHubUserNotFoundError(GitHubError):
    """The requested user does not exist (HTTP 404)."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"GitHub user '{username}' not found")


class GitHubAPIError(GitHubError):
    """GitHub answered with an unexpected status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"GitHub API returned status {status_code}")


class GitHubResponseError(GitHubError):
    """Response body could not be parsed."""

    pass


class GitHubConnectionError(GitHubError):
    """Connection error or timeout."""

    pass


class GitHubClient:
    """Client for GitHub's public key, profile and search endpoints.

    Usage:
        client = GitHubClient()

        user = client.get_user("octocat")
        keys = client.get_keys("octocat")
        result = client.search_users("octo")
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        github_url: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize GitHub client.

        Args:
            http: httpx client to send requests with (default: shared client)
            github_url: Base URL serving <user>.keys (default: ASK_GITHUB_URL)
            api_url: REST API base URL (default: ASK_GITHUB_API_URL)
            timeout: Per-request timeout in seconds (default: ASK_HTTP_TIMEOUT)
        """
        settings = get_settings()
        self.http = http if http is not None else get_general_client()
        self.github_url = (github_url or settings.github_url).rstrip("/")
        self.api_url = (api_url or settings.github_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout

    def _get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        accept: str = "application/vnd.github+json",
    ) -> httpx.Response:
        """Send a GET request.

        Raises:
            GitHubConnectionError: On timeouts and transport failures
        """
        logger.debug(f"GET {url} params={params}")
        try:
            response = self.http.get(
                url,
                params=params,
                headers={"Accept": accept},
                timeout=self.timeout,
                follow_redirects=True,
            )
        except httpx.TimeoutException as e:
            raise GitHubConnectionError(f"request to {url} timed out: {e}") from e
        except httpx.RequestError as e:
            raise GitHubConnectionError(f"request to {url} failed: {e}") from e

        logger.debug(f"GET {url} -> {response.status_code}")
        return response

    def _check_status(self, response: httpx.Response, username: str | None = None) -> None:
        """Map non-200 statuses to exceptions."""
        if response.status_code == 404 and username is not None:
            raise GitHubUserNotFoundError(username)
        if response.status_code != 200:
            raise GitHubAPIError(response.status_code)

    # ==================== Keys ====================

    def get_keys(self, username: str) -> list[str]:
        """Get a user's public SSH keys.

        Args:
            username: Validated GitHub username

        Returns:
            Recognized key lines in the order GitHub lists them; empty if the
            user has no keys

        Raises:
            GitHubUserNotFoundError: If the user does not exist
            GitHubAPIError: On any other non-200 status
            GitHubConnectionError: On transport failures
        """
        response = self._get(f"{self.github_url}/{username}.keys", accept="text/plain")
        self._check_status(response, username)

        content = response.text.strip()
        if not content:
            return []

        keys = parse_keys(content)
        logger.info(f"Fetched {len(keys)} key(s) for {username}")
        return keys

    # ==================== Users ====================

    def get_user(self, username: str) -> GitHubUser:
        """Get a user's public profile.

        Raises:
            GitHubUserNotFoundError: If the user does not exist
            GitHubAPIError: On any other non-200 status
            GitHubResponseError: If the body is not a valid profile
            GitHubConnectionError: On transport failures
        """
        response = self._get(f"{self.api_url}/users/{username}")
        self._check_status(response, username)

        try:
            return GitHubUser.model_validate_json(response.content)
        except ValidationError as e:
            raise GitHubResponseError(f"failed to parse user info: {e}") from e

    def search_users(self, query: str, per_page: int = SEARCH_PAGE_SIZE) -> SearchResult:
        """Search users by login, name or email.

        The query is sent as a query parameter and percent-encoded by httpx.

        Raises:
            GitHubAPIError: On any non-200 status
            GitHubResponseError: If the body is not a valid search result
            GitHubConnectionError: On transport failures
        """
        response = self._get(
            f"{self.api_url}/search/users",
            params={"q": query, "per_page": per_page},
        )
        self._check_status(response)

        try:
            return SearchResult.model_validate_json(response.content)
        except ValidationError as e:
            raise GitHubResponseError(f"failed to parse search results: {e}") from e
