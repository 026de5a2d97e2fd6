"""GitHub public API client."""

from ask.services.github.client import (
    GitHubAPIError,
    GitHubClient,
    GitHubConnectionError,
    GitHubError,
    GitHubResponseError,
    GitHubUserNotFoundError,
)

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "GitHubConnectionError",
    "GitHubError",
    "GitHubResponseError",
    "GitHubUserNotFoundError",
]
