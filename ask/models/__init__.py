"""Pydantic models for GitHub API payloads."""

from ask.models.schemas import GitHubUser, SearchResult

__all__ = [
    "GitHubUser",
    "SearchResult",
]
