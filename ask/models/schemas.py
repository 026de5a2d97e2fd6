"""Pydantic schemas for GitHub API responses."""

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """Public profile of a GitHub user.

    The same shape is returned by /users/<name> and inside search results,
    though search items usually omit everything except the login.
    """

    model_config = ConfigDict(extra="ignore")

    login: str
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    email: str | None = None
    public_repos: int = 0

    @property
    def display_name(self) -> str:
        """Name to show the user, falling back to the login."""
        return self.name or self.login


class SearchResult(BaseModel):
    """Result page of /search/users."""

    model_config = ConfigDict(extra="ignore")

    total_count: int
    items: list[GitHubUser] = Field(default_factory=list)
