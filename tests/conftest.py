"""Pytest configuration and fixtures."""

import json
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest

from ask.config import get_settings
from ask.services.github.client import GitHubClient
from ask.store.authorized_keys import AuthorizedKeysStore

ED25519_KEY = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIGq5mWsZL0k3y1cXq0rTgkFv9ZP0T1uZbYJ3n3o8b2Sx"
RSA_KEY = "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQC7vbqajDhA6cYrC4pZb3o1q2w9h0k1dJcXwF octo@laptop"
ECDSA_KEY = "ecdsa-sha2-nistp256 AAAAE2VjZHNhLXNoYTItbmlzdHAyNTYAAAAIbmlzdHAyNTYAAABBBEm"


class FakeGitHub:
    """In-memory stand-in for github.com and api.github.com."""

    def __init__(self) -> None:
        self.users: dict[str, dict] = {}
        self.keys: dict[str, str] = {}
        self.search_payload: dict | str = {"total_count": 0, "items": []}
        self.statuses: dict[str, int] = {}
        self.errors: dict[str, Exception] = {}
        self.requests: list[httpx.Request] = []

    def add_user(self, login: str, keys: list[str] | None = None, **profile) -> None:
        self.users[login] = {"login": login, **profile}
        self.keys[login] = "\n".join(keys or []) + "\n"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.errors:
            raise self.errors[path]
        if path in self.statuses:
            return httpx.Response(self.statuses[path], text="")

        if request.url.host == "github.com" and path.endswith(".keys"):
            login = path[1 : -len(".keys")]
            if login not in self.keys:
                return httpx.Response(404, text="Not Found")
            return httpx.Response(200, text=self.keys[login])

        if request.url.host == "api.github.com" and path.startswith("/users/"):
            login = path[len("/users/") :]
            if login not in self.users:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=self.users[login])

        if request.url.host == "api.github.com" and path == "/search/users":
            if isinstance(self.search_payload, str):
                return httpx.Response(200, text=self.search_payload)
            return httpx.Response(200, content=json.dumps(self.search_payload).encode())

        return httpx.Response(404)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Isolate tests from ASK_* variables and the real ~/.ssh."""
    for name in ("ASK_GITHUB_URL", "ASK_GITHUB_API_URL", "ASK_HTTP_TIMEOUT", "ASK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ASK_SSH_DIR", str(tmp_path / "home" / ".ssh"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ssh_dir(tmp_path: Path) -> Path:
    """Not-yet-created ssh directory."""
    return tmp_path / "home" / ".ssh"


@pytest.fixture
def store(ssh_dir: Path) -> AuthorizedKeysStore:
    """Store rooted at the temporary ssh directory."""
    return AuthorizedKeysStore(ssh_dir)


@pytest.fixture
def github() -> FakeGitHub:
    """Fake GitHub with no users."""
    return FakeGitHub()


@pytest.fixture
def client(github: FakeGitHub) -> Generator[GitHubClient, None, None]:
    """GitHub client wired to the fake GitHub."""
    http = httpx.Client(transport=httpx.MockTransport(github.handler))
    yield GitHubClient(
        http=http,
        github_url="https://github.com",
        api_url="https://api.github.com",
        timeout=10.0,
    )
    http.close()
