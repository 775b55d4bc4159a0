"""GitHubClient — httpx-based GitHub commit status client."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlsplit

from commit_notifier.clients.base import HTTPStatusClient

GITHUB_API_URL = "https://api.github.com"


def github_api_url(host_url: str) -> str:
    """github.com uses api.github.com; Enterprise Server serves ``/api/v3``."""
    hostname = (urlsplit(host_url).hostname or "").lower()
    if hostname in ("github.com", "www.github.com"):
        return GITHUB_API_URL
    return f"{host_url.rstrip('/')}/api/v3"


class GitHubClient(HTTPStatusClient):
    """Commit status calls against the GitHub REST API."""

    def __init__(self, host_url: str, token: str, **kwargs: Any) -> None:
        super().__init__(github_api_url(host_url), token, **kwargs)

    def auth_headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def statuses_path(self, owner: str, repo: str, revision: str) -> str:
        return f"/repos/{quote(owner)}/{quote(repo)}/commits/{quote(revision)}/statuses"

    def create_path(self, owner: str, repo: str, revision: str) -> str:
        return f"/repos/{quote(owner)}/{quote(repo)}/statuses/{quote(revision)}"

    def page_params(self, page: int, page_size: int) -> dict[str, int]:
        return {"page": page, "per_page": page_size}
