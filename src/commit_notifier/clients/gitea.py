"""GiteaClient — httpx-based Gitea commit status client."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from commit_notifier.clients.base import HTTPStatusClient


class GiteaClient(HTTPStatusClient):
    """Commit status calls against the Gitea REST API (``/api/v1``)."""

    def __init__(self, host_url: str, token: str, **kwargs: Any) -> None:
        super().__init__(f"{host_url.rstrip('/')}/api/v1", token, **kwargs)

    def auth_headers(self, token: str) -> dict[str, str]:
        return {"Authorization": f"token {token}"}

    def statuses_path(self, owner: str, repo: str, revision: str) -> str:
        return f"/repos/{quote(owner)}/{quote(repo)}/commits/{quote(revision)}/statuses"

    def create_path(self, owner: str, repo: str, revision: str) -> str:
        return f"/repos/{quote(owner)}/{quote(repo)}/statuses/{quote(revision)}"

    def page_params(self, page: int, page_size: int) -> dict[str, int]:
        return {"page": page, "limit": page_size}

    def state_of(self, data: dict[str, Any]) -> str:
        # Gitea reports the state under "status"; older releases used "state".
        return str(data.get("status") or data.get("state") or "")
