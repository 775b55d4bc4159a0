"""Commit status API client protocol and the shared httpx implementation."""

from __future__ import annotations

import ssl
from typing import Any, Protocol, runtime_checkable

import httpx

from commit_notifier.types.status import CommitStatus, StatusOptions, StatusState

DEFAULT_TIMEOUT: float = 30.0


@runtime_checkable
class StatusClient(Protocol):
    """The two hosting service calls a reporter needs."""

    async def list_statuses(
        self,
        owner: str,
        repo: str,
        revision: str,
        *,
        page: int = 1,
        page_size: int = 50,
    ) -> list[CommitStatus]:
        """List statuses for a revision, in the order the service returns them."""
        ...

    async def create_status(
        self,
        owner: str,
        repo: str,
        revision: str,
        options: StatusOptions,
    ) -> CommitStatus:
        """Create a commit status."""
        ...


def build_ssl_context(
    ca_file: str | None = None,
    ca_data: str | bytes | None = None,
) -> ssl.SSLContext | None:
    """Return an SSL context trusting a custom root, or None for the defaults."""
    if ca_file is None and ca_data is None:
        return None
    return ssl.create_default_context(cafile=ca_file, cadata=ca_data)


class HTTPStatusClient:
    """Base for httpx-backed status clients.

    A single :class:`httpx.AsyncClient` is created up front and reused by all
    calls, so one instance can serve concurrent notifications. Use it as an
    async context manager, or call :meth:`aclose` when done::

        async with GiteaClient("https://gitea.example.com", token) as client:
            statuses = await client.list_statuses("owner", "repo", sha)

    Subclasses provide :attr:`api_url`, auth headers, the endpoint paths and
    how a status record is decoded.
    """

    def __init__(
        self,
        api_url: str,
        token: str,
        *,
        ssl_context: ssl.SSLContext | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self._headers = {
            "Accept": "application/json",
            **self.auth_headers(token),
        }
        verify: ssl.SSLContext | bool = ssl_context if ssl_context is not None else True
        self._client = httpx.AsyncClient(
            headers=self._headers,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    async def __aenter__(self) -> HTTPStatusClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # -- Subclass hooks ---------------------------------------------------

    def auth_headers(self, token: str) -> dict[str, str]:
        raise NotImplementedError

    def statuses_path(self, owner: str, repo: str, revision: str) -> str:
        raise NotImplementedError

    def create_path(self, owner: str, repo: str, revision: str) -> str:
        raise NotImplementedError

    def page_params(self, page: int, page_size: int) -> dict[str, int]:
        raise NotImplementedError

    def state_of(self, data: dict[str, Any]) -> str:
        return str(data.get("state") or "")

    def decode_status(self, data: dict[str, Any]) -> CommitStatus:
        if not isinstance(data, dict):
            raise ValueError(f"expected a commit status object, got {type(data).__name__}")
        raw_state = self.state_of(data)
        return CommitStatus(
            context=data.get("context") or "",
            state=StatusState.from_wire(raw_state),
            description=data.get("description") or "",
            target_url=data.get("target_url") or "",
            id=data.get("id"),
            raw_state=raw_state,
        )

    # -- HTTP -------------------------------------------------------------

    async def _get(self, path: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        resp = await self._client.get(f"{self.api_url}{path}", params=params)
        resp.raise_for_status()
        return resp

    async def _post(self, path: str, json: dict[str, Any]) -> httpx.Response:
        resp = await self._client.post(f"{self.api_url}{path}", json=json)
        resp.raise_for_status()
        return resp

    # -- Public API -------------------------------------------------------

    async def list_statuses(
        self,
        owner: str,
        repo: str,
        revision: str,
        *,
        page: int = 1,
        page_size: int = 50,
    ) -> list[CommitStatus]:
        """List statuses for a revision, in the order the service returns them."""
        resp = await self._get(
            self.statuses_path(owner, repo, revision),
            params=self.page_params(page, page_size),
        )
        data = resp.json()
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"expected a list of commit statuses, got {type(data).__name__}")
        return [self.decode_status(item) for item in data]

    async def create_status(
        self,
        owner: str,
        repo: str,
        revision: str,
        options: StatusOptions,
    ) -> CommitStatus:
        """Create a commit status."""
        resp = await self._post(
            self.create_path(owner, repo, revision),
            json=options.to_payload(),
        )
        return self.decode_status(resp.json())
