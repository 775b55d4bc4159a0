"""Notifier implementations and the provider registry."""

from __future__ import annotations

import logging
import ssl
from typing import Any, Protocol, runtime_checkable

import httpx

from commit_notifier.address import EndpointIdentity
from commit_notifier.clients.base import DEFAULT_TIMEOUT, HTTPStatusClient, build_ssl_context
from commit_notifier.clients.gitea import GiteaClient
from commit_notifier.clients.github import GitHubClient
from commit_notifier.errors import ConfigurationError, EmptyTokenError, UnknownProviderError
from commit_notifier.reporter import DEFAULT_PAGE_SIZE, CommitStatusReporter
from commit_notifier.types.events import Event


@runtime_checkable
class Notifier(Protocol):
    """Anything that can report a lifecycle event."""

    async def report(self, event: Event) -> None:
        """Report a single event. Raises on failure."""
        ...


class CommitStatusNotifier:
    """Shared construction for commit status notifiers.

    Validates the token and address, builds the API client and hands events
    to a :class:`CommitStatusReporter`. Construction either succeeds fully or
    raises a :class:`~commit_notifier.errors.ConfigurationError`.
    """

    provider: str = ""
    client_class: type[HTTPStatusClient] = HTTPStatusClient

    def __init__(
        self,
        address: str,
        token: str,
        *,
        ca_file: str | None = None,
        ssl_context: ssl.SSLContext | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = DEFAULT_PAGE_SIZE,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token:
            raise EmptyTokenError(self.provider)
        self.identity = EndpointIdentity.from_address(address)

        if ssl_context is None:
            try:
                ssl_context = build_ssl_context(ca_file)
            except OSError as exc:
                raise ConfigurationError(f"could not load CA file {ca_file!r}: {exc}") from exc
        self.client = self.client_class(
            self.identity.host_url,
            token,
            ssl_context=ssl_context,
            timeout=timeout,
            transport=transport,
        )
        self._reporter = CommitStatusReporter(
            self.client, self.identity, logger=logger, page_size=page_size,
        )

    @property
    def host_url(self) -> str:
        return self.identity.host_url

    @property
    def owner(self) -> str:
        return self.identity.owner

    @property
    def repository(self) -> str:
        return self.identity.repository

    async def report(self, event: Event) -> None:
        await self._reporter.report(event)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> CommitStatusNotifier:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.host_url!r}, {self.identity.identifier!r})"


class GiteaNotifier(CommitStatusNotifier):
    """Reports events as Gitea commit statuses."""

    provider = "gitea"
    client_class = GiteaClient


class GitHubNotifier(CommitStatusNotifier):
    """Reports events as GitHub commit statuses."""

    provider = "github"
    client_class = GitHubClient


NOTIFIERS: dict[str, type[CommitStatusNotifier]] = {
    "gitea": GiteaNotifier,
    "github": GitHubNotifier,
}


def create_notifier(provider: str, address: str, token: str, **kwargs: Any) -> CommitStatusNotifier:
    """Create a notifier for *provider* (``"gitea"`` or ``"github"``)."""
    notifier_class = NOTIFIERS.get(provider.lower())
    if notifier_class is None:
        raise UnknownProviderError(provider, sorted(NOTIFIERS))
    return notifier_class(address, token, **kwargs)
