"""Hosting service status API clients.

Public surface
--------------
- :class:`StatusClient`     — protocol the reporter depends on
- :class:`HTTPStatusClient` — shared httpx base
- :class:`GiteaClient`      — Gitea ``/api/v1`` client
- :class:`GitHubClient`     — GitHub / GitHub Enterprise client
"""

from __future__ import annotations

from commit_notifier.clients.base import HTTPStatusClient, StatusClient, build_ssl_context
from commit_notifier.clients.gitea import GiteaClient
from commit_notifier.clients.github import GitHubClient

__all__ = [
    "GitHubClient",
    "GiteaClient",
    "HTTPStatusClient",
    "StatusClient",
    "build_ssl_context",
]
