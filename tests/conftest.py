"""Test fixtures including a recording in-memory StatusClient."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from commit_notifier.address import EndpointIdentity
from commit_notifier.types.events import Event, ObjectReference, Severity
from commit_notifier.types.status import CommitStatus, StatusOptions

SHA1 = "1234567890abcdef1234567890abcdef12345678"


@dataclass
class RecordingStatusClient:
    """A StatusClient that serves scripted statuses and records every call.

    Usage:
        client = RecordingStatusClient(statuses=[
            CommitStatus(context="kustomization/app", state=StatusState.SUCCESS,
                         description="reconciliation succeeded"),
        ])
    """

    statuses: list[CommitStatus] = field(default_factory=list)
    list_error: BaseException | None = None
    create_error: BaseException | None = None
    list_calls: list[dict[str, Any]] = field(default_factory=list)
    create_calls: list[dict[str, Any]] = field(default_factory=list)

    async def list_statuses(
        self,
        owner: str,
        repo: str,
        revision: str,
        *,
        page: int = 1,
        page_size: int = 50,
    ) -> list[CommitStatus]:
        self.list_calls.append({
            "owner": owner, "repo": repo, "revision": revision,
            "page": page, "page_size": page_size,
        })
        if self.list_error is not None:
            raise self.list_error
        return list(self.statuses)

    async def create_status(
        self,
        owner: str,
        repo: str,
        revision: str,
        options: StatusOptions,
    ) -> CommitStatus:
        self.create_calls.append({
            "owner": owner, "repo": repo, "revision": revision, "options": options,
        })
        if self.create_error is not None:
            raise self.create_error
        created = CommitStatus(
            context=options.context,
            state=options.state,
            description=options.description,
            id=len(self.create_calls),
        )
        self.statuses.insert(0, created)
        return created

    @property
    def call_count(self) -> int:
        return len(self.list_calls) + len(self.create_calls)


@pytest.fixture
def status_client() -> RecordingStatusClient:
    return RecordingStatusClient()


@pytest.fixture
def identity() -> EndpointIdentity:
    return EndpointIdentity(host_url="https://try.example.io", owner="foo", repository="bar")


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Build events with sensible defaults; override any field by keyword."""

    def _make(
        severity: Severity = Severity.INFO,
        reason: str = "ReconciliationSucceeded",
        *,
        kind: str = "Kustomization",
        name: str = "podinfo",
        revision: str | None = f"main@sha1:{SHA1}",
        metadata: dict[str, str] | None = None,
        message: str = "Applied revision",
    ) -> Event:
        meta = dict(metadata or {})
        if revision is not None:
            meta.setdefault("revision", revision)
        return Event(
            severity=severity,
            reason=reason,
            involved_object=ObjectReference(kind=kind, name=name, namespace="flux-system"),
            message=message,
            metadata=meta,
            reporting_controller="kustomize-controller",
        )

    return _make
