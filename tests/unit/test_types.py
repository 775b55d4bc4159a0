"""Tests for event and commit status types."""

from __future__ import annotations

import pytest

from commit_notifier.errors import UnknownSeverityError
from commit_notifier.types.events import Event, Severity
from commit_notifier.types.status import CommitStatus, StatusOptions, StatusState


class TestStatusState:
    @pytest.mark.parametrize("state", list(StatusState))
    def test_wire_round_trip(self, state: StatusState) -> None:
        assert StatusState.from_wire(state.to_wire()) is state

    def test_from_wire_is_case_insensitive(self) -> None:
        assert StatusState.from_wire("SUCCESS") is StatusState.SUCCESS

    @pytest.mark.parametrize("value", [None, "", "warning", "skipped"])
    def test_unknown_wire_values(self, value: str | None) -> None:
        assert StatusState.from_wire(value) is None


class TestCommitStatus:
    def test_comparable(self) -> None:
        assert CommitStatus("ctx", StatusState.SUCCESS, "ok").comparable

    @pytest.mark.parametrize("status", [
        CommitStatus("", StatusState.SUCCESS, "ok"),
        CommitStatus("ctx", None, "ok"),
        CommitStatus("ctx", StatusState.SUCCESS, ""),
    ])
    def test_not_comparable(self, status: CommitStatus) -> None:
        assert not status.comparable

    def test_unknown_remote_state_is_comparable(self) -> None:
        status = CommitStatus("ctx", None, "ok", raw_state="warning")
        assert status.state is None
        assert status.comparable



class TestStatusOptions:
    def test_payload_omits_empty_target_url(self) -> None:
        options = StatusOptions(StatusState.PENDING, "progressing", "kustomization/app")
        assert options.to_payload() == {
            "state": "pending",
            "description": "progressing",
            "context": "kustomization/app",
        }

    def test_payload_includes_target_url(self) -> None:
        options = StatusOptions(
            StatusState.SUCCESS, "done", "ctx", target_url="https://ci.example.com/1",
        )
        assert options.to_payload()["target_url"] == "https://ci.example.com/1"


class TestEvent:
    def test_from_dict(self) -> None:
        event = Event.from_dict({
            "involvedObject": {
                "kind": "Kustomization",
                "name": "podinfo",
                "namespace": "flux-system",
            },
            "severity": "info",
            "timestamp": "2024-01-01T00:00:00Z",
            "message": "Applied revision: main@sha1:abc",
            "reason": "ReconciliationSucceeded",
            "metadata": {"revision": "main@sha1:abc"},
            "reportingController": "kustomize-controller",
        })
        assert event.severity is Severity.INFO
        assert event.reason == "ReconciliationSucceeded"
        assert event.involved_object.kind == "Kustomization"
        assert event.involved_object.namespace == "flux-system"
        assert event.metadata == {"revision": "main@sha1:abc"}
        assert event.reporting_controller == "kustomize-controller"

    def test_from_dict_without_metadata(self) -> None:
        event = Event.from_dict({"severity": "error", "reason": "Failed"})
        assert event.metadata == {}
        assert event.involved_object.name == ""

    def test_from_dict_drops_null_metadata(self) -> None:
        event = Event.from_dict({
            "severity": "info",
            "reason": "ReconciliationSucceeded",
            "metadata": {"revision": None, "summary": "cluster=prod"},
        })
        assert event.metadata == {"summary": "cluster=prod"}


    def test_from_dict_rejects_unknown_severity(self) -> None:
        with pytest.raises(UnknownSeverityError):
            Event.from_dict({"severity": "warning", "reason": "Odd"})

    def test_reasons(self) -> None:
        event = Event(severity=Severity.INFO, reason="Progressing")
        assert event.reasons == frozenset({"Progressing"})
        assert event.has_reason("Progressing")
        assert not event.has_reason("ReconciliationSucceeded")
        assert Event(severity=Severity.INFO, reason="").reasons == frozenset()
