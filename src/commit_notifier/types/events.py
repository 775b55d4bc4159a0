"""Lifecycle event types consumed by notifiers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from commit_notifier.errors import UnknownSeverityError

# Metadata key holding the source revision the event refers to.
META_REVISION_KEY = "revision"

# Reason attached to events emitted while a reconciliation is in flight.
PROGRESSING_REASON = "Progressing"


class Severity(Enum):
    """Event severity as emitted by the event source."""

    INFO = "info"
    ERROR = "error"
    TRACE = "trace"


@dataclass(frozen=True, slots=True)
class ObjectReference:
    """The resource an event is about."""

    kind: str = ""
    name: str = ""
    namespace: str = ""


@dataclass(frozen=True, slots=True)
class Event:
    """A lifecycle event for a deployed resource."""

    severity: Severity
    reason: str
    involved_object: ObjectReference = field(default_factory=ObjectReference)
    message: str = ""
    metadata: Mapping[str, str] = field(default_factory=dict)
    reporting_controller: str = ""

    @property
    def reasons(self) -> frozenset[str]:
        return frozenset({self.reason}) if self.reason else frozenset()

    def has_reason(self, reason: str) -> bool:
        return reason in self.reasons

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Decode the JSON payload shape emitted by the event source.

        Raises :class:`UnknownSeverityError` for severities outside
        :class:`Severity`.
        """
        raw_severity = data.get("severity", "")
        try:
            severity = Severity(raw_severity)
        except ValueError:
            raise UnknownSeverityError(raw_severity) from None

        obj = data.get("involvedObject") or {}
        metadata = data.get("metadata") or {}
        return cls(
            severity=severity,
            reason=str(data.get("reason", "")),
            involved_object=ObjectReference(
                kind=str(obj.get("kind", "")),
                name=str(obj.get("name", "")),
                namespace=str(obj.get("namespace", "")),
            ),
            message=str(data.get("message", "")),
            metadata={str(k): str(v) for k, v in metadata.items() if v is not None},
            reporting_controller=str(data.get("reportingController", "")),
        )
