"""Commit status types shared by the reporter and the API clients."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatusState(Enum):
    """Commit status state.

    Remote APIs speak plain strings; convert with :meth:`to_wire` and
    :meth:`from_wire` at the client boundary only.
    """

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"

    def to_wire(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, value: str | None) -> StatusState | None:
        """Return the matching state, or ``None`` for unknown or empty values.

        Callers that need to tell "unknown" from "empty" keep the raw string,
        see :attr:`CommitStatus.raw_state`.
        """
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class CommitStatus:
    """A commit status record as stored by the hosting service."""

    context: str
    state: StatusState | None
    description: str
    target_url: str = ""
    id: int | None = None
    # The state as sent by the service; set even when it is outside StatusState.
    raw_state: str = ""

    @property
    def comparable(self) -> bool:
        """True when context, state and description are all set.

        A state the enum does not know (Gitea's ``warning``) still counts as
        set: such a record is comparable but never equal to a new status.
        """
        has_state = self.state is not None or bool(self.raw_state)
        return bool(self.context) and has_state and bool(self.description)


@dataclass(frozen=True, slots=True)
class StatusOptions:
    """Payload for creating a commit status."""

    state: StatusState
    description: str
    context: str
    target_url: str = ""

    def to_payload(self) -> dict[str, str]:
        payload = {
            "state": self.state.to_wire(),
            "description": self.description,
            "context": self.context,
        }
        if self.target_url:
            payload["target_url"] = self.target_url
        return payload
