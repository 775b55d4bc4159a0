"""Type definitions for commit_notifier."""

from commit_notifier.types.events import (
    META_REVISION_KEY,
    PROGRESSING_REASON,
    Event,
    ObjectReference,
    Severity,
)
from commit_notifier.types.status import CommitStatus, StatusOptions, StatusState

__all__ = [
    "META_REVISION_KEY",
    "PROGRESSING_REASON",
    "CommitStatus",
    "Event",
    "ObjectReference",
    "Severity",
    "StatusOptions",
    "StatusState",
]
