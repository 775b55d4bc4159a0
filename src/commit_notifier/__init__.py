"""commit_notifier — report lifecycle events as commit statuses.

Usage:
    from commit_notifier import Event, GiteaNotifier

    async with GiteaNotifier("https://gitea.example.com/org/app", token) as notifier:
        await notifier.report(Event.from_dict(payload))
"""

from commit_notifier.address import EndpointIdentity, parse_git_address, parse_revision
from commit_notifier.errors import (
    ConfigurationError,
    EmptyTokenError,
    EventError,
    InvalidAddressError,
    InvalidIdentifierError,
    InvalidRevisionError,
    MissingRevisionError,
    NotifierError,
    RemoteError,
    StatusCreateError,
    StatusListError,
    UnknownProviderError,
    UnknownSeverityError,
)
from commit_notifier.notifiers import (
    CommitStatusNotifier,
    GiteaNotifier,
    GitHubNotifier,
    Notifier,
    create_notifier,
)
from commit_notifier.reporter import CommitStatusReporter, duplicate_status
from commit_notifier.translate import format_name_and_description, to_status_state
from commit_notifier.types.events import Event, ObjectReference, Severity
from commit_notifier.types.status import CommitStatus, StatusOptions, StatusState

__version__ = "0.1.0"

__all__ = [
    # Notifiers
    "CommitStatusNotifier",
    "CommitStatusReporter",
    "GitHubNotifier",
    "GiteaNotifier",
    "Notifier",
    "create_notifier",
    # Core operations
    "duplicate_status",
    "format_name_and_description",
    "parse_git_address",
    "parse_revision",
    "to_status_state",
    # Types
    "CommitStatus",
    "EndpointIdentity",
    "Event",
    "ObjectReference",
    "Severity",
    "StatusOptions",
    "StatusState",
    # Errors
    "ConfigurationError",
    "EmptyTokenError",
    "EventError",
    "InvalidAddressError",
    "InvalidIdentifierError",
    "InvalidRevisionError",
    "MissingRevisionError",
    "NotifierError",
    "RemoteError",
    "StatusCreateError",
    "StatusListError",
    "UnknownProviderError",
    "UnknownSeverityError",
]
