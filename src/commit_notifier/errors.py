"""Error taxonomy for commit status notifiers.

Three families, matching when they can happen:

- :class:`ConfigurationError`: raised while constructing a notifier; the
  notifier is never returned in a broken state.
- :class:`EventError`: raised per :meth:`report` call for events that cannot
  be reported; always raised before any network call.
- :class:`RemoteError`: the hosting service call failed; the underlying
  ``httpx`` exception is chained as ``__cause__``.
"""

from __future__ import annotations


class NotifierError(Exception):
    """Base class for all notifier errors."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(NotifierError):
    """The notifier could not be constructed from the given settings."""


class EmptyTokenError(ConfigurationError):
    """Raised when the authentication token is empty."""

    def __init__(self, provider: str = "") -> None:
        label = f"{provider} token" if provider else "token"
        super().__init__(f"{label} cannot be empty")
        self.provider = provider


class InvalidAddressError(ConfigurationError):
    """Raised when a repository address cannot be parsed."""

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"invalid repository address {address!r}: {reason}")
        self.address = address
        self.reason = reason


class InvalidIdentifierError(ConfigurationError):
    """Raised when an ``owner/repository`` identifier is malformed."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"invalid repository id {identifier!r}")
        self.identifier = identifier


class UnknownProviderError(ConfigurationError):
    """Raised when no notifier is registered under a provider name."""

    def __init__(self, provider: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown provider '{provider}'. Available: {', '.join(available)}"
        )
        self.provider = provider


# ---------------------------------------------------------------------------
# Per-event errors
# ---------------------------------------------------------------------------


class EventError(NotifierError):
    """The event cannot be reported as a commit status."""


class MissingRevisionError(EventError):
    """Raised when the event metadata carries no revision."""

    def __init__(self, key: str) -> None:
        super().__init__(f"missing {key} metadata")
        self.key = key


class InvalidRevisionError(EventError):
    """Raised when the revision is not a recognised commit hash."""

    def __init__(self, revision: str) -> None:
        super().__init__(f"revision string format incorrect: {revision!r}")
        self.revision = revision


class UnknownSeverityError(EventError):
    """Raised when an event severity has no commit status equivalent."""

    def __init__(self, severity: object) -> None:
        super().__init__(f"can't convert severity {severity!r} to a commit status state")
        self.severity = severity


# ---------------------------------------------------------------------------
# Remote errors
# ---------------------------------------------------------------------------


class RemoteError(NotifierError):
    """A call to the hosting service failed."""


class StatusListError(RemoteError):
    """Listing the existing commit statuses failed."""


class StatusCreateError(RemoteError):
    """Creating the commit status failed."""
