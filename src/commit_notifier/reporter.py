"""CommitStatusReporter — reports lifecycle events as commit statuses."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from commit_notifier.address import EndpointIdentity, parse_revision
from commit_notifier.clients.base import StatusClient
from commit_notifier.errors import MissingRevisionError, StatusCreateError, StatusListError
from commit_notifier.translate import format_name_and_description, to_status_state
from commit_notifier.types.events import META_REVISION_KEY, Event
from commit_notifier.types.status import CommitStatus, StatusOptions

DEFAULT_PAGE_SIZE: int = 50

_REMOTE_ERRORS = (httpx.HTTPError, ValueError)


def duplicate_status(statuses: Sequence[CommitStatus], options: StatusOptions) -> bool:
    """Return True if the newest status for the same context matches *options*.

    *statuses* are scanned in the order given (newest first). Records missing a
    context, state or description are skipped. The first record with the same
    context decides; older records for that context are not consulted.
    """
    for status in statuses:
        if not status.comparable:
            continue
        if status.context == options.context:
            return status.state is options.state and status.description == options.description
    return False


class CommitStatusReporter:
    """Turns events into at most one commit status write each.

    Parameters
    ----------
    client:
        The hosting service API. Shared across calls; must be safe for
        concurrent use.
    identity:
        The repository statuses are written to.
    logger:
        Where debug records go. Defaults to this module's logger.
    page_size:
        How many of the most recent statuses to inspect for duplicates.
    """

    def __init__(
        self,
        client: StatusClient,
        identity: EndpointIdentity,
        *,
        logger: logging.Logger | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._client = client
        self._identity = identity
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._page_size = page_size

    @property
    def identity(self) -> EndpointIdentity:
        return self._identity

    def build_status(self, event: Event) -> tuple[str, StatusOptions]:
        """Validate an event and return ``(revision, status to create)``.

        Raises an :class:`~commit_notifier.errors.EventError` for events that
        cannot be reported. Performs no I/O.
        """
        raw_revision = event.metadata.get(META_REVISION_KEY)
        if raw_revision is None:
            raise MissingRevisionError(META_REVISION_KEY)
        revision = parse_revision(raw_revision)

        state = to_status_state(event)
        name, description = format_name_and_description(event)
        return revision, StatusOptions(
            state=state,
            description=description,
            context=name,
            target_url="",
        )

    async def report(self, event: Event) -> None:
        """Report *event* as a commit status, unless it would be a duplicate."""
        revision, status = self.build_status(event)
        owner, repo = self._identity.owner, self._identity.repository

        try:
            statuses = await self._client.list_statuses(
                owner, repo, revision, page=1, page_size=self._page_size,
            )
        except _REMOTE_ERRORS as exc:
            raise StatusListError(f"could not list commit statuses: {exc}") from exc

        if duplicate_status(statuses, status):
            self._logger.debug(
                "Skipping duplicate commit status for %s/%s@%s: %s",
                owner, repo, revision, status,
            )
            return

        self._logger.debug(
            "Creating commit status on %s for %s/%s@%s: %s",
            self._identity.host_url, owner, repo, revision, status,
        )
        try:
            created = await self._client.create_status(owner, repo, revision, status)
        except _REMOTE_ERRORS as exc:
            self._logger.warning(
                "Commit status creation failed for %s/%s@%s: %s", owner, repo, revision, exc,
            )
            raise StatusCreateError(f"could not create commit status: {exc}") from exc

        self._logger.debug("Created commit status %s", created)
