"""Event to commit status translation."""

from __future__ import annotations

from itertools import groupby

from commit_notifier.errors import UnknownSeverityError
from commit_notifier.types.events import PROGRESSING_REASON, Event, Severity
from commit_notifier.types.status import StatusState

MAX_DESCRIPTION_LENGTH = 140

_LOWER, _UPPER, _DIGIT, _SPACE, _OTHER = range(5)


def to_status_state(event: Event) -> StatusState:
    """Map an event to a commit status state.

    A progressing event is pending whatever its severity.
    """
    if event.has_reason(PROGRESSING_REASON):
        return StatusState.PENDING
    if event.severity is Severity.INFO:
        return StatusState.SUCCESS
    if event.severity is Severity.ERROR:
        return StatusState.FAILURE
    raise UnknownSeverityError(event.severity)


def _char_class(char: str) -> int:
    if char.islower():
        return _LOWER
    if char.isupper():
        return _UPPER
    if char.isdigit():
        return _DIGIT
    if char.isspace():
        return _SPACE
    return _OTHER


def split_camelcase(value: str) -> list[str]:
    """Split a reason on character class changes.

    ``ReconciliationSucceeded`` -> ``["Reconciliation", "Succeeded"]``,
    ``HTTPError`` -> ``["HTTP", "Error"]``. Works on any script: letters
    without case (``日本語``) stay one word, and punctuation becomes its own
    word. Whitespace is dropped.
    """
    runs = [[cls, "".join(chars)] for cls, chars in groupby(value, _char_class)]
    # An upper run followed by a lower run gives its last letter to the
    # lower run: "HTTPError" is "HTTP" + "Error".
    for current, following in zip(runs, runs[1:]):
        if current[0] == _UPPER and following[0] == _LOWER:
            current[1], following[1] = current[1][:-1], current[1][-1] + following[1]
    return [word for cls, word in runs if word and cls != _SPACE]


def format_name_and_description(event: Event) -> tuple[str, str]:
    """Return the status context name and description for an event."""
    obj = event.involved_object
    name = f"{obj.kind}/{obj.name}".lower()
    description = " ".join(split_camelcase(event.reason)).lower() or event.reason.lower()
    return name, description[:MAX_DESCRIPTION_LENGTH]
