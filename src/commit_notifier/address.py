"""Repository address and revision parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from commit_notifier.errors import (
    InvalidAddressError,
    InvalidIdentifierError,
    InvalidRevisionError,
)

_HTTP_SCHEMES = frozenset({"http", "https"})
_SSH_SCHEMES = frozenset({"ssh", "git+ssh", "ssh+git"})

# user@host:owner/repo
_SCP_LIKE = re.compile(r"^(?:[^@/:]+@)?(?P<host>[^@/:]+):(?P<path>[^/].*)$")

_DIGEST_LENGTHS = {"sha1": 40, "sha256": 64}
_HEX = re.compile(r"^[0-9a-fA-F]+$")


@dataclass(frozen=True, slots=True)
class EndpointIdentity:
    """Where commit statuses are written: the host and the repository on it."""

    host_url: str
    owner: str
    repository: str

    @property
    def identifier(self) -> str:
        return f"{self.owner}/{self.repository}"

    @classmethod
    def from_address(cls, address: str) -> EndpointIdentity:
        """Parse and validate a combined ``host/owner/repo`` address."""
        host, identifier = parse_git_address(address)
        owner, repository = split_identifier(identifier)
        return cls(host_url=host, owner=owner, repository=repository)


def parse_git_address(address: str) -> tuple[str, str]:
    """Split a repository address into ``(host_url, "owner/repo")``.

    HTTP(S) hosts are returned as written, including any port. SSH addresses,
    both ``ssh://`` URLs and the scp-like ``git@host:owner/repo`` form, map to
    ``https://host`` since the status API is served over HTTPS.
    """
    value = address.strip()
    if not value:
        raise InvalidAddressError(address, "address is empty")

    if "://" in value:
        host, path = _split_url(address, value)
    else:
        match = _SCP_LIKE.match(value)
        if match is None:
            raise InvalidAddressError(address, "host is not a valid URL")
        host, path = f"https://{match['host']}", match["path"]

    identifier = path.strip("/").removesuffix(".git")
    components = identifier.split("/")
    if len(components) != 2 or not all(components):
        raise InvalidAddressError(address, "expected exactly <owner>/<repository> after the host")
    return host, identifier


def _split_url(address: str, value: str) -> tuple[str, str]:
    try:
        parsed = urlsplit(value)
        parsed.port  # raises ValueError for a malformed port
    except ValueError as exc:
        raise InvalidAddressError(address, str(exc)) from exc

    scheme = parsed.scheme.lower()
    if not parsed.hostname:
        raise InvalidAddressError(address, "host is empty")
    if parsed.query or parsed.fragment:
        raise InvalidAddressError(address, "unexpected query or fragment")

    if scheme in _HTTP_SCHEMES:
        hostport = parsed.netloc.rpartition("@")[2]
        return f"{scheme}://{hostport}", parsed.path
    if scheme in _SSH_SCHEMES:
        # SSH port dropped, the API is served over HTTPS.
        return f"https://{parsed.hostname}", parsed.path
    raise InvalidAddressError(address, f"unsupported scheme {parsed.scheme!r}")


def split_identifier(identifier: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its two components."""
    components = identifier.split("/")
    if len(components) != 2 or not all(components):
        raise InvalidIdentifierError(identifier)
    return components[0], components[1]


def parse_revision(revision: str) -> str:
    """Extract the commit hash from a revision string.

    Accepts ``<ref>@sha1:<hash>``, ``<ref>@sha256:<hash>``, ``sha1:<hash>``,
    the legacy ``<ref>/<hash>`` and a bare hash. The hash must be a full
    SHA-1 (40) or SHA-256 (64) hex digest. Returns it lowercased.
    """
    value = revision.strip()
    value = value.rpartition("@")[2]

    algorithm, sep, digest = value.partition(":")
    if sep:
        expected = _DIGEST_LENGTHS.get(algorithm.lower())
        if expected is None or len(digest) != expected:
            raise InvalidRevisionError(revision)
    else:
        digest = value.rpartition("/")[2]
        if len(digest) not in _DIGEST_LENGTHS.values():
            raise InvalidRevisionError(revision)

    if not _HEX.match(digest):
        raise InvalidRevisionError(revision)
    return digest.lower()
