"""Configuration loading (TOML, env vars, .env)."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from commit_notifier.clients.base import DEFAULT_TIMEOUT
from commit_notifier.notifiers import CommitStatusNotifier, create_notifier

logger = logging.getLogger(__name__)

# Load .env from current directory (and parents), won't override existing env vars
load_dotenv()

ENV_MAP = {
    "provider": "NOTIFIER_PROVIDER",
    "address": "NOTIFIER_ADDRESS",
    "token": "NOTIFIER_TOKEN",
    "ca_file": "NOTIFIER_CA_FILE",
    "timeout": "NOTIFIER_TIMEOUT",
}


@dataclass(frozen=True, slots=True)
class NotifierConfig:
    """Settings needed to build a notifier."""

    address: str
    token: str
    provider: str = "gitea"
    ca_file: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"NotifierConfig(address={self.address!r}, token='***', "
            f"provider={self.provider!r}, ca_file={self.ca_file!r}, timeout={self.timeout!r})"
        )


def load_env_config() -> dict[str, Any]:
    """Load configuration from environment variables."""
    config: dict[str, Any] = {}
    for key, env_var in ENV_MAP.items():
        if value := os.environ.get(env_var):
            config[key] = value
    return config


def load_toml_config(cwd: str | None = None) -> dict[str, Any]:
    """Load configuration from .notifier/config.toml if it exists."""
    search_dirs = []
    if cwd:
        search_dirs.append(Path(cwd))
    search_dirs.append(Path.cwd())

    for d in search_dirs:
        toml_path = d / ".notifier" / "config.toml"
        if toml_path.exists():
            try:
                with open(toml_path, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Cannot read notifier config %s: %s", toml_path, exc)
                continue
            section = data.get("notifier", data)
            return {k: v for k, v in section.items() if k in ENV_MAP}
    return {}


def resolve_notifier_config(cwd: str | None = None) -> NotifierConfig | None:
    """Resolve notifier config, environment taking precedence over TOML.

    Returns None when no address or token is configured.
    """
    merged = {**load_toml_config(cwd), **load_env_config()}
    address = str(merged.get("address", ""))
    token = str(merged.get("token", ""))
    if not address or not token:
        return None

    timeout = DEFAULT_TIMEOUT
    if "timeout" in merged:
        try:
            timeout = float(merged["timeout"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid notifier timeout %r", merged["timeout"])

    ca_file = merged.get("ca_file")
    return NotifierConfig(
        address=address,
        token=token,
        provider=str(merged.get("provider", "gitea")),
        ca_file=str(ca_file) if ca_file else None,
        timeout=timeout,
    )


def create_notifier_from_config(
    config: NotifierConfig,
    *,
    logger: logging.Logger | None = None,
) -> CommitStatusNotifier:
    """Build the notifier described by *config*."""
    return create_notifier(
        config.provider,
        config.address,
        config.token,
        ca_file=config.ca_file,
        timeout=config.timeout,
        logger=logger,
    )
