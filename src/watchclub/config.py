"""Client configuration.

ClientConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from watchclub.errors import ConfigurationError

ENV_PREFIX = "WATCHCLUB_"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Client configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ClientConfig(api_url="https://watchclub.example", storage_path="~/.watchclub.json")
    """

    # Backend
    api_url: str = "http://localhost:8080"
    rpc_timeout: float | None = None  # None = wait forever, like the browser client

    # Share links are built from this (e.g. "{public_url}#/club/{id}/join")
    public_url: str = "http://localhost:3000/"

    # Persistence (None = in-memory only)
    storage_path: str | Path | None = None
    club_cache_limit: int | None = 25  # None = unbounded move-to-front list

    # Calendar downloads
    downloads_dir: str | Path = "."

    # Logging
    debug: bool = False
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.club_cache_limit is not None and self.club_cache_limit <= 0:
            msg = f"club_cache_limit must be positive or None, got {self.club_cache_limit!r}"
            raise ConfigurationError(msg)
        if self.rpc_timeout is not None and self.rpc_timeout <= 0:
            msg = f"rpc_timeout must be positive or None, got {self.rpc_timeout!r}"
            raise ConfigurationError(msg)

    @property
    def share_base(self) -> str:
        """Public URL with exactly one trailing slash."""
        return self.public_url.rstrip("/") + "/"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> ClientConfig:
        """Build a config from ``WATCHCLUB_*`` environment variables.

        Recognised: ``API_URL``, ``PUBLIC_URL``, ``STORAGE_PATH``,
        ``CLUB_CACHE_LIMIT``, ``RPC_TIMEOUT``, ``DOWNLOADS_DIR``,
        ``LOG_LEVEL``, ``DEBUG``. Keyword overrides win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        def _get(name: str) -> str | None:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or not raw.strip():
                return None
            return raw.strip()

        if (api_url := _get("API_URL")) is not None:
            values["api_url"] = api_url
        if (public_url := _get("PUBLIC_URL")) is not None:
            values["public_url"] = public_url
        if (storage_path := _get("STORAGE_PATH")) is not None:
            values["storage_path"] = storage_path
        if (downloads_dir := _get("DOWNLOADS_DIR")) is not None:
            values["downloads_dir"] = downloads_dir
        if (log_level := _get("LOG_LEVEL")) is not None:
            values["log_level"] = log_level.lower()
        if (debug := _get("DEBUG")) is not None:
            values["debug"] = debug.lower() in ("1", "true", "yes", "on")

        if (limit := _get("CLUB_CACHE_LIMIT")) is not None:
            if limit.lower() in ("none", "unbounded"):
                values["club_cache_limit"] = None
            else:
                try:
                    values["club_cache_limit"] = int(limit)
                except ValueError:
                    msg = f"{ENV_PREFIX}CLUB_CACHE_LIMIT must be an integer, got {limit!r}"
                    raise ConfigurationError(msg) from None

        if (timeout := _get("RPC_TIMEOUT")) is not None:
            try:
                values["rpc_timeout"] = float(timeout)
            except ValueError:
                msg = f"{ENV_PREFIX}RPC_TIMEOUT must be a number, got {timeout!r}"
                raise ConfigurationError(msg) from None

        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
