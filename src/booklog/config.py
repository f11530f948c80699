# ABOUTME: Process-wide configuration for Booklog, built once at startup.
# ABOUTME: Reads BOOKLOG_* environment variables and falls back to sensible defaults.

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DB_PATH = Path.home() / ".booklog" / "books.db"
DEFAULT_OPENLIBRARY_URL = "https://openlibrary.org"
DEFAULT_COVERS_URL = "https://covers.openlibrary.org"
DEFAULT_PLACEHOLDER = "/images/no-cover.svg"
DEFAULT_LOOKUP_TIMEOUT = 5.0


@dataclass(frozen=True)
class BooklogConfig:
    """Read-only settings shared by the catalog, the cover resolver, and the CLI."""

    db_path: Path = DEFAULT_DB_PATH
    openlibrary_url: str = DEFAULT_OPENLIBRARY_URL
    covers_url: str = DEFAULT_COVERS_URL
    placeholder: str = DEFAULT_PLACEHOLDER
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BooklogConfig":
        """Build a config from BOOKLOG_* variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ValueError: If BOOKLOG_LOOKUP_TIMEOUT is not a positive number.
        """
        env = os.environ if environ is None else environ

        db = env.get("BOOKLOG_DB")
        timeout_raw = env.get("BOOKLOG_LOOKUP_TIMEOUT")
        timeout = DEFAULT_LOOKUP_TIMEOUT
        if timeout_raw:
            timeout = float(timeout_raw)
            if timeout <= 0:
                raise ValueError(f"BOOKLOG_LOOKUP_TIMEOUT must be positive, got {timeout_raw}")

        return cls(
            db_path=Path(db).expanduser() if db else DEFAULT_DB_PATH,
            openlibrary_url=env.get("BOOKLOG_OPENLIBRARY_URL", DEFAULT_OPENLIBRARY_URL).rstrip("/"),
            covers_url=env.get("BOOKLOG_COVERS_URL", DEFAULT_COVERS_URL).rstrip("/"),
            placeholder=env.get("BOOKLOG_PLACEHOLDER", DEFAULT_PLACEHOLDER),
            lookup_timeout=timeout,
        )
