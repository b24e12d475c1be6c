"""Verify that the calendar gateway's environment configuration is usable.

Two checks run, in order:

1. ``AppSettings`` is loaded from the given ``.env`` file, reporting missing
   or malformed OAuth client settings before the server starts failing on
   ``/initialize``.
2. The configured token store location must be writable, since the OAuth
   callback persists the token there.

Example usage::

    python -m scripts.check_env --env-file /srv/calendar/.env
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from calendar_gateway.core.config import AppSettings, _load_env_file

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_STORAGE_ERROR = 4
EXIT_RUNTIME_ERROR = 5


def _load_settings(env_file: Path) -> AppSettings:
    """Load settings from ``env_file``; raises ``ValidationError`` on bad values."""
    _load_env_file(str(env_file))
    return AppSettings(_env_file=str(env_file))  # type: ignore[call-arg]


def _token_location(settings: AppSettings) -> Path:
    storage = settings.storage
    if storage.backend == "sqlite":
        return Path(storage.db_path)
    return Path(storage.token_path)


def _check_storage(settings: AppSettings) -> int:
    """The nearest existing ancestor of the token location must be writable."""
    location = _token_location(settings)
    existing = location.parent
    while not existing.exists() and existing != existing.parent:
        existing = existing.parent
    if not os.access(existing, os.W_OK):
        print(
            f"Token store location {location} is not writable "
            f"({settings.storage.backend} backend).",
            file=sys.stderr,
        )
        return EXIT_STORAGE_ERROR
    print(f"Token store: {settings.storage.backend} at {location}")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate calendar gateway settings and the token store location."
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        type=Path,
        help="Path to the environment file (default: .env in the repo root).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    env_file: Path = _build_parser().parse_args(argv).env_file

    if not env_file.exists():
        print(
            f"Environment file {env_file} does not exist. "
            "Ensure the path is correct or create it before running this tool.",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    try:
        settings = _load_settings(env_file)
    except ValidationError as exc:
        print(
            "Settings validation failed. Missing or invalid values detected:\n"
            f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_VALIDATION_ERROR

    return _check_storage(settings)


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
