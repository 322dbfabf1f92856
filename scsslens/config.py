"""Settings and logging setup.

Config file format (JSON, every field optional):
    {
        "include": "**/*.scss",
        "exclude": [".git", "node_modules"],
        "log_level": "WARNING"
    }
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import msgspec

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(msgspec.Struct, forbid_unknown_fields=True):
    """Indexing and logging settings."""

    include: str = "**/*.scss"
    exclude: list[str] = msgspec.field(default_factory=lambda: [".git", "node_modules"])
    log_level: str = "WARNING"


_decoder = msgspec.json.Decoder(Settings)


def load_settings(path: Optional[str | Path] = None, **overrides) -> Settings:
    """Load settings from a JSON config file, then apply non-None overrides.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the config file is not a valid settings object.
    """
    settings = Settings()
    if path is not None:
        with open(path, "rb") as f:
            raw = f.read()
        try:
            settings = _decoder.decode(raw)
        except msgspec.DecodeError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e

    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        settings = msgspec.structs.replace(settings, **changes)
    return settings


def configure_logging(level: str | int = "WARNING") -> None:
    """Send log records to stderr; stdout is reserved for the protocol."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING

    logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
