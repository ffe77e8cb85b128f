"""
Toolkit configuration.

Settings come from an optional JSON config file, then environment
variables, which take precedence over the file.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from records_toolkit.tracker.store import DEFAULT_STORAGE_KEY

ENV_PREFIX = "RECORDS_TOOLKIT_"


@dataclass
class ToolkitConfig:
    """Global toolkit settings.

    Attributes:
        db_url: SQLAlchemy URL of the database holding the request blob.
        storage_key: Key the request collection is stored under.
        log_level: Logging level name (DEBUG, INFO, WARNING, ...).
        log_file: Optional path of a log file, in addition to stderr.
    """

    db_url: str = "sqlite:///records_toolkit.db"
    storage_key: str = DEFAULT_STORAGE_KEY
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def load_config(config_path: Optional[str | Path] = None) -> ToolkitConfig:
    """Load a ToolkitConfig from a JSON file and the environment.

    Args:
        config_path: Optional path to a JSON file with any of the
                     ToolkitConfig attribute names as keys.

    Returns:
        A fully populated ToolkitConfig instance.

    Raises:
        FileNotFoundError: If config_path is given and does not exist.
        json.JSONDecodeError: If the JSON is malformed.
    """
    raw: dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)

    config = ToolkitConfig(
        db_url=raw.get("db_url", ToolkitConfig.db_url),
        storage_key=raw.get("storage_key", ToolkitConfig.storage_key),
        log_level=raw.get("log_level", ToolkitConfig.log_level),
        log_file=raw.get("log_file"),
    )

    # --- Environment overrides ---
    config.db_url = os.environ.get(f"{ENV_PREFIX}DB", config.db_url)
    config.storage_key = os.environ.get(f"{ENV_PREFIX}STORAGE_KEY", config.storage_key)
    config.log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", config.log_level)
    config.log_file = os.environ.get(f"{ENV_PREFIX}LOG_FILE", config.log_file)
    return config
