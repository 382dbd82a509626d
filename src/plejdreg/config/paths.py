from __future__ import annotations

import os
from pathlib import Path

import platformdirs

APP_NAME = "plejdreg"
CONFIG_FILENAME = "config.toml"
SNAPSHOT_FILENAME = "snapshot.yaml"


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME)) / CONFIG_FILENAME


def default_snapshot_path() -> Path:
    return Path(platformdirs.user_data_dir(APP_NAME)) / SNAPSHOT_FILENAME


def expand_path(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value)))
