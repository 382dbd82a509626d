from __future__ import annotations

from .paths import (
    APP_NAME,
    CONFIG_FILENAME,
    SNAPSHOT_FILENAME,
    default_config_path,
    default_snapshot_path,
    expand_path,
)
from .settings import (
    CONFIG_ENV_VAR,
    DisplayConfig,
    Settings,
    SnapshotConfig,
    get_settings,
    load_settings,
    render_settings_toml,
    resolve_config_path,
    snapshot_path_from_settings,
    write_settings,
)

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "DisplayConfig",
    "SNAPSHOT_FILENAME",
    "Settings",
    "SnapshotConfig",
    "default_config_path",
    "default_snapshot_path",
    "expand_path",
    "get_settings",
    "load_settings",
    "render_settings_toml",
    "resolve_config_path",
    "snapshot_path_from_settings",
    "write_settings",
]
