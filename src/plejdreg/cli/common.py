from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from plejdreg.config import (
    Settings,
    get_settings,
    resolve_config_path,
    snapshot_path_from_settings,
)
from plejdreg.core import DeviceRegistry, load_snapshot, populate_registry

SnapshotOption = Annotated[
    Path | None,
    typer.Option("--snapshot", "-s", help="Snapshot file (overrides config)"),
]


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_registry(settings: Settings, snapshot: Path | None = None) -> DeviceRegistry:
    path = snapshot or snapshot_path_from_settings(settings)
    try:
        loaded = load_snapshot(path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    return populate_registry(DeviceRegistry(), loaded)
