from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from .common import SnapshotOption, build_registry, load_settings_or_exit


def register(app: typer.Typer) -> None:
    @app.command()
    def scenes(snapshot: SnapshotOption = None) -> None:
        """List scenes."""
        settings = load_settings_or_exit()
        registry = build_registry(settings, snapshot)
        console = Console()

        scene_devices = registry.get_all_scene_devices()
        if not scene_devices:
            console.print("No scenes found.")
            return

        table = Table()
        table.add_column("Scene", style="cyan")
        table.add_column("Name", style="green")

        for scene in scene_devices:
            table.add_row(scene.unique_id, scene.name)

        console.print(table)
