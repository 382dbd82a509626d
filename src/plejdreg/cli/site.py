from __future__ import annotations

import typer
from rich.console import Console

from plejdreg.utils.redaction import Redactor

from .common import SnapshotOption, build_registry, load_settings_or_exit


def register(app: typer.Typer) -> None:
    @app.command()
    def site(
        snapshot: SnapshotOption = None,
        redact: bool = typer.Option(
            True, "--redact/--no-redact", help="Mask the crypto key"
        ),
    ) -> None:
        """Show site info and registry stats."""
        settings = load_settings_or_exit()
        registry = build_registry(settings, snapshot)
        console = Console()

        redactor = Redactor(enabled=settings.display.redact and redact)

        console.print("[bold]Site[/bold]\n")
        if registry.get_api_site() is None:
            console.print("No site information in snapshot")
        else:
            console.print(f"Crypto key: {redactor.redact_key(registry.crypto_key)}")

        console.print("\n[bold]Statistics[/bold]")
        console.print(f"Output devices: {len(registry.get_all_output_devices())}")
        console.print(f"Scenes: {len(registry.get_all_scene_devices())}")
