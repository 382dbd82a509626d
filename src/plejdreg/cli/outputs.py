from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from plejdreg.models import OutputDevice
from plejdreg.utils.redaction import Redactor

from .common import SnapshotOption, build_registry, load_settings_or_exit


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def register(app: typer.Typer) -> None:
    @app.command()
    def outputs(
        room: str | None = typer.Option(None, "--room", "-r", help="Only this room"),
        snapshot: SnapshotOption = None,
    ) -> None:
        """List visible output devices."""
        settings = load_settings_or_exit()
        registry = build_registry(settings, snapshot)
        console = Console()

        devices: list[OutputDevice]
        if room is None:
            devices = registry.get_all_output_devices()
        else:
            ids = registry.get_output_device_ids_by_room_id(room)
            if ids is None:
                console.print(f"[yellow]![/yellow] Room '{room}' not found")
                raise typer.Exit(1)
            devices = [
                device
                for device in (registry.get_output_device(uid) for uid in ids)
                if device is not None
            ]

        if not devices:
            console.print("No output devices found.")
            return

        redactor = Redactor(enabled=settings.display.redact)
        table = Table()
        table.add_column("Output", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Room", style="yellow")
        table.add_column("BLE Address")
        table.add_column("Dimmable")
        table.add_column("State")
        table.add_column("Dim")

        for device in devices:
            table.add_row(
                device.unique_id,
                device.name,
                device.room_id,
                redactor.redact_address(device.ble_output_address),
                _yes_no(device.dimmable),
                "on" if device.state else "off",
                str(device.dim) if device.dimmable else "",
            )

        console.print(table)
        console.print(f"\n[green]{len(devices)} output device(s)[/green]")

    @app.command()
    def rooms(snapshot: SnapshotOption = None) -> None:
        """List rooms and the outputs they contain."""
        settings = load_settings_or_exit()
        registry = build_registry(settings, snapshot)
        console = Console()

        room_ids: list[str] = []
        for device in registry.get_all_output_devices():
            if device.room_id not in room_ids:
                room_ids.append(device.room_id)

        table = Table()
        table.add_column("Room", style="yellow")
        table.add_column("Outputs", style="green")

        for room_id in room_ids:
            ids = registry.get_output_device_ids_by_room_id(room_id) or []
            names = [registry.get_output_device_name(uid) or uid for uid in ids]
            table.add_row(room_id, ", ".join(names))

        console.print(table)

    @app.command()
    def lookup(
        address: int = typer.Argument(..., help="BLE output address"),
        snapshot: SnapshotOption = None,
    ) -> None:
        """Resolve a BLE output address to its output device."""
        settings = load_settings_or_exit()
        registry = build_registry(settings, snapshot)
        console = Console()

        device = registry.get_output_device_by_ble_output_address(address)
        if device is None:
            console.print(f"[yellow]![/yellow] No output at BLE address {address}")
            raise typer.Exit(1)

        console.print(f"{device.unique_id}: {device.name} (room {device.room_id})")
