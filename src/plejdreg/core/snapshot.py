from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from plejdreg.core.registry import DeviceRegistry
from plejdreg.models import SiteSnapshot

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_snapshot(path: Path) -> SiteSnapshot:
    """Load a site snapshot from a JSON or YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(handle)
            else:
                text = handle.read()
                data = json.loads(text) if text.strip() else None
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ValueError(f"Invalid snapshot file: {path}\n{exc}") from exc

    try:
        return SiteSnapshot.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid snapshot file: {path}\n{exc}") from exc


def populate_registry(
    registry: DeviceRegistry, snapshot: SiteSnapshot
) -> DeviceRegistry:
    """Replace the registry's devices and scenes with those of a snapshot."""
    registry.clear_plejd_devices()
    registry.clear_scene_devices()

    if snapshot.site is not None:
        registry.set_api_site(snapshot.site)

    for device in snapshot.devices:
        registry.add_physical_device(device)
    for output in snapshot.outputs:
        registry.add_output_device(output)
    for scene in snapshot.scenes:
        registry.add_scene(scene)

    logger.info(
        "Loaded %d device(s), %d of %d output(s) and %d scene(s)",
        len(snapshot.devices),
        len(registry.get_all_output_devices()),
        len(snapshot.outputs),
        len(registry.get_all_scene_devices()),
    )
    return registry
