from __future__ import annotations

from .registry import DeviceRegistry, get_unique_output_id
from .snapshot import load_snapshot, populate_registry

__all__ = [
    "DeviceRegistry",
    "get_unique_output_id",
    "load_snapshot",
    "populate_registry",
]
