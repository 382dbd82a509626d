"""plejdreg - in-memory registry of Plejd mesh devices, outputs and scenes."""

from __future__ import annotations

from importlib.metadata import version

from .config import Settings, get_settings
from .core import (
    DeviceRegistry,
    get_unique_output_id,
    load_snapshot,
    populate_registry,
)
from .models import (
    ApiSite,
    OutputDevice,
    PhysicalDevice,
    PlejdMesh,
    SceneDevice,
    SiteSnapshot,
)

__all__ = [
    "ApiSite",
    "DeviceRegistry",
    "OutputDevice",
    "PhysicalDevice",
    "PlejdMesh",
    "SceneDevice",
    "Settings",
    "SiteSnapshot",
    "__version__",
    "get_settings",
    "get_unique_output_id",
    "load_snapshot",
    "populate_registry",
]

__version__ = version("plejdreg")
