"""Data models for plejdreg."""

from plejdreg.models.devices import (
    OutputDevice,
    PhysicalDevice,
    SceneDevice,
    unique_output_id,
)
from plejdreg.models.site import ApiSite, PlejdMesh, SiteSnapshot

__all__ = [
    "ApiSite",
    "OutputDevice",
    "PhysicalDevice",
    "PlejdMesh",
    "SceneDevice",
    "SiteSnapshot",
    "unique_output_id",
]
