"""Device and scene records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def unique_output_id(device_id: str, output_index: int | str) -> str:
    return f"{device_id}_{output_index}"


class PhysicalDevice(BaseModel):
    """Physical mesh node. Metadata beyond the id is kept as-is."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    device_id: str
    title: str | None = None
    model: str | None = None


class OutputDevice(BaseModel):
    """Controllable output channel (relay, dimmer) of a physical device."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    unique_id: str
    device_id: str
    output_index: int
    name: str
    room_id: str
    ble_output_address: int
    type: str | None = None
    dimmable: bool = False
    hidden_from_integrations: bool = False
    hidden_from_room_list: bool = False
    state: bool = False
    dim: int = 0


class SceneDevice(BaseModel):
    """Named scene."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    unique_id: str
    name: str
    scene_id: int | None = None
