"""In-memory registry of mesh devices, outputs and scenes.

The registry is the single source of truth for the current mesh state.
Every lookup degrades to ``None`` for unknown keys; nothing here raises
for missing ids, hidden devices or stale state updates.
"""

from __future__ import annotations

import logging

from plejdreg.models import (
    ApiSite,
    OutputDevice,
    PhysicalDevice,
    SceneDevice,
    unique_output_id,
)

logger = logging.getLogger(__name__)


def get_unique_output_id(device_id: str, output_index: int | str) -> str:
    """Key of an output in the registry, e.g. ``"AA:BB_1"``."""
    return unique_output_id(device_id, output_index)


class DeviceRegistry:
    """Devices, outputs and scenes indexed by id, BLE address and room.

    Physical devices, outputs and their indexes are cleared together on a
    mesh rescan (``clear_plejd_devices``); scenes are cleared separately
    (``clear_scene_devices``). The site and its crypto key survive both.
    """

    def __init__(self) -> None:
        self._api_site: ApiSite | None = None
        self._crypto_key: str | None = None

        self._devices: dict[str, PhysicalDevice] = {}
        self._output_devices: dict[str, OutputDevice] = {}
        self._scene_devices: dict[str, SceneDevice] = {}

        self._output_ids_by_room_id: dict[str, list[str]] = {}
        self._output_id_by_ble_address: dict[int, str] = {}
        # Cleared with scenes but never populated by any registration.
        self._scene_id_by_ble_address: dict[int, str] = {}

    @property
    def crypto_key(self) -> str | None:
        """Mesh crypto key of the current site, set by ``set_api_site``."""
        return self._crypto_key

    # Mutation

    def add_physical_device(self, device: PhysicalDevice) -> None:
        self._devices[device.device_id] = device

    def add_output_device(self, output: OutputDevice) -> None:
        """Add or update an output. Hidden outputs are dropped."""
        if output.hidden_from_integrations or output.hidden_from_room_list:
            logger.debug(
                "Device %s is hidden and will not be included "
                "(hidden from room list: %s, hidden from integrations: %s)",
                output.name,
                output.hidden_from_room_list,
                output.hidden_from_integrations,
            )
            return

        self._output_devices = {**self._output_devices, output.unique_id: output}
        logger.debug(
            "Added/updated output device %s. %d output devices in total.",
            output.model_dump_json(),
            len(self._output_devices),
        )

        self._output_id_by_ble_address[output.ble_output_address] = output.unique_id

        room = self._output_ids_by_room_id.setdefault(output.room_id, [])
        if output.room_id != output.unique_id and output.unique_id not in room:
            room.append(output.unique_id)
            logger.debug("Added device to room %s: %s", output.room_id, room)

    def add_scene(self, scene: SceneDevice) -> None:
        self._scene_devices = {**self._scene_devices, scene.unique_id: scene}
        logger.debug(
            "Added/updated scene %s. %d scenes in total.",
            scene.model_dump_json(),
            len(self._scene_devices),
        )

    def clear_plejd_devices(self) -> None:
        self._devices = {}
        self._output_devices = {}
        self._output_ids_by_room_id = {}
        self._output_id_by_ble_address = {}

    def clear_scene_devices(self) -> None:
        self._scene_devices = {}
        self._scene_id_by_ble_address = {}

    def set_api_site(self, api_site: ApiSite) -> None:
        self._api_site = api_site
        self._crypto_key = api_site.plejd_mesh.crypto_key

    def set_output_state(
        self, unique_output_id: str, state: bool, dim: int | None = None
    ) -> None:
        """Update on/off state and, for dimmable outputs, the dim level.

        A falsy ``dim`` (including 0) leaves the stored level unchanged.
        """
        device = self.get_output_device(unique_output_id)
        if device is None:
            logger.warning(
                "Trying to set state for %s which is not in the list of known outputs.",
                unique_output_id,
            )
            return

        update: dict[str, bool | int] = {"state": state}
        if dim and device.dimmable:
            update["dim"] = dim

        updated = device.model_copy(update=update)
        self._output_devices = {**self._output_devices, unique_output_id: updated}

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Updated state: %s", updated.model_dump_json())

    # Queries

    def get_all_output_devices(self) -> list[OutputDevice]:
        return list(self._output_devices.values())

    def get_all_scene_devices(self) -> list[SceneDevice]:
        return list(self._scene_devices.values())

    def get_api_site(self) -> ApiSite | None:
        return self._api_site

    def get_output_device(self, unique_output_id: str) -> OutputDevice | None:
        return self._output_devices.get(unique_output_id)

    def get_output_device_by_ble_output_address(
        self, ble_output_address: int
    ) -> OutputDevice | None:
        unique_id = self._output_id_by_ble_address.get(ble_output_address)
        if unique_id is None:
            return None
        return self._output_devices.get(unique_id)

    def get_output_device_ids_by_room_id(self, room_id: str) -> list[str] | None:
        """Output ids in a room, or None if the room was never seen."""
        ids = self._output_ids_by_room_id.get(room_id)
        if ids is None:
            return None
        return list(ids)

    def get_output_device_name(self, unique_output_id: str) -> str | None:
        device = self._output_devices.get(unique_output_id)
        return device.name if device else None

    def get_physical_device(self, device_id: str) -> PhysicalDevice | None:
        return self._devices.get(device_id)

    def get_scene(self, scene_unique_id: str) -> SceneDevice | None:
        return self._scene_devices.get(scene_unique_id)

    def get_scene_by_ble_address(self, scene_ble_address: int) -> SceneDevice | None:
        scene_unique_id = self._scene_id_by_ble_address.get(scene_ble_address)
        if not scene_unique_id:
            return None
        return self._scene_devices.get(scene_unique_id)

    def get_scene_name(self, scene_unique_id: str) -> str | None:
        scene = self._scene_devices.get(scene_unique_id)
        return scene.name if scene else None

    def get_unique_output_id(self, device_id: str, output_index: int | str) -> str:
        return get_unique_output_id(device_id, output_index)
