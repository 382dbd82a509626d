"""Tests for snapshot loading."""

from __future__ import annotations

import json

import pytest
import yaml

from plejdreg.core import DeviceRegistry, load_snapshot, populate_registry
from plejdreg.models import SceneDevice

SNAPSHOT = {
    "site": {"plejdMesh": {"cryptoKey": "0123456789abcdef"}, "title": "Home"},
    "devices": [{"device_id": "AA:BB", "title": "DIM-01", "firmware": "1.2"}],
    "outputs": [
        {
            "device_id": "AA:BB",
            "output_index": 1,
            "name": "Kitchen Light",
            "room_id": "room1",
            "ble_output_address": 42,
            "dimmable": True,
        },
        {
            "unique_id": "AA:BB_2",
            "device_id": "AA:BB",
            "output_index": 2,
            "name": "Hidden Relay",
            "room_id": "room1",
            "ble_output_address": 43,
            "hidden_from_room_list": True,
        },
    ],
    "scenes": [{"unique_id": "scene_1", "name": "Evening", "scene_id": 3}],
}


def test_load_yaml_snapshot(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.safe_dump(SNAPSHOT))

    snapshot = load_snapshot(path)

    assert snapshot.site is not None
    assert snapshot.site.plejd_mesh.crypto_key == "0123456789abcdef"
    assert [o.unique_id for o in snapshot.outputs] == ["AA:BB_1", "AA:BB_2"]
    assert snapshot.devices[0].model_extra == {"firmware": "1.2"}


def test_load_json_snapshot(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT))

    snapshot = load_snapshot(path)

    assert len(snapshot.outputs) == 2
    assert snapshot.scenes[0].name == "Evening"


def test_empty_snapshot(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text("")

    snapshot = load_snapshot(path)

    assert snapshot.site is None
    assert snapshot.outputs == []


def test_missing_snapshot(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_snapshot(tmp_path / "missing.yaml")


def test_invalid_yaml_snapshot(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text("outputs: [unclosed")

    with pytest.raises(ValueError, match="Invalid snapshot file"):
        load_snapshot(path)


def test_snapshot_output_without_key_fields(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({"outputs": [{"name": "Orphan"}]}))

    with pytest.raises(ValueError, match="Invalid snapshot file"):
        load_snapshot(path)


def test_populate_registry(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.safe_dump(SNAPSHOT))

    registry = populate_registry(DeviceRegistry(), load_snapshot(path))

    assert registry.crypto_key == "0123456789abcdef"
    assert registry.get_physical_device("AA:BB").title == "DIM-01"
    assert [o.unique_id for o in registry.get_all_output_devices()] == ["AA:BB_1"]
    assert registry.get_output_device("AA:BB_2") is None
    assert registry.get_output_device_ids_by_room_id("room1") == ["AA:BB_1"]
    assert registry.get_scene_name("scene_1") == "Evening"


def test_populate_registry_replaces_previous_scan(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.safe_dump(SNAPSHOT))
    registry = DeviceRegistry()
    registry.add_scene(SceneDevice(unique_id="stale", name="Stale"))

    populate_registry(registry, load_snapshot(path))

    assert registry.get_scene("stale") is None
    assert len(registry.get_all_scene_devices()) == 1


def test_snapshot_path_is_directory(tmp_path):
    with pytest.raises(ValueError, match="Invalid snapshot file"):
        load_snapshot(tmp_path)


def test_numeric_serials_are_read_as_strings(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(
        "devices:\n"
        "  - device_id: 123456\n"
        "outputs:\n"
        "  - device_id: 123456\n"
        "    output_index: 1\n"
        "    name: Porch\n"
        "    room_id: 7\n"
        "    ble_output_address: 9\n"
        "scenes:\n"
        "  - unique_id: 3\n"
        "    name: Evening\n"
    )

    snapshot = load_snapshot(path)

    assert snapshot.devices[0].device_id == "123456"
    assert snapshot.outputs[0].unique_id == "123456_1"
    assert snapshot.outputs[0].room_id == "7"
    assert snapshot.scenes[0].unique_id == "3"


def test_snapshot_is_read_as_utf8(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_bytes(
        json.dumps(
            {"scenes": [{"unique_id": "s1", "name": "Kväll"}]}, ensure_ascii=False
        ).encode("utf-8")
    )

    assert load_snapshot(path).scenes[0].name == "Kväll"
