"""Site records as delivered by the Plejd cloud API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from plejdreg.models.devices import (
    OutputDevice,
    PhysicalDevice,
    SceneDevice,
    unique_output_id,
)


class PlejdMesh(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    crypto_key: str = Field(alias="cryptoKey")


class ApiSite(BaseModel):
    """Site configuration. Only the mesh crypto key is read by the registry."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    plejd_mesh: PlejdMesh = Field(alias="plejdMesh")


class SiteSnapshot(BaseModel):
    """Parsed result of a mesh scan, ready to be fed into a registry."""

    model_config = ConfigDict(extra="forbid")

    site: ApiSite | None = None
    devices: list[PhysicalDevice] = Field(default_factory=list)
    outputs: list[OutputDevice] = Field(default_factory=list)
    scenes: list[SceneDevice] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _derive_output_ids(cls, data: Any) -> Any:
        # Outputs may omit unique_id; it follows from device id and index.
        if not isinstance(data, dict):
            return data
        outputs = data.get("outputs")
        if not isinstance(outputs, list):
            return data

        derived = []
        for output in outputs:
            if (
                isinstance(output, dict)
                and "unique_id" not in output
                and "device_id" in output
                and "output_index" in output
            ):
                output = {
                    **output,
                    "unique_id": unique_output_id(
                        output["device_id"], output["output_index"]
                    ),
                }
            derived.append(output)
        return {**data, "outputs": derived}
