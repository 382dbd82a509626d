from __future__ import annotations

from dataclasses import dataclass, field

KEY_VISIBLE_CHARS = 4


@dataclass
class Redactor:
    enabled: bool = True
    _address_map: dict[int, int] = field(default_factory=dict)
    _address_counter: int = 0

    def redact_key(self, key: str | None) -> str:
        if key is None:
            return ""
        if not self.enabled:
            return key
        visible = key[:KEY_VISIBLE_CHARS] if len(key) > KEY_VISIBLE_CHARS else ""
        return visible + "x" * (len(key) - len(visible))

    def redact_address(self, address: int) -> str:
        if not self.enabled:
            return str(address)
        counter = self._address_map.get(address)
        if counter is None:
            self._address_counter += 1
            counter = self._address_counter
            self._address_map[address] = counter
        return f"#{counter:02d}"
