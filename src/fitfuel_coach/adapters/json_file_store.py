"""JSON file-backed key/value store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from fitfuel_coach.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Single-device store keeping every key in one JSON document."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Write a value, rewriting the document atomically."""
        values = self._read()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(values, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable state file: %s", self.path)
            return {}
        if not isinstance(payload, dict):
            _logger.warning("Ignoring state file without an object: %s", self.path)
            return {}
        return payload
