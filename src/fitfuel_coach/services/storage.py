"""Key/value storage port."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Durable string storage keyed by name."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store for tests and ephemeral runs."""

    _values: dict[str, str]

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value in memory."""
        self._values[key] = value
