"""Config stores holding the persisted session.

A store is anything with ``load() -> bytes`` and ``save(bytes)``; the
client never looks inside the bytes it gets back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from .errors import ConfigStoreError
from .telemetry import get_logger


@runtime_checkable
class ConfigStore(Protocol):
    """Load/save capability pair for the session blob."""

    def load(self) -> bytes:
        """Return previously saved bytes, or empty bytes."""
        ...

    def save(self, data: bytes) -> None:
        """Persist new session bytes."""
        ...


class MemoryConfigStore:
    """In-memory store, mostly for tests and short-lived scripts."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = data
        self.saves = 0

    def load(self) -> bytes:
        return self.data

    def save(self, data: bytes) -> None:
        self.data = data
        self.saves += 1


class FileConfigStore:
    """Session stored as a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> bytes:
        if not self.path.exists():
            return b""

        try:
            return self.path.read_bytes()
        except OSError as e:
            get_logger().warning("Couldn't read config file", path=str(self.path), error=str(e))
            return b""

    def save(self, data: bytes) -> None:
        try:
            self.path.write_bytes(data)
        except OSError as e:
            raise ConfigStoreError(f"Couldn't save config file {self.path}: {e}", cause=e) from e


class CallbackConfigStore:
    """Adapts a pair of plain callables to the store protocol."""

    def __init__(
        self,
        load: Callable[[], bytes | None],
        save: Callable[[bytes], None],
    ) -> None:
        self._load = load
        self._save = save

    def load(self) -> bytes:
        return self._load() or b""

    def save(self, data: bytes) -> None:
        self._save(data)
