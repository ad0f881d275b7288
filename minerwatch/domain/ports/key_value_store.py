"""Domain port for string-keyed durable storage."""

from __future__ import annotations

from typing import Optional, Protocol


class IKeyValueStore(Protocol):
    """Synchronous key/value store holding text values."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...

    def close(self) -> None:
        ...
