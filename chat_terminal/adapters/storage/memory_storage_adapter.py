"""
In-memory storage adapter, used for ephemeral sessions and tests.
"""

from typing import Optional

from typing_extensions import override

from chat_terminal.ports.storage.storage_port import StoragePort


class InMemoryStorageAdapter(StoragePort):
    """Storage port backed by a plain dictionary."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    @override
    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    @override
    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
