"""
Storage port interface for persisting serialized state under string keys.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StoragePort(ABC):
    """Port interface for a key/value blob store."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the blob stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored text, or None if nothing is stored under the key

        Raises:
            StorageError: If the storage cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a blob under a key, replacing any previous value.

        Args:
            key: Storage key
            value: Serialized text to store

        Raises:
            StorageError: If the storage cannot be written
        """
        pass
