"""
JSON file storage adapter persisting blobs to a single file on disk.
"""

import json
import logging
import os
from typing import Optional

from typing_extensions import override

from chat_terminal.exceptions import StorageError
from chat_terminal.ports.storage.storage_port import StoragePort


class JsonFileStorageAdapter(StoragePort):
    """
    Storage port keeping every key in one JSON object on disk.

    The file is read in full on each access and rewritten in full on each
    write; it is created, along with its parent directories, on first write.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the adapter.

        Args:
            path: Location of the JSON file
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.path = os.path.abspath(os.path.expanduser(path))
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _read_all(self) -> dict[str, str]:
        """
        Read the whole key/value object from disk.

        Returns:
            Mapping of keys to stored blobs (empty if the file does not exist)

        Raises:
            StorageError: If the file cannot be read or is not a JSON object
        """
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read storage file {self.path}: {e}")
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not hold a JSON object")
        return data

    @override
    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Stored value for key '{key}' is not a string")
        return value

    @override
    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except StorageError as e:
            self._logger.warning(f"Discarding unreadable storage file: {e}")
            items = {}
        items[key] = value
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            tmp_path = f"{self.path}.tmp"
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write storage file {self.path}: {e}")
        self._logger.debug(f"Wrote key '{key}' to {self.path}")
