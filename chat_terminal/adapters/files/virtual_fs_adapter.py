"""
In-memory virtual filesystem adapter.
"""

import json
import logging
from typing import Optional

from typing_extensions import override

from chat_terminal.adapters.storage.memory_storage_adapter import InMemoryStorageAdapter
from chat_terminal.entities.node import ROOT_PATH, FileSystemNode, NodeInfo
from chat_terminal.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    ForbiddenError,
    InvalidNameError,
    NotDirectoryError,
    NotFileError,
    NotFoundError,
    StorageError,
)
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.ports.storage.storage_port import StoragePort

DEFAULT_STORAGE_KEY = "chatgpt-terminal-fs"


class VirtualFileSystemAdapter(FileSystemPort):
    """
    Tree of named nodes held in memory, with a current-directory cursor.

    Paths are resolved lexically: relative paths are joined onto the current
    directory, ``.`` segments are dropped and ``..`` pops one segment (never
    above the root). The tree can be saved to and loaded from a storage port
    as one JSON blob.
    """

    def __init__(
        self,
        storage: Optional[StoragePort] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize an empty filesystem holding only the root directory.

        Args:
            storage: Storage used by save/load. Defaults to an in-memory store.
            storage_key: Key the serialized tree is stored under
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._storage: StoragePort = storage or InMemoryStorageAdapter()
        self._storage_key = storage_key
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._root = FileSystemNode.directory(ROOT_PATH)
        self._current_directory = ROOT_PATH

    # ------------------------- path helpers -------------------------
    @staticmethod
    def normalize_path(path: str) -> str:
        """Collapse empty, ``.`` and ``..`` segments of an absolute path."""
        result: list[str] = []
        for part in path.split("/"):
            if not part or part == ".":
                continue
            if part == "..":
                if result:
                    result.pop()
                continue
            result.append(part)
        return ROOT_PATH + "/".join(result)

    def resolve_path(self, path: str) -> str:
        """Resolve a path against the current directory and normalize it."""
        if not path:
            return self._current_directory
        if path.startswith("/"):
            return self.normalize_path(path)
        return self.normalize_path(f"{self._current_directory}/{path}")

    def _get_node(self, path: str) -> Optional[FileSystemNode]:
        current = self._root
        for part in path.split("/"):
            if not part:
                continue
            if not current.children or part not in current.children:
                return None
            current = current.children[part]
        return current

    def _split_parent(self, path: str) -> tuple[str, str]:
        resolved = self.resolve_path(path)
        if resolved == ROOT_PATH:
            return ROOT_PATH, ""
        parent_path, _, base_name = resolved.rpartition("/")
        return parent_path or ROOT_PATH, base_name

    def _leave_removed_directory(self, removed_path: str, parent_path: str) -> None:
        # The cursor must always name an existing directory.
        current = self._current_directory
        if current == removed_path or current.startswith(removed_path + "/"):
            self._current_directory = parent_path
            self._logger.debug(
                f"Current directory {current} was removed, moved to {parent_path}"
            )

    def _get_parent_directory(self, parent_path: str) -> FileSystemNode:
        parent = self._get_node(parent_path)
        if parent is None:
            raise NotFoundError(f"Parent directory not found: {parent_path}")
        if not parent.is_dir:
            raise NotDirectoryError(f"Not a directory: {parent_path}")
        if parent.children is None:
            parent.children = {}
        return parent

    # ------------------------- navigation -------------------------
    @override
    def pwd(self) -> str:
        return self._current_directory

    @override
    def cd(self, path: str) -> str:
        target_path = self.resolve_path(path)
        node = self._get_node(target_path)

        if node is None:
            raise NotFoundError(f"Directory not found: {path}")
        if not node.is_dir:
            raise NotDirectoryError(f"Not a directory: {path}")

        self._current_directory = target_path
        return target_path

    @override
    def ls(self, path: Optional[str] = None) -> list[NodeInfo]:
        target_path = self.resolve_path(path or "")
        node = self._get_node(target_path)

        if node is None:
            raise NotFoundError(f"Directory not found: {target_path}")
        if not node.is_dir:
            raise NotDirectoryError(f"Not a directory: {target_path}")

        return [child.to_info() for child in (node.children or {}).values()]

    # ------------------------- mutation -------------------------
    @override
    def mkdir(self, path: str) -> None:
        parent_path, dir_name = self._split_parent(path)
        if not dir_name:
            raise InvalidNameError("Invalid directory name")

        parent = self._get_parent_directory(parent_path)
        if dir_name in parent.children:
            raise AlreadyExistsError(f"Directory already exists: {path}")

        parent.children[dir_name] = FileSystemNode.directory(dir_name)
        self._logger.debug(f"Created directory {parent_path} -> {dir_name}")

    @override
    def rm(self, path: str, recursive: bool = False) -> None:
        target_path = self.resolve_path(path)
        if target_path == ROOT_PATH:
            raise ForbiddenError("Cannot remove root directory")

        parent_path, base_name = self._split_parent(target_path)
        parent = self._get_node(parent_path)
        if parent is None or not parent.children or base_name not in parent.children:
            raise NotFoundError(f"File or directory not found: {path}")

        node = parent.children[base_name]
        if node.is_dir and node.children and not recursive:
            raise DirectoryNotEmptyError(
                f"Directory not empty: {path}. Use -r flag to remove recursively."
            )

        del parent.children[base_name]
        self._leave_removed_directory(target_path, parent_path)
        self._logger.debug(f"Removed {target_path}")

    @override
    def write_file(self, path: str, content: str) -> None:
        parent_path, file_name = self._split_parent(path)
        if not file_name:
            raise InvalidNameError("Invalid file name")

        parent = self._get_parent_directory(parent_path)
        # Replaces whatever held the name, a directory included.
        replaced = parent.children.get(file_name)
        parent.children[file_name] = FileSystemNode.file(file_name, content)
        if replaced is not None and replaced.is_dir:
            self._leave_removed_directory(self.resolve_path(path), parent_path)

    @override
    def read_file(self, path: str) -> str:
        node = self._get_node(self.resolve_path(path))

        if node is None:
            raise NotFoundError(f"File not found: {path}")
        if node.is_dir:
            raise NotFileError(f"Not a file: {path}")

        return node.content or ""

    @override
    def exists(self, path: str) -> bool:
        return self._get_node(self.resolve_path(path)) is not None

    # ------------------------- persistence -------------------------
    @override
    async def save_to_storage(self) -> None:
        try:
            data = json.dumps(self._root.to_storage(), ensure_ascii=False)
            self._storage.set_item(self._storage_key, data)
            self._logger.info(f"Saved filesystem under key '{self._storage_key}'")
        except Exception as e:
            self._logger.error(f"Failed to save filesystem to storage: {e}")
            raise

    @override
    async def load_from_storage(self) -> bool:
        try:
            data = self._storage.get_item(self._storage_key)
            if data is None:
                self._logger.info(
                    f"No saved filesystem under key '{self._storage_key}'"
                )
                return False

            root = FileSystemNode.model_validate_json(data)
            if not root.is_dir:
                raise StorageError("Stored filesystem root is not a directory")

            self._root = root
            node = self._get_node(self._current_directory)
            if node is None or not node.is_dir:
                self._current_directory = ROOT_PATH
            self._logger.info(f"Loaded filesystem from key '{self._storage_key}'")
            return True
        except Exception as e:
            self._logger.error(f"Failed to load filesystem from storage: {e}")
            raise
