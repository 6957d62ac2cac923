"""
Filesystem port interface defining the contract for the virtual filesystem.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_terminal.entities.node import NodeInfo


class FileSystemPort(ABC):
    """Port interface for virtual filesystem operations."""

    @abstractmethod
    def pwd(self) -> str:
        """Return the absolute path of the current directory."""
        pass

    @abstractmethod
    def cd(self, path: str) -> str:
        """
        Change the current directory.

        Args:
            path: Absolute or relative path of the target directory

        Returns:
            The new absolute, normalized current directory

        Raises:
            NotFoundError: If nothing exists at the path
            NotDirectoryError: If the path names a file
        """
        pass

    @abstractmethod
    def ls(self, path: Optional[str] = None) -> list[NodeInfo]:
        """
        List the immediate children of a directory.

        Args:
            path: Directory to list; the current directory when omitted

        Returns:
            List of NodeInfo descriptors (unordered)

        Raises:
            NotFoundError: If nothing exists at the path
            NotDirectoryError: If the path names a file
        """
        pass

    @abstractmethod
    def mkdir(self, path: str) -> None:
        """
        Create an empty directory.

        Raises:
            InvalidNameError: If the final path segment is empty
            NotFoundError: If the parent directory does not exist
            NotDirectoryError: If the parent is a file
            AlreadyExistsError: If a sibling with the same name exists
        """
        pass

    @abstractmethod
    def rm(self, path: str, recursive: bool = False) -> None:
        """
        Remove a file or directory.

        Raises:
            ForbiddenError: If the path is the root directory
            NotFoundError: If nothing exists at the path
            DirectoryNotEmptyError: If the directory has children and recursive is False
        """
        pass

    @abstractmethod
    def write_file(self, path: str, content: str) -> None:
        """
        Create or replace a file.

        Any node already holding the name is replaced, directories included.

        Raises:
            InvalidNameError: If the final path segment is empty
            NotFoundError: If the parent directory does not exist
            NotDirectoryError: If the parent is a file
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> str:
        """
        Read the content of a file.

        Raises:
            NotFoundError: If nothing exists at the path
            NotFileError: If the path names a directory
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Report whether a node exists at the path. Never raises."""
        pass

    @abstractmethod
    async def save_to_storage(self) -> None:
        """
        Persist the whole tree as a single blob.

        Raises:
            StorageError: If the storage cannot be written
        """
        pass

    @abstractmethod
    async def load_from_storage(self) -> bool:
        """
        Replace the whole tree with the persisted blob.

        Returns:
            True if a blob was loaded, False if nothing was stored

        Raises:
            Exception: The underlying storage or parsing failure, unmodified
        """
        pass
