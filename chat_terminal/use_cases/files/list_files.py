"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from chat_terminal.entities.node import NodeInfo
from chat_terminal.exceptions import FileSystemError
from chat_terminal.ports.files.file_system_port import FileSystemPort


class ListFilesUseCase:
    """Use case for listing a directory, directories first then by name."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Filesystem to list from
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: Optional[str] = None) -> list[NodeInfo]:
        """
        List the entries of a directory.

        Args:
            directory: Path of the directory; the current directory when omitted

        Returns:
            NodeInfo entries, directories first, each group sorted by name

        Raises:
            FileSystemError: If listing fails
        """
        target = directory or self._file_system.pwd()
        try:
            self._logger.debug(f"Listing directory: {target}")
            entries = self._file_system.ls(directory)
            return sorted(entries, key=lambda entry: (not entry.is_dir, entry.name))
        except FileSystemError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileSystemError(f"Failed to list {target}: {str(e)}")
