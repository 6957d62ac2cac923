"""
Use case for searching the whole tree for node names.
"""

import logging
from typing import Optional

from chat_terminal.entities.node import ROOT_PATH
from chat_terminal.exceptions import FileSystemError
from chat_terminal.ports.files.file_system_port import FileSystemPort


class SearchFilesUseCase:
    """Use case for finding nodes whose name contains a pattern."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Filesystem to search
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, pattern: str, directory: str = ROOT_PATH) -> list[str]:
        """
        Recursively collect the paths of nodes whose name contains the pattern.

        Matching is a case-sensitive substring test on the node name. Directories
        that cannot be listed are skipped.

        Args:
            pattern: Substring to look for
            directory: Absolute path to start from (default: the root)

        Returns:
            Absolute paths of every matching file and directory
        """
        self._logger.debug(f"Searching for '{pattern}' under {directory}")
        results: list[str] = []
        self._search_directory(directory, pattern, results)
        self._logger.debug(f"Found {len(results)} nodes matching '{pattern}'")
        return results

    def _search_directory(self, path: str, pattern: str, results: list[str]) -> None:
        try:
            entries = self._file_system.ls(path)
        except FileSystemError as e:
            self._logger.warning(f"Skipping {path}: {e}")
            return

        for entry in entries:
            entry_path = f"/{entry.name}" if path == ROOT_PATH else f"{path}/{entry.name}"
            if pattern in entry.name:
                results.append(entry_path)
            if entry.is_dir:
                self._search_directory(entry_path, pattern, results)
