"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from chat_terminal.adapters.files.virtual_fs_adapter import VirtualFileSystemAdapter
from chat_terminal.adapters.history.mock_history_adapter import MockHistoryAdapter
from chat_terminal.adapters.storage.json_file_storage_adapter import (
    JsonFileStorageAdapter,
)
from chat_terminal.config.settings import settings
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.ports.history.history_source_port import HistorySourcePort
from chat_terminal.ports.storage.storage_port import StoragePort
from chat_terminal.use_cases.commands.command_dispatcher import CommandDispatcher
from chat_terminal.use_cases.files.list_files import ListFilesUseCase
from chat_terminal.use_cases.files.search_files import SearchFilesUseCase
from chat_terminal.use_cases.history.import_history import ImportHistoryUseCase
from chat_terminal.use_cases.session.bootstrap import SessionBootstrapUseCase


class DependencyContainer:
    """
    Container for managing the dependencies of one terminal session.
    """

    def __init__(self):
        self._instances = {}
        self._color: Optional[bool] = None
        self._logger = logging.getLogger(__name__)

    def get_storage(self) -> StoragePort:
        """
        Get storage adapter instance.

        Returns:
            StoragePort implementation
        """
        if "storage" not in self._instances:
            self._instances["storage"] = JsonFileStorageAdapter(
                settings.storage_path, self._logger
            )
        return self._instances["storage"]

    def use_storage(self, storage: StoragePort) -> None:
        """Replace the storage adapter; must be called before the filesystem is built."""
        self._instances["storage"] = storage

    def use_color(self, enabled: bool) -> None:
        """Override the colour setting; must be called before the dispatcher is built."""
        self._color = enabled

    def get_file_system(self) -> FileSystemPort:
        """
        Get the session's virtual filesystem.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = VirtualFileSystemAdapter(
                self.get_storage(), settings.storage_key, self._logger
            )
        return self._instances["file_system"]

    def get_history_source(self) -> HistorySourcePort:
        """
        Get conversation history source instance.

        Returns:
            HistorySourcePort implementation
        """
        if "history_source" not in self._instances:
            self._instances["history_source"] = MockHistoryAdapter(self._logger)
        return self._instances["history_source"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        if "list_files_use_case" not in self._instances:
            self._instances["list_files_use_case"] = ListFilesUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["list_files_use_case"]

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        if "search_files_use_case" not in self._instances:
            self._instances["search_files_use_case"] = SearchFilesUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["search_files_use_case"]

    def get_import_history_use_case(self) -> ImportHistoryUseCase:
        """
        Get import history use case with injected dependencies.

        Returns:
            Configured ImportHistoryUseCase
        """
        if "import_history_use_case" not in self._instances:
            self._instances["import_history_use_case"] = ImportHistoryUseCase(
                self.get_file_system(), self.get_history_source(), self._logger
            )
        return self._instances["import_history_use_case"]

    def get_bootstrap_use_case(self) -> SessionBootstrapUseCase:
        if "bootstrap_use_case" not in self._instances:
            self._instances["bootstrap_use_case"] = SessionBootstrapUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["bootstrap_use_case"]

    def get_command_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher, with the session's ``import`` command registered.

        Returns:
            Configured CommandDispatcher
        """
        if "command_dispatcher" not in self._instances:
            dispatcher = CommandDispatcher(
                self.get_file_system(),
                self.get_list_files_use_case(),
                self.get_search_files_use_case(),
                color=settings.terminal_color if self._color is None else self._color,
                logger=self._logger,
            )
            dispatcher.register_command(
                "import", self.get_import_history_use_case().handle_command
            )
            self._instances["command_dispatcher"] = dispatcher
        return self._instances["command_dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
        self._color = None


# Global container instance
container = DependencyContainer()
