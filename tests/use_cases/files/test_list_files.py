"""
Tests for the ListFilesUseCase.
"""

import pytest
from unittest.mock import MagicMock

from chat_terminal.entities.node import NodeInfo
from chat_terminal.exceptions import FileSystemError, NotFoundError
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.use_cases.files.list_files import ListFilesUseCase


class TestListFilesUseCase:
    """Test cases for the ListFilesUseCase."""

    def test_execute_sorts_directories_first(self, mock_logger):
        """Test that directories come first and each group is sorted by name."""
        # Create mock filesystem
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.ls.return_value = [
            NodeInfo(name="b.chat", type="file"),
            NodeInfo(name="A", type="directory"),
            NodeInfo(name="a.chat", type="file"),
            NodeInfo(name="C", type="directory"),
        ]

        # Create use case
        use_case = ListFilesUseCase(mock_fs, mock_logger)

        # Execute use case
        result = use_case.execute("/projects")

        # Verify result
        assert [entry.name for entry in result] == ["A", "C", "a.chat", "b.chat"]

        # Verify filesystem was called correctly
        mock_fs.ls.assert_called_once_with("/projects")

        # Verify logging
        mock_logger.debug.assert_any_call("Listing directory: /projects")

    def test_execute_defaults_to_current_directory(self, mock_logger):
        """Test execution without a directory lists the current one."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.pwd.return_value = "/home"
        mock_fs.ls.return_value = []

        use_case = ListFilesUseCase(mock_fs, mock_logger)
        result = use_case.execute()

        assert result == []
        mock_fs.ls.assert_called_once_with(None)
        mock_logger.debug.assert_any_call("Listing directory: /home")

    def test_execute_filesystem_error(self, mock_logger):
        """Test that filesystem errors propagate unchanged."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.ls.side_effect = NotFoundError("Directory not found: /missing")

        use_case = ListFilesUseCase(mock_fs, mock_logger)

        with pytest.raises(NotFoundError, match="Directory not found: /missing"):
            use_case.execute("/missing")

    def test_execute_unexpected_error(self, mock_logger):
        """Test that unexpected errors are wrapped in FileSystemError."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.ls.side_effect = RuntimeError("boom")

        use_case = ListFilesUseCase(mock_fs, mock_logger)

        with pytest.raises(FileSystemError, match="Failed to list /x: boom"):
            use_case.execute("/x")

        mock_logger.error.assert_called_once_with("Error listing directory: boom")

    def test_execute_on_virtual_filesystem(self, populated_file_system, mock_logger):
        """Test listing a real in-memory tree."""
        use_case = ListFilesUseCase(populated_file_system, mock_logger)

        result = use_case.execute("/")

        assert result == [
            NodeInfo(name="projects", type="directory"),
            NodeInfo(name="readme.txt", type="file"),
        ]
