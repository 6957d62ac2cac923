"""
Pytest configuration and shared fixtures.
"""

import json
from unittest.mock import MagicMock

import pytest

from chat_terminal.adapters.files.virtual_fs_adapter import VirtualFileSystemAdapter
from chat_terminal.adapters.storage.memory_storage_adapter import InMemoryStorageAdapter
from chat_terminal.container import DependencyContainer
from chat_terminal.use_cases.commands.command_dispatcher import CommandDispatcher


def chat_content(title, messages):
    """Serialize a conversation the way ``.chat`` files hold it."""
    return json.dumps(
        {
            "title": title,
            "messages": [{"role": role, "content": text} for role, text in messages],
        }
    )


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def storage():
    """In-memory storage shared by the filesystem fixtures."""
    return InMemoryStorageAdapter()


@pytest.fixture
def file_system(storage, mock_logger):
    """
    Create an empty virtual filesystem (root only).

    Returns:
        VirtualFileSystemAdapter backed by in-memory storage
    """
    return VirtualFileSystemAdapter(storage, logger=mock_logger)


@pytest.fixture
def populated_file_system(file_system):
    """
    Create a filesystem holding a small project tree:

        /projects/web/nextjs.chat
        /projects/web/notes.txt
        /projects/ai/llm.chat
        /projects/empty/
        /readme.txt
    """
    file_system.mkdir("/projects")
    file_system.mkdir("/projects/web")
    file_system.mkdir("/projects/ai")
    file_system.mkdir("/projects/empty")
    file_system.write_file(
        "/projects/web/nextjs.chat",
        chat_content(
            "Next.js Application",
            [
                ("user", "How do I create a Next.js app?"),
                ("assistant", "Use create-next-app."),
            ],
        ),
    )
    file_system.write_file("/projects/web/notes.txt", "remember the milk")
    file_system.write_file(
        "/projects/ai/llm.chat",
        chat_content("LLM Models", [("user", "Which models exist?")]),
    )
    file_system.write_file("/readme.txt", "hello")
    return file_system


@pytest.fixture
def dispatcher(populated_file_system, mock_logger):
    """
    Create a dispatcher without ANSI colours over the populated filesystem.

    Returns:
        CommandDispatcher instance
    """
    return CommandDispatcher(populated_file_system, color=False, logger=mock_logger)


@pytest.fixture
def dependency_container(mock_logger, storage):
    """
    Create a dependency container with in-memory storage for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    container.use_storage(storage)
    return container
