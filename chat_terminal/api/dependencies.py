"""
FastAPI dependency functions for retrieving session objects from the container.
"""

from chat_terminal.container import container
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.use_cases.commands.command_dispatcher import CommandDispatcher


def get_command_dispatcher() -> CommandDispatcher:
    """
    Get the command dispatcher from the container.

    Returns:
        CommandDispatcher: The session's command dispatcher
    """
    return container.get_command_dispatcher()


def get_file_system() -> FileSystemPort:
    """
    Get the virtual filesystem from the container.

    Returns:
        FileSystemPort: The session's filesystem
    """
    return container.get_file_system()
