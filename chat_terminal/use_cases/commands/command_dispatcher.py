"""
Command dispatcher interpreting shell-like input against the virtual filesystem.

Built-in commands:
- help, ls, cd, pwd, mkdir, rm, cat, touch, clear, echo, find, open

Extra commands (e.g. ``import``) are registered at runtime by the session.
A command line is split on whitespace; there is no quoting or escaping, so
names containing spaces cannot be addressed.
"""

import inspect
import logging
from typing import Awaitable, Callable, Optional, Union

from chat_terminal.entities.conversation import Conversation, is_chat_file
from chat_terminal.exceptions import FileSystemError
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.use_cases.files.list_files import ListFilesUseCase
from chat_terminal.use_cases.files.search_files import SearchFilesUseCase
from chat_terminal.utils.ansi import CLEAR_SENTINEL, AnsiStyle

CommandHandler = Callable[[list[str]], Union[str, Awaitable[str]]]
DirectoryChangeCallback = Callable[[str], None]

HELP_TEXT = """Available commands:
  help                 Show this help message
  ls [path]            List directory contents
  cd <path>            Change directory
  pwd                  Print working directory
  mkdir <path>         Create directory
  rm [-r] <path>       Remove file or directory
  cat <file>           Display file contents
  touch <file>         Create empty file
  clear                Clear the terminal
  echo <text>          Display text
  find <pattern>       Find files matching pattern
  open <file>          Open chat file in viewer
  import               Import ChatGPT history"""


class CommandDispatcher:
    """Maps command names to handlers and runs command lines."""

    def __init__(
        self,
        file_system: FileSystemPort,
        list_files_uc: Optional[ListFilesUseCase] = None,
        search_files_uc: Optional[SearchFilesUseCase] = None,
        color: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher with the built-in commands.

        Args:
            file_system: Filesystem the commands operate on
            list_files_uc: Use case backing ``ls`` (built from file_system if None)
            search_files_uc: Use case backing ``find`` (built from file_system if None)
            color: Whether output carries ANSI colour sequences
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._list_files_uc = list_files_uc or ListFilesUseCase(
            file_system, self._logger
        )
        self._search_files_uc = search_files_uc or SearchFilesUseCase(
            file_system, self._logger
        )
        self._style = AnsiStyle(color)
        self._dir_change_callbacks: list[DirectoryChangeCallback] = []
        self._commands: dict[str, CommandHandler] = {
            "help": self._handle_help,
            "ls": self._handle_ls,
            "cd": self._handle_cd,
            "pwd": self._handle_pwd,
            "mkdir": self._handle_mkdir,
            "rm": self._handle_rm,
            "cat": self._handle_cat,
            "touch": self._handle_touch,
            "clear": self._handle_clear,
            "echo": self._handle_echo,
            "find": self._handle_find,
            "open": self._handle_open,
        }

    @property
    def commands(self) -> list[str]:
        """Names of every registered command."""
        return list(self._commands)

    async def process_command(self, command_line: str) -> str:
        """
        Run one command line.

        Args:
            command_line: Raw input line

        Returns:
            Output text; never raises
        """
        parts = command_line.strip().split()
        if not parts:
            return ""

        command, args = parts[0], parts[1:]
        handler = self._commands.get(command)
        if handler is None:
            return f"Command not found: {command}. Type 'help' for available commands."

        try:
            result = handler(args)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            self._logger.error(f"Command '{command}' failed: {e}")
            return f"Error: {e}"

    def register_command(self, name: str, handler: CommandHandler) -> None:
        """Register a command, replacing any command with the same name."""
        self._commands[name] = handler

    def on_directory_change(self, callback: DirectoryChangeCallback) -> None:
        """Register a callback invoked with the new path after each successful cd."""
        self._dir_change_callbacks.append(callback)

    def _notify_directory_change(self, new_dir: str) -> None:
        for callback in self._dir_change_callbacks:
            callback(new_dir)

    # ------------------------- handlers -------------------------
    def _handle_help(self, args: list[str]) -> str:
        return HELP_TEXT

    def _handle_ls(self, args: list[str]) -> str:
        try:
            entries = self._list_files_uc.execute(args[0] if args else None)
        except FileSystemError as e:
            return f"ls: {e}"

        if not entries:
            return "Directory is empty"

        st = self._style
        return "\n".join(
            st.c(f"{entry.name}/", st.BLUE) if entry.is_dir else st.c(entry.name, st.GREEN)
            for entry in entries
        )

    def _handle_cd(self, args: list[str]) -> str:
        if not args:
            return "cd: missing operand"

        try:
            new_dir = self._fs.cd(args[0])
        except FileSystemError as e:
            return f"cd: {e}"

        self._notify_directory_change(new_dir)
        return ""

    def _handle_pwd(self, args: list[str]) -> str:
        return self._fs.pwd()

    def _handle_mkdir(self, args: list[str]) -> str:
        if not args:
            return "mkdir: missing operand"

        try:
            self._fs.mkdir(args[0])
        except FileSystemError as e:
            return f"mkdir: {e}"
        return ""

    def _handle_rm(self, args: list[str]) -> str:
        recursive = bool(args) and args[0] == "-r"
        path_args = args[1:] if recursive else args
        if not path_args:
            return "rm: missing operand"

        try:
            self._fs.rm(path_args[0], recursive)
        except FileSystemError as e:
            return f"rm: {e}"
        return ""

    def _handle_cat(self, args: list[str]) -> str:
        if not args:
            return "cat: missing operand"

        path = args[0]
        try:
            content = self._fs.read_file(path)
        except FileSystemError as e:
            return f"cat: {e}"

        if is_chat_file(path):
            try:
                conversation = Conversation.from_content(content)
            except ValueError:
                return content
            if conversation.title:
                messages = "\n\n".join(
                    f"{message.label}: {message.content}"
                    for message in conversation.messages
                )
                return f"Title: {conversation.title}\n\n{messages}"

        return content

    def _handle_touch(self, args: list[str]) -> str:
        if not args:
            return "touch: missing operand"

        try:
            self._fs.write_file(args[0], "")
        except FileSystemError as e:
            return f"touch: {e}"
        return ""

    def _handle_clear(self, args: list[str]) -> str:
        # The session wipes its own display when it sees the sentinel.
        return CLEAR_SENTINEL

    def _handle_echo(self, args: list[str]) -> str:
        return " ".join(args)

    def _handle_find(self, args: list[str]) -> str:
        if not args:
            return "find: missing pattern"

        pattern = args[0]
        results = self._search_files_uc.execute(pattern)
        if not results:
            return f"No files matching '{pattern}' found"
        return "\n".join(results)

    def _handle_open(self, args: list[str]) -> str:
        if not args:
            return "open: missing file"

        path = args[0]
        if not is_chat_file(path):
            return "open: can only open .chat files"

        try:
            content = self._fs.read_file(path)
        except FileSystemError as e:
            return f"open: {e}"

        try:
            conversation = Conversation.from_content(content)
        except ValueError:
            return "open: invalid chat file format"

        st = self._style
        output = st.c(conversation.title or "Untitled Chat", st.BOLD) + "\n\n"
        output += "\n\n".join(
            f"{st.c(message.label, st.BLUE if message.role == 'user' else st.GREEN)}:\n{message.content}"
            for message in conversation.messages
        )
        return output
