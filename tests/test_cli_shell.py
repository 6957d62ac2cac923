"""
Tests for the interactive shell session.
"""

import argparse
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console
from rich.text import Text

from chat_terminal.adapters.storage.memory_storage_adapter import InMemoryStorageAdapter
from chat_terminal.cli_shell import ShellSession, _run, main
from chat_terminal.config.settings import settings
from chat_terminal.utils.ansi import CLEAR_SENTINEL


@pytest.fixture
def shell_container(dependency_container):
    dependency_container.use_color(False)
    with patch("chat_terminal.cli_shell.container", dependency_container):
        yield dependency_container


@pytest.fixture
def console():
    return MagicMock(spec=Console)


class TestShellSession:
    """Test cases for ShellSession."""

    def test_prompt_follows_cd(self, shell_container, console):
        """Test that the prompt shows the directory after each cd."""
        fs = shell_container.get_file_system()
        fs.mkdir("/projects")
        session = ShellSession(console)

        assert session.prompt() == "[blue]/[/blue] [green]$[/green] "

        fs.cd("/projects")
        # Only cd through the dispatcher notifies the session
        assert session.cwd == "/"

    @pytest.mark.asyncio
    async def test_run_line(self, shell_container, console):
        shell_container.get_file_system().mkdir("/projects")
        session = ShellSession(console)

        await session.run_line("cd projects")
        await session.run_line("   ")
        await session.run_line("echo hi")

        assert session.cwd == "/projects"
        assert session.prompt() == "[blue]/projects[/blue] [green]$[/green] "
        assert session.command_history == ["cd projects", "   ", "echo hi"]
        # cd prints nothing, echo prints once
        console.print.assert_called_once_with(Text.from_ansi("hi"))

    def test_render_clear(self, shell_container, console):
        session = ShellSession(console)

        session.render(CLEAR_SENTINEL)

        console.clear.assert_called_once()
        console.print.assert_not_called()

    def test_render_empty_output(self, shell_container, console):
        ShellSession(console).render("")
        console.print.assert_not_called()

    @pytest.mark.asyncio
    async def test_run_until_exit(self, shell_container, console):
        """Test the read loop stops at the exit command."""
        console.input.side_effect = ["mkdir docs", "exit", "mkdir never"]
        session = ShellSession(console)

        await session.run()

        assert session.command_history == ["mkdir docs"]
        assert shell_container.get_file_system().exists("/docs")
        assert not shell_container.get_file_system().exists("/never")

    @pytest.mark.asyncio
    async def test_run_until_eof(self, shell_container, console):
        console.input.side_effect = ["touch a.txt", EOFError()]
        session = ShellSession(console)

        await session.run()

        assert session.command_history == ["touch a.txt"]


class TestRun:
    """Test cases for the full session lifecycle."""

    @pytest.mark.asyncio
    async def test_session_is_saved(self, shell_container, storage, console):
        console.input.side_effect = ["mkdir /projects/mine", "quit"]

        code = await _run(argparse.Namespace(ephemeral=False), console)

        assert code == 0
        assert '"mine"' in storage.get_item("chatgpt-terminal-fs")

    @pytest.mark.asyncio
    async def test_ephemeral_session_is_not_saved(self, shell_container, storage, console):
        console.input.side_effect = ["mkdir /projects/mine", "quit"]

        code = await _run(argparse.Namespace(ephemeral=True), console)

        assert code == 0
        assert storage.get_item("chatgpt-terminal-fs") is None



class TestMain:
    """Test cases for command-line flags."""

    def test_no_color_leaves_settings_untouched(self, dependency_container, monkeypatch):
        """Test that --no-color only affects the session's dispatcher."""
        monkeypatch.setattr(settings, "terminal_color", True)
        with patch("chat_terminal.cli_shell.container", dependency_container), patch(
            "chat_terminal.cli_shell._run", AsyncMock(return_value=0)
        ) as run:
            assert main(["--no-color"]) == 0

        run.assert_awaited_once()
        assert settings.terminal_color is True

        dependency_container.get_file_system().mkdir("/projects")
        dispatcher = dependency_container.get_command_dispatcher()
        assert asyncio.run(dispatcher.process_command("ls")) == "projects/"

    def test_ephemeral_replaces_storage(self, dependency_container, storage):
        with patch("chat_terminal.cli_shell.container", dependency_container), patch(
            "chat_terminal.cli_shell._run", AsyncMock(return_value=0)
        ):
            assert main(["--ephemeral"]) == 0

        assert isinstance(dependency_container.get_storage(), InMemoryStorageAdapter)
        assert dependency_container.get_storage() is not storage
