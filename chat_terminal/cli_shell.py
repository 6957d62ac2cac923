from __future__ import annotations

import argparse
import asyncio
from typing import Optional

from rich.console import Console
from rich.text import Text

from chat_terminal.adapters.storage.memory_storage_adapter import InMemoryStorageAdapter
from chat_terminal.container import container
from chat_terminal.use_cases.session.bootstrap import SEEDED
from chat_terminal.utils.ansi import CLEAR_SENTINEL

BANNER = "Welcome to ChatGPT Terminal v1.0.0"
EXIT_COMMANDS = ("exit", "quit")


class ShellSession:
    """Line-oriented terminal session rendering dispatcher output with rich."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self.dispatcher = container.get_command_dispatcher()
        self.file_system = container.get_file_system()
        self.cwd = self.file_system.pwd()
        self.command_history: list[str] = []
        self.dispatcher.on_directory_change(self._on_directory_change)

    def _on_directory_change(self, new_dir: str) -> None:
        self.cwd = new_dir

    def prompt(self) -> str:
        return f"[blue]{self.cwd}[/blue] [green]$[/green] "

    def render(self, output: str) -> None:
        if output == CLEAR_SENTINEL:
            self.console.clear()
            return
        if output:
            self.console.print(Text.from_ansi(output))

    async def run_line(self, line: str) -> None:
        self.command_history.append(line)
        if not line.strip():
            return
        self.render(await self.dispatcher.process_command(line))

    async def run(self) -> None:
        self.console.print(f"[bold green]{BANNER}[/bold green]")
        self.console.print('Type "help" to see available commands.')
        while True:
            try:
                line = self.console.input(self.prompt())
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            if line.strip() in EXIT_COMMANDS:
                break
            await self.run_line(line)


async def _run(args: argparse.Namespace, console: Console) -> int:
    outcome = await container.get_bootstrap_use_case().execute()
    if outcome == SEEDED:
        console.print("[yellow]Saved filesystem could not be loaded; demo data created.[/yellow]")

    session = ShellSession(console)
    await session.run()

    if args.ephemeral:
        return 0
    try:
        await container.get_file_system().save_to_storage()
    except Exception as e:
        console.print(f"[red]Save failed:[/red] {e}")
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chat-terminal",
        description="Browse ChatGPT conversations stored in a simulated filesystem.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print command output without ANSI colours",
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep the filesystem in memory only (nothing is loaded or saved)",
    )
    args = parser.parse_args(argv)

    if args.no_color:
        container.use_color(False)
    if args.ephemeral:
        container.use_storage(InMemoryStorageAdapter())

    console = Console(highlight=False, soft_wrap=True)
    return asyncio.run(_run(args, console))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
