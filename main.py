import asyncio
import sys

from chat_terminal.container import container


async def run(lines: list[str]) -> int:
    _ = await container.get_bootstrap_use_case().execute()
    dispatcher = container.get_command_dispatcher()
    for line in lines:
        print(await dispatcher.process_command(line))
    await container.get_file_system().save_to_storage()
    return 0


def main():
    # Each argument is one command line, e.g.: python main.py "ls /projects" "find chat"
    lines = sys.argv[1:] or [input("Enter command: ")]
    try:
        return asyncio.run(run(lines))
    except Exception as exc:
        print("Error:", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
