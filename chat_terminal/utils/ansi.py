"""ANSI styling helpers for terminal output.

Command output is plain text carrying ANSI escape sequences; sessions render
it as they see fit (``rich`` converts it back into styled text).
"""

CLEAR_SENTINEL = "\x1b[clear]"


class AnsiStyle:
    def __init__(self, enable_color: bool = True) -> None:
        self.enable_color = enable_color

        self.RESET = "\033[0m" if enable_color else ""
        self.BOLD = "\033[1m" if enable_color else ""
        self.GREEN = "\033[32m" if enable_color else ""
        self.BLUE = "\033[34m" if enable_color else ""

    def c(self, s: str, color: str) -> str:
        return f"{color}{s}{self.RESET}" if self.enable_color else s
