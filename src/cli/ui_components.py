"""CLI output components (Rich).

Only diagnostics go through rich, on stderr. Passwords are echoed plain so
punctuation such as `[` is never read as markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.config import DEFAULT_COUNT, DEFAULT_LENGTH, MAX_COUNT, MAX_LENGTH

USAGE = "Usage: randpass [COUNT LENGTH]"


def build_error_console() -> Console:
    return Console(stderr=True, soft_wrap=True, highlight=False)


def print_usage(console: Console) -> None:
    """Print the usage text."""

    body = Text()
    body.append(USAGE + "\n\n", style="bold")
    body.append("Generate COUNT random passwords of LENGTH characters each.\n")
    body.append(
        f"With no arguments, generate {DEFAULT_COUNT} password of {DEFAULT_LENGTH} characters.\n"
    )
    body.append(f"COUNT must be between 1 and {MAX_COUNT}; LENGTH between 1 and {MAX_LENGTH}.")
    console.print(body)


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("error: ", "bold red"), message))
