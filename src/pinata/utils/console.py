"""Shared rich console for user-facing messages."""

from rich.console import Console

console = Console(highlight=False)


def get_console(override: Console | None = None) -> Console:
    """Return ``override`` if given, else the shared console."""
    return override if override is not None else console
