"""Terminal styling and status messages."""

from __future__ import annotations

import os

_CODES = {
    "red": "31",
    "green": "32",
    "blue": "34",
    "bold": "1",
}
_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def style(text: object, *args: str) -> str:
    """Wrap ``text`` in ANSI codes for the given style names."""
    unknown = [name for name in args if name not in _CODES]
    if unknown:
        raise ValueError(f"unknown style: {', '.join(unknown)}")
    if not args:
        return str(text)
    prefix = "".join(f"\x1b[{_CODES[name]}m" for name in args)
    return f"{prefix}{text}{_RESET}"


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{style(marker, 'red')} {style(message, 'red')}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{style(marker, 'green')} {style(message, 'green')}")


def separator() -> str:
    """Return the bold rule used around hints and program output."""
    return style("====================", "bold")