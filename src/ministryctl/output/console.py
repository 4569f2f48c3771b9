"""Rich Console factory and theme for ministryctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MINISTRY_THEME = Theme(
    {
        "min.ok": "bold green",
        "min.error": "bold red",
        "min.warning": "bold yellow",
        "min.op": "bold cyan",
        "min.key": "dim",
        "min.name": "bold",
        "min.date": "cyan",
        "min.days": "magenta",
        "min.today": "bold magenta",
        "min.tier.neophyte": "blue",
        "min.tier.junior": "green",
        "min.tier.senior": "purple",
        "min.type.admin": "red",
        "min.type.member": "blue",
    }
)

_TIER_STYLES: dict[str, str] = {
    "Neophyte": "min.tier.neophyte",
    "Junior": "min.tier.junior",
    "Senior Server": "min.tier.senior",
}

_TYPE_STYLES: dict[str, str] = {
    "admin": "min.type.admin",
    "member": "min.type.member",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MINISTRY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str | None) -> str:
    return _TIER_STYLES.get(tier or "", "")


def style_for_user_type(user_type: str | None) -> str:
    return _TYPE_STYLES.get(user_type or "", "")
