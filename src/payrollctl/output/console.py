"""Rich Console factory and theme for payrollctl output.

Creates Console instances that render to a StringIO buffer and resolves
theme styles into ANSI codes for single console lines. Styles only turn
into ANSI codes when *color* is requested; click strips them again when
stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.color import ColorSystem
from rich.console import Console
from rich.theme import Theme

PAYROLL_THEME = Theme(
    {
        "payroll.ok": "bold green",
        "payroll.error": "bold red",
        "payroll.warning": "bold yellow",
        "payroll.header": "bold cyan",
        "payroll.menu": "bold",
        "payroll.rule": "dim",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles (only useful when stdout is a terminal).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PAYROLL_THEME,
        color_system="standard" if color else None,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_text(message: str, style: str | None = None, *, color: bool = False) -> str:
    """Wrap *message* in the ANSI codes of a theme style.

    The characters of *message* are returned exactly as given. Tabs and
    control characters in user-entered names survive, and markup such as
    ``"[bold]"`` stays literal. Without *color* or *style* the message
    comes back unchanged.
    """
    if not color or not style or not message:
        return message
    theme_style = create_console(color=True).get_style(style)
    return theme_style.render(message, color_system=ColorSystem.STANDARD)
