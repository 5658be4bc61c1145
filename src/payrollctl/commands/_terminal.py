"""ClickLineIO — the LineIO contract over stdin and ``click.echo``.

Prompts are echoed verbatim (``click.prompt`` would append its own
space, turning ``"$"`` prompts into ``"$ "``). End of input and Ctrl-C
surface as :class:`click.Abort`, the same as with ``click.prompt``.
Empty lines come back as ``""``; the retry policy belongs to the services.
"""

from __future__ import annotations

import sys

import click

from payrollctl.output.console import render_text


class ClickLineIO:
    """Line console backed by stdin/stdout."""

    def __init__(self, *, color: bool | None = None) -> None:
        self._color = sys.stdout.isatty() if color is None else color

    def ask(self, prompt: str) -> str:
        click.echo(prompt, nl=False)
        try:
            return input()
        except (KeyboardInterrupt, EOFError):
            raise click.Abort() from None

    def say(self, message: str = "", *, style: str | None = None) -> None:
        click.echo(render_text(message, style, color=self._color))
