"""Root CLI group for payrollctl with global flags and command registration."""

from __future__ import annotations

import click

from payrollctl import __version__
from payrollctl.commands import register_commands
from payrollctl.commands._context import AppContext
from payrollctl.commands.menu import menu
from payrollctl.config.settings import PayrollSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="payrollctl")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML file with report/menu text overrides.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """payrollctl — record employees and print a payroll report.

    With no command, starts the interactive menu.
    """
    settings = PayrollSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


register_commands(cli)
