"""Command: the interactive payroll menu.

The menu is a two-state machine. It stays in ``AWAITING_CHOICE``, running
one operation per valid selection, until the exit choice moves it to the
terminal ``EXITING`` state.
"""

from __future__ import annotations

import logging
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

import click

from payrollctl.commands._base import PayrollCommand
from payrollctl.domain.validators import parse_menu_choice

if TYPE_CHECKING:
    from payrollctl.commands._context import AppContext
    from payrollctl.services.contracts import LineIO
    from payrollctl.services.payroll import PayrollService

logger = logging.getLogger(__name__)

MENU_RULE = "============================="
MENU_TITLE = "    PAYROLL SYSTEM MENU"
MENU_OPTIONS = (
    "[1] Full-time Employee",
    "[2] Part-time Employee",
    "[3] Contractual Employee",
    "[4] Display Payroll Report",
    "[5] Exit",
)
MENU_PROMPT = "Enter your choice: "
MSG_INVALID_CHOICE = "Invalid choice. Please enter a number between 1 and 5."


class MenuChoice(IntEnum):
    FULL_TIME = 1
    PART_TIME = 2
    CONTRACTUAL = 3
    REPORT = 4
    EXIT = 5


class MenuState(StrEnum):
    AWAITING_CHOICE = "awaiting_choice"
    EXITING = "exiting"


class PayrollMenu:
    """Read a choice, dispatch it, repeat until exit."""

    def __init__(
        self,
        service: PayrollService,
        io: LineIO,
        *,
        exit_message: str = "Exiting program. Goodbye!",
    ) -> None:
        self._service = service
        self._io = io
        self._exit_message = exit_message
        self.state = MenuState.AWAITING_CHOICE

    def show(self) -> None:
        self._io.say()
        self._io.say(MENU_RULE, style="payroll.rule")
        self._io.say(MENU_TITLE, style="payroll.menu")
        self._io.say(MENU_RULE, style="payroll.rule")
        for option in MENU_OPTIONS:
            self._io.say(option)
        self._io.say(MENU_RULE, style="payroll.rule")

    def step(self) -> MenuState:
        """Show the menu, read one choice, and run it."""
        self.show()
        raw = self._io.ask(MENU_PROMPT)
        choice = parse_menu_choice(raw, MenuChoice.FULL_TIME, MenuChoice.EXIT)
        if choice is None:
            logger.debug("Invalid menu choice %r", raw)
            self._io.say(MSG_INVALID_CHOICE, style="payroll.error")
            return self.state

        logger.debug("Menu choice %d", choice)
        match MenuChoice(choice):
            case MenuChoice.FULL_TIME:
                self._service.add_full_time(self._io)
            case MenuChoice.PART_TIME:
                self._service.add_part_time(self._io)
            case MenuChoice.CONTRACTUAL:
                self._service.add_contractual(self._io)
            case MenuChoice.REPORT:
                self._service.display_report(self._io)
            case MenuChoice.EXIT:
                self._io.say(self._exit_message)
                self.state = MenuState.EXITING
        return self.state

    def run(self) -> None:
        while self.state is not MenuState.EXITING:
            self.step()


@click.command(
    "menu",
    cls=PayrollCommand,
    examples="""\
  payrollctl menu
  payrollctl -v menu
  payrollctl --log-json -c payroll.toml menu""",
)
@click.pass_obj
def menu(app: AppContext) -> None:
    """Run the interactive payroll menu (the default command)."""
    PayrollMenu(app.service, app.io, exit_message=app.settings.menu.exit_message).run()
