"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the process-lifetime registry and the console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payrollctl.commands._terminal import ClickLineIO
from payrollctl.infrastructure.registry import PayrollRegistry

if TYPE_CHECKING:
    from payrollctl.config.settings import PayrollSettings
    from payrollctl.services.contracts import LineIO
    from payrollctl.services.payroll import PayrollService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The registry starts
    empty and is discarded with the context when the process exits.
    """

    def __init__(self, settings: PayrollSettings, io: LineIO | None = None) -> None:
        self.settings = settings
        self.registry = PayrollRegistry()
        self.io: LineIO = io or ClickLineIO()

        # Configure structured logging
        from payrollctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> PayrollService:
        """A payroll service bound to this context's registry."""
        from payrollctl.services.payroll import PayrollService

        return PayrollService(self.registry, report=self.settings.report)
