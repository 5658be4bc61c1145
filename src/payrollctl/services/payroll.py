"""PayrollService — interactive employee intake and the payroll report.

Each ``add_*`` operation walks the same field sequence: employee ID,
name, then the variant's pay fields. Every field is read in its own
retry loop that re-issues the prompt after any validation failure.
There is no retry cap; an add operation only ends once every field is
valid (or the input stream ends, which the CLI layer treats as abort).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payrollctl.config.models import ReportConfig
from payrollctl.domain.employees import (
    ContractualEmployee,
    FullTimeEmployee,
    PartTimeEmployee,
    compute_salary,
    render_report,
)
from payrollctl.domain.types import EmployeeKind
from payrollctl.domain.validators import parse_decimal, parse_integer, validate_identifier
from payrollctl.services.base import BaseService
from payrollctl.services.contracts import PayrollReportData, dump_validated
from payrollctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from decimal import Decimal

    from payrollctl.domain.employees import Employee
    from payrollctl.infrastructure.registry import PayrollRegistry
    from payrollctl.services.contracts import LineIO

logger = logging.getLogger(__name__)

# ── Prompts and messages ──────────────────────────────────────────────

PROMPT_ID = "Enter Employee ID: "
PROMPT_NAME = "Enter Employee Name: "
PROMPT_MONTHLY_SALARY = "Enter Monthly Salary: $"
PROMPT_HOURLY_WAGE = "Enter Hourly Wage: $"
PROMPT_HOURS_WORKED = "Enter Number of Hours Worked: "
PROMPT_PAYMENT_PER_PROJECT = "Enter Payment Per Project: $"
PROMPT_PROJECTS_COMPLETED = "Enter Number of Projects Completed: "

MSG_ID_EMPTY = "ID cannot be empty. Please try again."
MSG_ID_FORMAT = (
    "Invalid ID format! ID must contain only alphanumeric characters: "
    "ID must contain only letters and numbers with no spaces or special characters."
)
MSG_ID_DUPLICATE = "Duplicate ID! Please enter a unique ID."
MSG_NAME_EMPTY = "Name cannot be empty. Please try again."
MSG_DECIMAL_FORMAT = "Invalid format. Please enter a valid number."
MSG_DECIMAL_NOT_POSITIVE = "Value must be greater than zero. Please try again."
MSG_INTEGER_FORMAT = "Invalid input. Please enter a valid number."
MSG_INTEGER_NEGATIVE = "Value cannot be negative. Please try again."

ADDED_MESSAGES: dict[EmployeeKind, str] = {
    EmployeeKind.FULL_TIME: "Full-time employee added successfully!",
    EmployeeKind.PART_TIME: "Part-time employee added successfully!",
    EmployeeKind.CONTRACTUAL: "Contractual employee added successfully!",
}

_ERROR_STYLE = "payroll.error"


class PayrollService(BaseService):
    """Collect employee fields from a console and report on the registry."""

    def __init__(self, registry: PayrollRegistry, report: ReportConfig | None = None) -> None:
        super().__init__(registry)
        self._report = report or ReportConfig()

    # ── Add operations ────────────────────────────────────────────────

    def add_full_time(self, io: LineIO) -> ServiceResult:
        """Prompt for a full-time employee and store it."""
        employee_id = self._collect_id(io)
        name = self._collect_name(io)
        salary = self._collect_amount(io, PROMPT_MONTHLY_SALARY)
        employee = FullTimeEmployee(id=employee_id, name=name, monthly_salary=salary)
        return self._store(io, employee, op="add_full_time")

    def add_part_time(self, io: LineIO) -> ServiceResult:
        """Prompt for a part-time employee and store it."""
        employee_id = self._collect_id(io)
        name = self._collect_name(io)
        wage = self._collect_amount(io, PROMPT_HOURLY_WAGE)
        hours = self._collect_amount(io, PROMPT_HOURS_WORKED)
        employee = PartTimeEmployee(
            id=employee_id, name=name, hourly_wage=wage, hours_worked=hours
        )
        return self._store(io, employee, op="add_part_time")

    def add_contractual(self, io: LineIO) -> ServiceResult:
        """Prompt for a contractual employee and store it."""
        employee_id = self._collect_id(io)
        name = self._collect_name(io)
        payment = self._collect_amount(io, PROMPT_PAYMENT_PER_PROJECT)
        projects = self._collect_count(io, PROMPT_PROJECTS_COMPLETED)
        employee = ContractualEmployee(
            id=employee_id,
            name=name,
            payment_per_project=payment,
            projects_completed=projects,
        )
        return self._store(io, employee, op="add_contractual")

    # ── Report ────────────────────────────────────────────────────────

    def report(self) -> ServiceResult:
        """Summarize every stored employee and the payroll total."""
        items = [
            {
                "id": emp.id,
                "name": emp.name,
                "kind": str(emp.kind),
                "salary": compute_salary(emp),
            }
            for emp in self._registry
        ]
        data = dump_validated(
            PayrollReportData,
            {"count": len(items), "total": self._registry.total_payroll(), "items": items},
        )
        return ServiceResult(ok=True, op="payroll_report", data=data)

    def display_report(self, io: LineIO) -> ServiceResult:
        """Print the header and each employee block, in insertion order."""
        if len(self._registry) == 0:
            io.say(self._report.empty_message, style="payroll.warning")
        else:
            io.say(self._report.header, style="payroll.header")
            for emp in self._registry:
                io.say(render_report(emp))
                io.say()
        return self.report()

    # ── Field collection ──────────────────────────────────────────────

    def _collect_id(self, io: LineIO) -> str:
        while True:
            employee_id = io.ask(PROMPT_ID)
            if not employee_id:
                io.say(MSG_ID_EMPTY, style=_ERROR_STYLE)
            elif not validate_identifier(employee_id):
                io.say(MSG_ID_FORMAT, style=_ERROR_STYLE)
            elif not self._registry.is_id_unique(employee_id):
                io.say(MSG_ID_DUPLICATE, style=_ERROR_STYLE)
            else:
                return employee_id
            logger.debug("Re-prompting for employee ID (got %r)", employee_id)

    def _collect_name(self, io: LineIO) -> str:
        while True:
            name = io.ask(PROMPT_NAME)
            if name:
                return name
            io.say(MSG_NAME_EMPTY, style=_ERROR_STYLE)

    def _collect_amount(self, io: LineIO, prompt: str) -> Decimal:
        """Read a strictly positive amount with at most two decimals."""
        while True:
            raw = io.ask(prompt)
            value = parse_decimal(raw)
            if value is None:
                io.say(MSG_DECIMAL_FORMAT, style=_ERROR_STYLE)
            elif value <= 0:
                io.say(MSG_DECIMAL_NOT_POSITIVE, style=_ERROR_STYLE)
            else:
                return value
            logger.debug("Re-prompting for %r", prompt)

    def _collect_count(self, io: LineIO, prompt: str) -> int:
        """Read a non-negative whole number."""
        while True:
            raw = io.ask(prompt)
            value = parse_integer(raw)
            if value is None:
                io.say(MSG_INTEGER_FORMAT, style=_ERROR_STYLE)
            elif value < 0:
                io.say(MSG_INTEGER_NEGATIVE, style=_ERROR_STYLE)
            else:
                return value
            logger.debug("Re-prompting for %r", prompt)

    def _store(self, io: LineIO, employee: Employee, *, op: str) -> ServiceResult:
        if not self._registry.add(employee):
            # The ID loop already checked uniqueness; nothing else writes the registry.
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="DUPLICATE_ID",
                    message=f"Employee ID {employee.id!r} already exists",
                    detail={"id": employee.id},
                ),
            )
        io.say(ADDED_MESSAGES[employee.kind], style="payroll.ok")
        logger.debug("Added %s employee %s", employee.kind, employee.id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": employee.id,
                "name": employee.name,
                "kind": str(employee.kind),
                "salary": compute_salary(employee),
            },
        )
