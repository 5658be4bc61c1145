"""Employee record variants as a tagged union.

Three frozen models share ``id`` and ``name`` and differ in their pay
fields. Salary and report rendering dispatch on the variant with a
``match`` statement; the variant set is closed.

INVARIANT: Records are immutable once built. Field values are validated
by the caller (see :mod:`payrollctl.domain.validators`) before construction.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, localcontext
from typing import Literal

from pydantic import BaseModel

from payrollctl.domain.types import EmployeeKind


class _EmployeeBase(BaseModel):
    """Identity fields common to every record variant."""

    model_config = {"frozen": True}

    id: str
    name: str

    def compute_salary(self) -> Decimal:
        return compute_salary(self)  # type: ignore[arg-type]

    def render_report(self) -> str:
        return render_report(self)  # type: ignore[arg-type]


class FullTimeEmployee(_EmployeeBase):
    """Paid a fixed monthly salary."""

    kind: Literal[EmployeeKind.FULL_TIME] = EmployeeKind.FULL_TIME
    monthly_salary: Decimal


class PartTimeEmployee(_EmployeeBase):
    """Paid by the hour."""

    kind: Literal[EmployeeKind.PART_TIME] = EmployeeKind.PART_TIME
    hourly_wage: Decimal
    hours_worked: Decimal


class ContractualEmployee(_EmployeeBase):
    """Paid per completed project."""

    kind: Literal[EmployeeKind.CONTRACTUAL] = EmployeeKind.CONTRACTUAL
    payment_per_project: Decimal
    projects_completed: int


Employee = FullTimeEmployee | PartTimeEmployee | ContractualEmployee

# Sums and products of parsed amounts are exact in this context.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def format_amount(value: Decimal) -> str:
    """Render *value* in plain notation without trailing fractional zeros.

    Examples:
        >>> format_amount(Decimal("3000.50"))
        '3000.5'
        >>> format_amount(Decimal("5000.00"))
        '5000'
        >>> format_amount(Decimal("103.125"))
        '103.125'
    """
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def compute_salary(employee: Employee) -> Decimal:
    """Salary owed to *employee*. Products are exact and never rounded."""
    match employee:
        case FullTimeEmployee(monthly_salary=salary):
            return salary
        case PartTimeEmployee(hourly_wage=wage, hours_worked=hours):
            with localcontext(EXACT_CONTEXT):
                return wage * hours
        case ContractualEmployee(payment_per_project=payment, projects_completed=projects):
            with localcontext(EXACT_CONTEXT):
                return payment * projects
    msg = f"Unknown employee variant: {type(employee).__name__}"
    raise TypeError(msg)


def render_report(employee: Employee) -> str:
    """Render the multi-line payroll block for a single employee."""
    lines = [f"Employee: {employee.name} (ID: {employee.id})"]
    match employee:
        case FullTimeEmployee():
            lines.append(f"Fixed Monthly Salary: ${format_amount(employee.monthly_salary)}")
        case PartTimeEmployee():
            lines.append(f"Hourly Wage: ${format_amount(employee.hourly_wage)}")
            lines.append(f"Hours Worked: {format_amount(employee.hours_worked)}")
            lines.append(f"Total Salary: ${format_amount(compute_salary(employee))}")
        case ContractualEmployee():
            lines.append(
                f"Contract Payment Per Project: ${format_amount(employee.payment_per_project)}"
            )
            lines.append(f"Projects Completed: {employee.projects_completed}")
            lines.append(f"Total Salary: ${format_amount(compute_salary(employee))}")
    return "\n".join(lines)
