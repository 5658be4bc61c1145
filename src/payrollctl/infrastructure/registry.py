"""PayrollRegistry — the process-lifetime store of employee records.

The registry is the single dependency injected into every service. It
owns its records exclusively, keeps them in insertion order (which is
also report order), and is discarded when the process exits. Nothing is
ever written to disk.

INVARIANT: Employee IDs are unique across all variants. Records are
never edited or removed once added.
"""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext
from typing import TYPE_CHECKING

from payrollctl.domain.employees import EXACT_CONTEXT, compute_salary

if TYPE_CHECKING:
    from collections.abc import Iterator

    from payrollctl.domain.employees import Employee

logger = logging.getLogger(__name__)


class PayrollRegistry:
    """Ordered, append-only collection of employee records."""

    def __init__(self) -> None:
        self._employees: list[Employee] = []

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    @property
    def records(self) -> tuple[Employee, ...]:
        """Snapshot of stored records in insertion order."""
        return tuple(self._employees)

    def ids(self) -> list[str]:
        return [emp.id for emp in self._employees]

    def is_id_unique(self, employee_id: str) -> bool:
        """True when no stored record, of any variant, carries *employee_id*."""
        return all(emp.id != employee_id for emp in self._employees)

    def add(self, employee: Employee) -> bool:
        """Append *employee*. Returns False, storing nothing, on a duplicate ID."""
        if not self.is_id_unique(employee.id):
            logger.debug("Rejected duplicate employee ID %s", employee.id)
            return False
        self._employees.append(employee)
        logger.debug("Stored %s employee %s (%d total)", employee.kind, employee.id, len(self))
        return True

    def total_payroll(self) -> Decimal:
        """Sum of every stored record's salary."""
        with localcontext(EXACT_CONTEXT):
            return sum((compute_salary(emp) for emp in self._employees), Decimal(0))
