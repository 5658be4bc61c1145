"""Employee classification enums."""

from __future__ import annotations

from enum import StrEnum


class EmployeeKind(StrEnum):
    """The three fixed payroll categories."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACTUAL = "contractual"
