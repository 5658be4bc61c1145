"""Typed contracts for service and adapter boundaries.

Payload models validate operation data shapes before they leave the
service layer. :class:`LineIO` is the console seam: services read and
write lines through it and never touch stdin/stdout directly.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class LineIO(Protocol):
    """Blocking line-oriented console."""

    def ask(self, prompt: str) -> str:
        """Show *prompt* without a newline and return one input line."""
        ...

    def say(self, message: str = "", *, style: str | None = None) -> None:
        """Print *message* followed by a newline."""
        ...


class EmployeeItem(BaseModel):
    """One employee row in a payroll payload."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    kind: str
    salary: Decimal


class PayrollReportData(BaseModel):
    """Payload contract for ``PayrollService.report``."""

    count: int
    total: Decimal
    items: list[EmployeeItem]
