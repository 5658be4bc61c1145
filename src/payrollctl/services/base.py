"""BaseService — abstract foundation for payrollctl services.

Every service receives the :class:`PayrollRegistry` at construction time.
The registry is the only place employee records live.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payrollctl.infrastructure.registry import PayrollRegistry


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class PayrollService(BaseService):
            def add_full_time(self, io: LineIO) -> ServiceResult:
                ...
                stored = self._registry.add(employee)
                return ServiceResult(ok=stored, op="add_full_time", ...)
    """

    def __init__(self, registry: PayrollRegistry) -> None:
        self._registry = registry
