"""Shared pytest fixtures and test helpers for payrollctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator

import pytest
from click.testing import CliRunner

from payrollctl.infrastructure.registry import PayrollRegistry
from payrollctl.services.payroll import PayrollService


class ScriptedIO:
    """LineIO fake that answers prompts from a fixed script.

    Running out of answers raises EOFError, so a loop that never
    accepts its input fails the test instead of hanging it.
    """

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []
        self.styles: list[str | None] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError(f"No scripted answer left for {prompt!r}")
        return self._answers.pop(0)

    def say(self, message: str = "", *, style: str | None = None) -> None:
        self.lines.append(message)
        self.styles.append(style)

    @property
    def remaining(self) -> int:
        return len(self._answers)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects from CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    payroll = logging.getLogger("payrollctl")
    payroll_level = payroll.level
    payroll_handlers = payroll.handlers[:]
    payroll_propagate = payroll.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    payroll.handlers = payroll_handlers
    payroll.propagate = payroll_propagate
    payroll.setLevel(payroll_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> PayrollRegistry:
    """Empty in-memory registry."""
    return PayrollRegistry()


@pytest.fixture
def service(registry: PayrollRegistry) -> PayrollService:
    """PayrollService bound to the ``registry`` fixture."""
    return PayrollService(registry)


@pytest.fixture
def scripted_io() -> Callable[..., ScriptedIO]:
    """Factory: ``scripted_io("E1", "Alice", "5000")``."""

    def _make(*answers: str) -> ScriptedIO:
        return ScriptedIO(list(answers))

    return _make
