"""Tests for PayrollService — interactive intake loops and the report."""

from __future__ import annotations

from decimal import Decimal

import pytest

from payrollctl.config.models import ReportConfig
from payrollctl.infrastructure.registry import PayrollRegistry
from payrollctl.services.payroll import (
    MSG_DECIMAL_FORMAT,
    MSG_DECIMAL_NOT_POSITIVE,
    MSG_ID_DUPLICATE,
    MSG_ID_EMPTY,
    MSG_ID_FORMAT,
    MSG_INTEGER_FORMAT,
    MSG_INTEGER_NEGATIVE,
    MSG_NAME_EMPTY,
    PROMPT_HOURLY_WAGE,
    PROMPT_HOURS_WORKED,
    PROMPT_ID,
    PROMPT_MONTHLY_SALARY,
    PROMPT_NAME,
    PROMPT_PAYMENT_PER_PROJECT,
    PROMPT_PROJECTS_COMPLETED,
    PayrollService,
)


class TestAddFullTime:
    def test_happy_path(self, service: PayrollService, registry, scripted_io) -> None:
        io = scripted_io("E1", "Alice", "5000")
        result = service.add_full_time(io)
        assert result.ok, result.error
        assert result.op == "add_full_time"
        assert result.data["salary"] == Decimal("5000")
        assert io.prompts == [PROMPT_ID, PROMPT_NAME, PROMPT_MONTHLY_SALARY]
        assert io.lines == ["Full-time employee added successfully!"]
        assert io.styles == ["payroll.ok"]
        assert registry.ids() == ["E1"]

    def test_name_kept_verbatim(self, service: PayrollService, registry, scripted_io) -> None:
        service.add_full_time(scripted_io("E1", "  Mary Ann  ", "1"))
        assert registry.records[0].name == "  Mary Ann  "

    def test_refused_store_reports_duplicate(
        self, service: PayrollService, registry, scripted_io, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(registry, "add", lambda employee: False)
        io = scripted_io("E1", "Alice", "5000")
        result = service.add_full_time(io)
        assert not result.ok
        assert result.op == "add_full_time"
        assert result.error is not None
        assert result.error.code == "DUPLICATE_ID"
        assert result.error.detail == {"id": "E1"}
        assert io.lines == []

    def test_stream_end_aborts_without_storing(
        self, service: PayrollService, registry, scripted_io
    ) -> None:
        with pytest.raises(EOFError):
            service.add_full_time(scripted_io("E1", "Alice"))
        assert len(registry) == 0


class TestIdCollection:
    def test_each_failure_has_its_own_message(
        self, service: PayrollService, registry, scripted_io
    ) -> None:
        service.add_full_time(scripted_io("E1", "Alice", "100"))
        io = scripted_io("", "a b", "abc-123", "E1", "E2", "Bob", "200")
        result = service.add_full_time(io)
        assert result.ok
        assert io.lines == [
            MSG_ID_EMPTY,
            MSG_ID_FORMAT,
            MSG_ID_FORMAT,
            MSG_ID_DUPLICATE,
            "Full-time employee added successfully!",
        ]
        assert io.prompts.count(PROMPT_ID) == 5
        assert io.styles[:4] == ["payroll.error"] * 4

    def test_duplicate_rejected_then_registry_holds_one(
        self, service: PayrollService, registry: PayrollRegistry, scripted_io
    ) -> None:
        service.add_full_time(scripted_io("E1", "Alice", "100"))
        io = scripted_io("E1", "E2", "Cara", "20", "10")
        service.add_part_time(io)
        assert MSG_ID_DUPLICATE in io.lines
        assert registry.ids().count("E1") == 1
        assert registry.ids() == ["E1", "E2"]

    def test_duplicate_check_spans_variants(
        self, service: PayrollService, registry: PayrollRegistry, scripted_io
    ) -> None:
        service.add_contractual(scripted_io("X1", "Cy", "50", "2"))
        io = scripted_io("X1", "X2", "Fay", "10")
        service.add_full_time(io)
        assert io.lines[0] == MSG_ID_DUPLICATE
        assert registry.ids() == ["X1", "X2"]

    def test_no_retry_cap(self, service: PayrollService, scripted_io) -> None:
        io = scripted_io(*([""] * 50), "E1", "Alice", "1")
        assert service.add_full_time(io).ok
        assert io.lines.count(MSG_ID_EMPTY) == 50


class TestNameCollection:
    def test_empty_name_reprompts(self, service: PayrollService, scripted_io) -> None:
        io = scripted_io("E1", "", "", "Alice", "1")
        service.add_full_time(io)
        assert io.lines[:2] == [MSG_NAME_EMPTY, MSG_NAME_EMPTY]
        assert io.prompts.count(PROMPT_NAME) == 3


class TestAmountCollection:
    def test_format_and_range_failures(self, service: PayrollService, registry, scripted_io) -> None:
        io = scripted_io("E1", "Alice", "abc", "0", "-5", "12.345", "5.", "0.00", "10.5")
        service.add_full_time(io)
        assert io.lines == [
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_NOT_POSITIVE,
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_NOT_POSITIVE,
            "Full-time employee added successfully!",
        ]
        assert registry.records[0].monthly_salary == Decimal("10.5")


class TestAddPartTime:
    def test_happy_path(self, service: PayrollService, registry, scripted_io) -> None:
        io = scripted_io("P1", "Pat", "20", "10")
        result = service.add_part_time(io)
        assert result.ok
        assert result.data["salary"] == Decimal("200")
        assert result.data["kind"] == "part_time"
        assert io.prompts == [PROMPT_ID, PROMPT_NAME, PROMPT_HOURLY_WAGE, PROMPT_HOURS_WORKED]
        assert io.lines == ["Part-time employee added successfully!"]

    def test_hours_must_be_positive(self, service: PayrollService, scripted_io) -> None:
        io = scripted_io("P1", "Pat", "20", "0", "8")
        service.add_part_time(io)
        assert io.lines[0] == MSG_DECIMAL_NOT_POSITIVE
        assert io.prompts.count(PROMPT_HOURS_WORKED) == 2


class TestAddContractual:
    def test_happy_path(self, service: PayrollService, registry, scripted_io) -> None:
        io = scripted_io("C1", "Cy", "100", "3")
        result = service.add_contractual(io)
        assert result.ok
        assert result.data["salary"] == Decimal("300")
        assert io.prompts == [
            PROMPT_ID,
            PROMPT_NAME,
            PROMPT_PAYMENT_PER_PROJECT,
            PROMPT_PROJECTS_COMPLETED,
        ]
        assert io.lines == ["Contractual employee added successfully!"]

    def test_project_count_failures(self, service: PayrollService, registry, scripted_io) -> None:
        io = scripted_io("C1", "Cy", "100", "-1", "x", "2.5", " 3", "0")
        service.add_contractual(io)
        assert io.lines == [
            MSG_INTEGER_NEGATIVE,
            MSG_INTEGER_FORMAT,
            MSG_INTEGER_FORMAT,
            MSG_INTEGER_FORMAT,
            "Contractual employee added successfully!",
        ]
        assert registry.records[0].projects_completed == 0

    def test_signed_project_count(self, service: PayrollService, registry, scripted_io) -> None:
        service.add_contractual(scripted_io("C1", "Cy", "100", "+4"))
        assert registry.records[0].projects_completed == 4


class TestDisplayReport:
    def test_empty(self, service: PayrollService, scripted_io) -> None:
        io = scripted_io()
        result = service.display_report(io)
        assert io.lines == ["No employees to display."]
        assert result.data["count"] == 0

    def test_header_blocks_and_separators(self, service: PayrollService, scripted_io) -> None:
        service.add_full_time(scripted_io("A1", "Alice", "3000.50"))
        service.add_contractual(scripted_io("C1", "Cy", "100", "3"))
        io = scripted_io()
        service.display_report(io)
        assert io.lines == [
            "------ Employee Payroll Report ------",
            "Employee: Alice (ID: A1)\nFixed Monthly Salary: $3000.5",
            "",
            "Employee: Cy (ID: C1)\n"
            "Contract Payment Per Project: $100\n"
            "Projects Completed: 3\n"
            "Total Salary: $300",
            "",
        ]
        assert io.styles[0] == "payroll.header"

    def test_repeat_is_identical(self, service: PayrollService, scripted_io) -> None:
        service.add_part_time(scripted_io("P1", "Pat", "12.55", "7.25"))
        first = scripted_io()
        second = scripted_io()
        service.display_report(first)
        service.display_report(second)
        assert first.lines == second.lines
        assert "Total Salary: $90.9875" in first.output

    def test_custom_header(self, registry: PayrollRegistry, scripted_io) -> None:
        svc = PayrollService(registry, report=ReportConfig(header="== Payroll ==", empty_message="Empty."))
        io = scripted_io()
        svc.display_report(io)
        assert io.lines == ["Empty."]
        svc.add_full_time(scripted_io("E1", "Eve", "1"))
        io = scripted_io()
        svc.display_report(io)
        assert io.lines[0] == "== Payroll =="


class TestReport:
    def test_summary_payload(self, service: PayrollService, scripted_io) -> None:
        service.add_full_time(scripted_io("F1", "Fay", "5000"))
        service.add_part_time(scripted_io("P1", "Pat", "20", "10"))
        result = service.report()
        assert result.ok
        assert result.op == "payroll_report"
        assert result.data["count"] == 2
        assert result.data["total"] == Decimal("5200")
        assert [item["id"] for item in result.data["items"]] == ["F1", "P1"]
        assert result.data["items"][1]["kind"] == "part_time"
