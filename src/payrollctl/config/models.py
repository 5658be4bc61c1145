"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, a config file only contains
overrides. The defaults reproduce the stock console wording exactly.
"""

from __future__ import annotations

from pydantic import BaseModel


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    header: str = "------ Employee Payroll Report ------"
    empty_message: str = "No employees to display."


class MenuConfig(BaseModel):
    """[menu] section."""

    model_config = {"frozen": True}

    exit_message: str = "Exiting program. Goodbye!"

