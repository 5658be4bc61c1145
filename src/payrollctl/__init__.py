"""payrollctl — interactive payroll entry and reporting console."""

__version__ = "0.1.0"
