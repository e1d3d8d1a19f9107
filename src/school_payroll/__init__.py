"""School payroll: salary bands, statutory deductions, and payroll records."""

__version__ = "0.1.0"
