"""HTTP API for school payroll."""
