"""Command line interface for payroll."""
