"""Utility functions for payroll."""

from payroll.utils.amount_parser import parse_amount
from payroll.utils.logging_utils import setup_logging

__all__ = ["parse_amount", "setup_logging"]
