"""Utility functions for paymill_models."""

from paymill_models.utils.date_parser import format_timestamp, to_datetime
from paymill_models.utils.amount_parser import format_amount, minor_to_major

__all__ = ["format_timestamp", "to_datetime", "format_amount", "minor_to_major"]
