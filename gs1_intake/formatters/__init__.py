"""
Output formatters for GS1 intake decoding.
"""

from .json_formatter import (
    format_date_for_input,
    format_date_for_month_year,
    record_to_dict,
    record_to_json,
    decode_gs1_to_json,
)

__all__ = [
    "format_date_for_input",
    "format_date_for_month_year",
    "record_to_dict",
    "record_to_json",
    "decode_gs1_to_json",
]
