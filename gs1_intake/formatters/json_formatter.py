"""
Formatters for decoded GS1 records.

Date helpers used by intake forms plus clean JSON output:
- ``YYYY-MM-DD`` for HTML date inputs
- separate ``MM`` / ``YYYY`` strings for month/year pickers
- JSON with explicit null for absent fields
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..core.decoder import DecodeOptions, ParsedRecord, decode_gs1


# Record field to human-readable name mapping
FIELD_NAMES = {
    "gtin": "GTIN Code",
    "expiry_date": "Expiry Date",
    "batch": "Batch/Lot Number",
    "serial": "Serial Number",
}


def _is_usable_date(value: Any) -> bool:
    return isinstance(value, date)


def format_date_for_input(value: Optional[date]) -> str:
    """
    Format a date as ``YYYY-MM-DD``.

    Returns '' for None or any non-date value.
    """
    if not _is_usable_date(value):
        return ''
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_date_for_month_year(value: Optional[date]) -> Tuple[str, str]:
    """
    Split a date into ``(MM, YYYY)`` strings.

    Returns ('', '') for None or any non-date value.
    """
    if not _is_usable_date(value):
        return '', ''
    return f"{value.month:02d}", f"{value.year:04d}"


def record_to_dict(
    record: ParsedRecord,
    human_readable: bool = False,
) -> Dict[str, Any]:
    """
    Convert a ParsedRecord to a JSON-ready dict.

    Args:
        record: Decoded record
        human_readable: Use display names and drop absent fields; an
            invalid expiry is dropped too

    Returns:
        Dict with ISO dates; absent fields are None unless human_readable
    """
    data = record.to_dict()
    if not human_readable:
        return data

    output: Dict[str, Any] = {}
    for name, label in FIELD_NAMES.items():
        if name == "expiry_date":
            value = format_date_for_input(record.expiry_date)
        else:
            value = data[name]
        if value:
            output[label] = value
    return output


def record_to_json(
    record: ParsedRecord,
    human_readable: bool = False,
    indent: int = 2,
) -> str:
    """Format a ParsedRecord as a JSON string."""
    return json.dumps(
        record_to_dict(record, human_readable=human_readable),
        indent=indent,
        ensure_ascii=False,
    )


def decode_gs1_to_json(
    raw: str,
    *,
    options: Optional[DecodeOptions] = None,
    human_readable: bool = False,
) -> str:
    """
    Decode a scan and return JSON in one call.

    Example:
        >>> print(decode_gs1_to_json("(01)08712345678906(17)270815", human_readable=True))
        {
          "GTIN Code": "08712345678906",
          "Expiry Date": "2027-08-15"
        }
    """
    return record_to_json(decode_gs1(raw, options=options), human_readable=human_readable)
