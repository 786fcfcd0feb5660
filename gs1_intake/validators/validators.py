"""
GS1 Date Validation

Validates and converts the YYMMDD dates carried by AI(17) expiry and
AI(11) production date fields.

Century policy is fixed: YY always maps to 20YY (2000-2099). Packaging
dates are never interpreted with a sliding century window.
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


CENTURY_BASE = 2000


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def validate_expiry_date(value: Optional[str]) -> ValidationResult:
    """
    Validate a 6-digit YYMMDD date.

    Month and day ranges are checked before the calendar is consulted, so
    values like ``261332`` are rejected without building a date. Day 30 in
    February and similar are rejected against the real month length rather
    than rolled over into the next month.

    Args:
        value: Date string, e.g. "260430" for 30 April 2026

    Returns:
        ValidationResult with year/month/day/iso_date/date in meta
    """
    result = ValidationResult(valid=True)

    # GS1 N6 is ASCII only; str.isdigit() also accepts '²' and full-width digits
    if not value or len(value) != 6 or not (value.isascii() and value.isdigit()):
        result.valid = False
        result.errors.append(f"YYMMDD date must be 6 digits, got {value!r}")
        return result

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])
    year = CENTURY_BASE + yy

    if mm < 1 or mm > 12:
        result.valid = False
        result.errors.append(f"Invalid month: {mm}")
        return result

    if dd < 1 or dd > 31:
        result.valid = False
        result.errors.append(f"Invalid day: {dd}")
        return result

    max_day = monthrange(year, mm)[1]
    if dd > max_day:
        result.valid = False
        result.errors.append(f"Day {dd} invalid for month {mm} in year {year}")
        return result

    decoded = date(year, mm, dd)
    if (decoded.year, decoded.month, decoded.day) != (year, mm, dd):
        result.valid = False
        result.errors.append(f"Date {value} does not round-trip")
        return result

    result.meta['year'] = year
    result.meta['month'] = mm
    result.meta['day'] = dd
    result.meta['iso_date'] = decoded.isoformat()
    result.meta['date'] = decoded

    return result


def decode_yymmdd(value: Optional[str]) -> Optional[date]:
    """
    Convert a YYMMDD string to a date.

    Returns:
        The calendar date, or None when the value is not a real date
    """
    result = validate_expiry_date(value)
    if not result.valid:
        return None
    return result.meta['date']
