"""
Intake helpers for the stock-entry form.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from .core.decoder import ParsedRecord
from .formatters.json_formatter import format_date_for_month_year


@dataclass(frozen=True)
class IntakeFields:
    """Values pre-filled into the intake form; '' means manual entry."""
    barcode: str
    batch_number: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    serial_number: str = ""


def intake_fields(record: ParsedRecord) -> IntakeFields:
    """
    Map a decoded record onto intake form fields.

    Non-GS1 scans keep the raw string as the lookup barcode and leave the
    rest for the operator. An invalid expiry leaves month/year empty.
    """
    if not record.is_gs1:
        return IntakeFields(barcode=record.raw)

    month, year = format_date_for_month_year(record.expiry_date)
    return IntakeFields(
        barcode=record.gtin or record.raw,
        batch_number=record.batch or "",
        expiry_month=month,
        expiry_year=year,
        serial_number=record.serial or "",
    )


def expiry_status(
    expiry_date: Optional[date],
    near_months: int,
    today: Optional[date] = None,
) -> str:
    """
    Returns: Valid, Near Expiry, Expired, Unknown
    """
    if not isinstance(expiry_date, date):
        return "Unknown"
    if isinstance(expiry_date, datetime):
        expiry_date = expiry_date.date()
    today = today or date.today()
    if isinstance(today, datetime):
        today = today.date()
    if expiry_date < today:
        return "Expired"
    threshold = today + relativedelta(months=near_months)
    if expiry_date <= threshold:
        return "Near Expiry"
    return "Valid"
