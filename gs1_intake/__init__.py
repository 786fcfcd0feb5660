"""
GS1 Intake Decoder

Decodes GS1 Application Identifier payloads scanned from medicine packaging
(GS1 DataMatrix, GS1-128) into product code, expiry date, batch/lot and
serial number, for auto-populating stock intake forms.

Based on the GS1 General Specifications.
"""

import logging

from .core.decoder import decode_gs1, DecodeOptions, ParsedRecord
from .core.classifier import classify, Gs1Format
from .core.normalizer import normalize
from .ai_registry import AIDefinition, AIRegistry, load_ai_registry
from .validators.validators import decode_yymmdd, validate_expiry_date
from .formatters.json_formatter import (
    format_date_for_input,
    format_date_for_month_year,
    record_to_dict,
    record_to_json,
    decode_gs1_to_json,
)
from .intake import IntakeFields, intake_fields, expiry_status

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "decode_gs1",
    "DecodeOptions",
    "ParsedRecord",
    "classify",
    "Gs1Format",
    "normalize",
    "AIDefinition",
    "AIRegistry",
    "load_ai_registry",
    "decode_yymmdd",
    "validate_expiry_date",
    "format_date_for_input",
    "format_date_for_month_year",
    "record_to_dict",
    "record_to_json",
    "decode_gs1_to_json",
    "IntakeFields",
    "intake_fields",
    "expiry_status",
]
