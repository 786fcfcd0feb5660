"""
Validation modules for GS1 intake decoding.
"""

from .validators import (
    validate_expiry_date,
    decode_yymmdd,
    ValidationResult,
    CENTURY_BASE,
)

__all__ = [
    "validate_expiry_date",
    "decode_yymmdd",
    "ValidationResult",
    "CENTURY_BASE",
]
