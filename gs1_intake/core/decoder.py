"""
GS1 Intake Decoder

Turns a raw scan from medicine packaging into a ParsedRecord:

    raw -> normalize -> classify -> {parenthesized | sequential} extraction
        -> expiry date decoding -> ParsedRecord

Decoding is fail-soft. Non-GS1 input, missing AIs and impossible dates are
normal outcomes, and any unexpected failure during extraction is downgraded
to a partial record. ``decode_gs1`` never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

from ..ai_registry import AIRegistry, RECORD_FIELDS, TRIMMED_FIELDS, load_ai_registry
from .classifier import Gs1Format, classify
from .normalizer import DEFAULT_SEPARATOR, normalize
from .parenthesized import extract_parenthesized
from .sequential import extract_bracketless
from ..validators.validators import decode_yymmdd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeOptions:
    """
    Configuration options for decoding.

    Attributes:
        separator: Reserved character control characters are mapped to
        registry: AI registry used for lookups (process-wide one by default)
    """
    separator: str = DEFAULT_SEPARATOR
    registry: AIRegistry = field(default_factory=load_ai_registry)

    def __post_init__(self):
        sep = self.separator
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"Separator must be a single character, got {sep!r}")
        if sep.isalnum() or sep.isspace() or sep in '()':
            raise ValueError(f"Separator {sep!r} can occur in GS1 payload data")


@dataclass(frozen=True)
class ParsedRecord:
    """
    Structured result of decoding one scan.

    Absent fields are None, never ''. ``expiry_date`` is None both when no
    expiry was scanned and when ``expiry_date_raw`` is not a real date.

    Attributes:
        raw: Original input string
        is_gs1: Whether the input was recognized as GS1
        encoding: Detected encoding, None for non-GS1 input
        gtin: 14-digit product code (AI 01)
        expiry_date_raw: YYMMDD expiry as scanned (AI 17)
        expiry_date: Decoded expiry date
        batch: Batch/lot number (AI 10)
        serial: Serial number (AI 21)
    """
    raw: str
    is_gs1: bool = False
    encoding: Optional[Gs1Format] = None
    gtin: Optional[str] = None
    expiry_date_raw: Optional[str] = None
    expiry_date: Optional[date] = None
    batch: Optional[str] = None
    serial: Optional[str] = None

    @property
    def has_invalid_expiry(self) -> bool:
        """True when an expiry was scanned but is not a calendar date."""
        return self.expiry_date_raw is not None and self.expiry_date is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'is_gs1': self.is_gs1,
            'encoding': self.encoding.value if self.encoding else None,
            'gtin': self.gtin,
            'expiry_date_raw': self.expiry_date_raw,
            'expiry_date': self.expiry_date.isoformat() if self.expiry_date else None,
            'batch': self.batch,
            'serial': self.serial,
        }


_DEFAULT_OPTIONS = DecodeOptions()


def _collect_fields(
    normalized: str,
    encoding: Gs1Format,
    options: DecodeOptions,
    fields: Dict[str, Any],
) -> None:
    """Populate ``fields`` in place so a failure keeps what came before it."""
    if encoding is Gs1Format.PARENTHESIZED:
        pairs = extract_parenthesized(normalized, options.registry, options.separator)
    else:
        pairs = extract_bracketless(normalized, options.registry, options.separator)

    for code, value in pairs:
        name = RECORD_FIELDS[code]
        if name in TRIMMED_FIELDS:
            value = value.strip()
        if value:
            fields[name] = value

    expiry_raw = fields.get('expiry_date_raw')
    if expiry_raw is not None and len(expiry_raw) == 6:
        fields['expiry_date'] = decode_yymmdd(expiry_raw)


def decode_gs1(
    raw: Optional[str],
    *,
    options: Optional[DecodeOptions] = None,
) -> ParsedRecord:
    """
    Decode a raw barcode payload.

    Main entry point for the decoder.

    Args:
        raw: Scanned string, possibly empty or containing control characters
        options: Optional decoding configuration

    Returns:
        ParsedRecord; ``is_gs1`` is False with only ``raw`` set when the
        input matches neither GS1 encoding

    Examples:
        >>> record = decode_gs1("(01)05012345678901(17)260430(10)LOT12345")
        >>> record.gtin
        '05012345678901'
        >>> record.expiry_date
        datetime.date(2026, 4, 30)
    """
    options = options or _DEFAULT_OPTIONS
    if raw is None:
        raw = ''

    try:
        normalized = normalize(raw, options.separator)
        encoding = classify(normalized)
    except Exception:
        logger.warning("Could not classify scan %r; treating as non-GS1", raw, exc_info=True)
        return ParsedRecord(raw=raw)

    if encoding is None:
        return ParsedRecord(raw=raw)

    fields: Dict[str, Any] = {}
    try:
        _collect_fields(normalized, encoding, options, fields)
    except Exception:
        logger.warning(
            "GS1 extraction failed for %r; returning %d field(s) decoded so far",
            raw, len(fields), exc_info=True,
        )

    return ParsedRecord(raw=raw, is_gs1=True, encoding=encoding, **fields)
