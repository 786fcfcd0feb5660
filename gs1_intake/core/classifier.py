"""
Format classification for normalized scan strings.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Gs1Format(str, Enum):
    """Recognized GS1 encodings."""
    PARENTHESIZED = "parenthesized"
    BRACKETLESS = "bracketless"


# (NN) marker in the AI ranges used on packaging: 00-09, 10-17, 20-21, 30-39
PARENTHESIZED_PATTERN = re.compile(r'\((?:0\d|1[0-7]|2[01]|3\d)\)')

# AI 01 followed by a 14-digit GTIN at the very start
BRACKETLESS_PATTERN = re.compile(r'^01\d{14}')


def classify(normalized: str) -> Optional[Gs1Format]:
    """
    Decide which GS1 encoding a normalized string uses.

    Parenthesized markers win over the bracketless prefix when both match.

    Returns:
        The detected Gs1Format, or None for a non-GS1 barcode
    """
    if PARENTHESIZED_PATTERN.search(normalized):
        detected = Gs1Format.PARENTHESIZED
    elif BRACKETLESS_PATTERN.match(normalized):
        detected = Gs1Format.BRACKETLESS
    else:
        detected = None

    logger.debug("Classified %r as %s", normalized, detected.value if detected else "non-GS1")
    return detected
