"""
Input normalization for scanned GS1 payloads.

Scanners emit the GS1 group separator (ASCII 29) and, depending on the
keyboard-emulation setup, other control bytes. Every control character is
mapped to a single reserved separator so later stages only look for one.
"""

from __future__ import annotations

import re

# ASCII 0x00-0x1F and 0x7F
CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')

# Outside GS1 CSET 82, so it cannot occur in AI data
DEFAULT_SEPARATOR = '|'


def normalize(raw: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Normalize a raw scan string.

    - Replaces control characters with ``separator``
    - Trims surrounding whitespace
    - Strips leading/trailing runs of ``separator``

    Returns:
        Normalized string ('' for empty input)
    """
    if not raw:
        return ''

    # A callable replacement keeps '\' in the separator literal
    text = CONTROL_CHARS.sub(lambda _: separator, raw).strip()
    return text.strip(separator)
