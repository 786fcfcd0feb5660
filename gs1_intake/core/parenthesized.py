"""
Extractor for the parenthesized GS1 encoding.

Human-readable interpretations print each AI in parentheses, e.g.
``(01)05012345678901(17)260430(10)LOT12345``. Each AI of interest is looked
up independently by its literal ``(code)`` marker, so missing or reordered
AIs never affect the others.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from ..ai_registry import AIDefinition, AIRegistry, RECORD_FIELDS, load_ai_registry
from .normalizer import DEFAULT_SEPARATOR


def extract_ai(
    text: str,
    definition: AIDefinition,
    separator: str = DEFAULT_SEPARATOR,
) -> Optional[str]:
    """
    Extract the value following the ``(code)`` marker of one AI.

    Fixed-length AIs take exactly the next N characters, whatever they are.
    Variable-length AIs run to the next ``(`` or separator, whichever comes
    first, with trailing separators and whitespace trimmed.

    Returns:
        The value, or None when the marker is absent or the value is empty
    """
    marker = f"({definition.code})"
    start = text.find(marker)
    if start == -1:
        return None
    start += len(marker)

    if definition.is_fixed:
        value = text[start:start + definition.fixed_length]
    else:
        end = start
        while end < len(text) and text[end] not in ('(', separator):
            end += 1
        value = text[start:end].rstrip(separator).strip()

    return value or None


def extract_parenthesized(
    text: str,
    registry: Optional[AIRegistry] = None,
    separator: str = DEFAULT_SEPARATOR,
    codes: Iterable[str] = RECORD_FIELDS,
) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(code, value)`` for every AI of interest present in ``text``.

    AIs whose marker is absent, or whose value is empty, are skipped.
    """
    registry = registry or load_ai_registry()
    for code in codes:
        definition = registry.get(code)
        if definition is None:
            continue
        value = extract_ai(text, definition, separator)
        if value is not None:
            yield code, value
