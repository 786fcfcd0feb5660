"""
GS1 Sequential Tokenizer

Left-to-right scanner for the bracketless GS1 encoding, where AI codes and
values run together, e.g. ``0105012345678901<GS>17260430<GS>10LOT999``.

Field boundaries come from two sources only:
- the fixed length of an AI (01, 17, 11)
- for variable-length AIs (10, 21, 30): the separator, the next recognized
  AI code, or the end of the string

Unlike a solver, the scanner never backtracks: each position is visited once
and an unknown code ends the scan, keeping everything captured so far.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from ..ai_registry import (
    AIDefinition,
    AIRegistry,
    RECORD_FIELDS,
    load_ai_registry,
)
from .normalizer import DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)


class TokenizerState(str, Enum):
    """Scanner states."""
    SCANNING = "scanning"
    FIXED_CAPTURE = "fixed_capture"
    VARIABLE_CAPTURE = "variable_capture"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Token:
    """
    A recognized AI and its value.

    Attributes:
        definition: Matched AI definition
        value: Captured value (untrimmed)
        start: Index of the AI code in the input
        end: Index just past the value
    """
    definition: AIDefinition
    value: str
    start: int
    end: int

    @property
    def code(self) -> str:
        return self.definition.code


def next_ai_boundary(
    text: str,
    pos: int,
    value_start: int,
    registry: AIRegistry,
) -> Optional[AIDefinition]:
    """
    Probe for an AI code that would end a variable-length value at ``pos``.

    A boundary only counts once the value holds at least one character,
    so two AI codes back to back never produce an empty value.

    Returns:
        The AI starting at ``pos``, or None if ``pos`` is not a boundary
    """
    if pos <= value_start:
        return None
    return registry.probe(text, pos)


class SequentialTokenizer:
    """
    Finite-state scanner over a normalized bracketless string.

    SCANNING probes the registry at the cursor; a match moves to
    FIXED_CAPTURE or VARIABLE_CAPTURE, which emit a Token and return to
    SCANNING. No match, or the end of input, moves to TERMINATED.
    """

    def __init__(
        self,
        registry: Optional[AIRegistry] = None,
        separator: str = DEFAULT_SEPARATOR,
    ):
        self.registry = registry or load_ai_registry()
        self.separator = separator

    def _capture_variable(self, text: str, pos: int) -> Tuple[str, int]:
        """
        Read a variable-length value starting at ``pos``.

        Returns:
            (value, next_cursor)
        """
        end = pos
        while end < len(text):
            if text[end] == self.separator:
                return text[pos:end], end + 1
            if next_ai_boundary(text, end, pos, self.registry):
                return text[pos:end], end
            end += 1
        return text[pos:], len(text)

    def tokens(self, text: str) -> Iterator[Token]:
        """Yield tokens in input order until the scanner terminates."""
        state = TokenizerState.SCANNING
        pos = 0
        ai_start = 0
        definition: Optional[AIDefinition] = None

        while state is not TokenizerState.TERMINATED:
            if state is TokenizerState.SCANNING:
                if pos >= len(text):
                    state = TokenizerState.TERMINATED
                    continue

                # Redundant FNC1 after a fixed-length field
                if text[pos] == self.separator:
                    pos += 1
                    continue

                definition = self.registry.probe(text, pos)
                if definition is None:
                    logger.debug("No AI at position %d (%r); stopping", pos, text[pos:pos + 4])
                    state = TokenizerState.TERMINATED
                    continue

                ai_start = pos
                pos += len(definition.code)
                state = (
                    TokenizerState.FIXED_CAPTURE
                    if definition.is_fixed
                    else TokenizerState.VARIABLE_CAPTURE
                )

            elif state is TokenizerState.FIXED_CAPTURE:
                end = min(pos + definition.fixed_length, len(text))
                value = text[pos:end]
                pos = end
                yield Token(definition, value, ai_start, end)
                state = TokenizerState.SCANNING

            else:
                value, next_pos = self._capture_variable(text, pos)
                yield Token(definition, value, ai_start, pos + len(value))
                pos = next_pos
                state = TokenizerState.SCANNING


def tokenize_bracketless(
    text: str,
    registry: Optional[AIRegistry] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> Iterator[Token]:
    """Tokenize a normalized bracketless GS1 string."""
    return SequentialTokenizer(registry, separator).tokens(text)


def extract_bracketless(
    text: str,
    registry: Optional[AIRegistry] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(code, value)`` for the AIs kept on a ParsedRecord.

    Other recognized AIs are consumed to keep the cursor aligned and then
    dropped. Empty values are skipped.
    """
    for token in tokenize_bracketless(text, registry, separator):
        if token.code not in RECORD_FIELDS:
            logger.debug("Discarding AI(%s) value %r", token.code, token.value)
            continue
        if token.value:
            yield token.code, token.value
