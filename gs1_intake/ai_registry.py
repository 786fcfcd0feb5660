"""
AI Registry for GS1 Intake

Static table of the GS1 Application Identifiers found on medicine packaging.
The table is parsed once at import time into an immutable mapping and is
shared read-only by every decode call.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple


# Widths probed at a cursor position, shortest first
PROBE_WIDTHS: Tuple[int, ...] = (2, 3, 4)


@dataclass(frozen=True)
class AIDefinition:
    """
    A single GS1 Application Identifier.

    Attributes:
        code: The Application Identifier code (2-4 digits)
        label: Human-readable title
        fixed_length: Data length if predefined, None if variable
        max_length: Maximum data length (informational for variable AIs)
    """
    code: str
    label: str
    fixed_length: Optional[int] = None
    max_length: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        return self.fixed_length is not None


# AI     Flags  Specification   Title
RAW_AI_TABLE = """
01         *   N14             # GTIN
10             X..20           # BATCH/LOT
11         *   N6              # PROD DATE
17         *   N6              # USE BY or EXPIRY
21             X..20           # SERIAL
30             N..8            # VAR. COUNT
"""

# AIs whose values are kept on a ParsedRecord, keyed to the record field
RECORD_FIELDS: Mapping[str, str] = MappingProxyType({
    "01": "gtin",
    "17": "expiry_date_raw",
    "10": "batch",
    "21": "serial",
})

# Record fields stored with surrounding whitespace removed
TRIMMED_FIELDS = frozenset({"batch", "serial"})


def _parse_length_spec(spec: str) -> Tuple[Optional[int], int]:
    """
    Parse a syntax-dictionary length specification.

    Examples:
        "N14" -> (14, 14)
        "X..20" -> (None, 20)

    Returns:
        (fixed_length, max_length)
    """
    len_spec = spec[1:]
    if len_spec.startswith('..'):
        return None, int(len_spec[2:])
    length = int(len_spec)
    return length, length


def _parse_raw_table(raw: str = RAW_AI_TABLE) -> Iterator[AIDefinition]:
    """Parse the raw AI table text into AIDefinition objects."""
    for line in raw.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        main_part, _, title = line.partition('#')
        tokens = main_part.split()
        code = tokens[0]
        fixed_flag = len(tokens) > 2 and tokens[1] == '*'
        spec = tokens[2] if fixed_flag else tokens[1]

        fixed_length, max_length = _parse_length_spec(spec)
        if fixed_flag and fixed_length is None:
            raise ValueError(f"AI {code} flagged fixed but has variable spec {spec}")

        yield AIDefinition(
            code=code,
            label=title.strip(),
            fixed_length=fixed_length,
            max_length=max_length,
        )


class AIRegistry:
    """
    Immutable mapping from AI code to AIDefinition.

    Lookup probes 2, then 3, then 4 digits at a position and returns the
    shortest registered code, so a longer probe never swallows digits that
    belong to the following field.
    """

    def __init__(self, definitions: Iterable[AIDefinition]):
        entries: Dict[str, AIDefinition] = {}
        for definition in definitions:
            code = definition.code
            if not code.isdigit() or len(code) not in PROBE_WIDTHS:
                raise ValueError(f"AI code must be 2-4 digits, got {code!r}")
            if code in entries:
                raise ValueError(f"Duplicate AI code: {code}")
            if definition.fixed_length is not None and definition.fixed_length <= 0:
                raise ValueError(f"AI {code} fixed length must be positive")
            entries[code] = definition
        self._entries: Mapping[str, AIDefinition] = MappingProxyType(entries)

    def get(self, code: str) -> Optional[AIDefinition]:
        """Get AI definition by exact code."""
        return self._entries.get(code)

    def probe(self, text: str, pos: int = 0) -> Optional[AIDefinition]:
        """Find the shortest registered AI code starting at ``pos``."""
        for width in PROBE_WIDTHS:
            candidate = text[pos:pos + width]
            if len(candidate) < width:
                return None
            definition = self._entries.get(candidate)
            if definition is not None:
                return definition
        return None

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def entries(self) -> Mapping[str, AIDefinition]:
        """Read-only view of all definitions."""
        return self._entries


DEFAULT_REGISTRY = AIRegistry(_parse_raw_table())


def load_ai_registry() -> AIRegistry:
    """Return the process-wide registry built at import time."""
    return DEFAULT_REGISTRY
