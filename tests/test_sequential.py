"""
Tests for the GS1 Sequential Tokenizer (bracketless encoding).

Covers fixed and variable-length capture, separator handling, AI boundary
detection inside variable values, and early termination on unknown codes.
"""

import pytest

from gs1_intake.ai_registry import AIDefinition, AIRegistry, load_ai_registry
from gs1_intake.core.sequential import (
    SequentialTokenizer,
    TokenizerState,
    extract_bracketless,
    next_ai_boundary,
    tokenize_bracketless,
)

GTIN = "05012345678901"


def _fields(text, **kwargs):
    return dict(extract_bracketless(text, **kwargs))


class TestFixedAndSeparated:
    """Well-formed bracketless strings."""

    def test_group_separated_payload(self):
        """
        0105012345678901|17260430|10LOT999
        Expected: (01)05012345678901 (17)260430 (10)LOT999
        """
        tokens = list(tokenize_bracketless(f"01{GTIN}|17260430|10LOT999"))

        assert [t.code for t in tokens] == ["01", "17", "10"]
        assert [t.value for t in tokens] == [GTIN, "260430", "LOT999"]

    def test_token_positions(self):
        """Token start/end indexes point into the normalized input."""
        tokens = list(tokenize_bracketless(f"01{GTIN}|17260430|10LOT999"))

        assert [(t.start, t.end) for t in tokens] == [(0, 16), (17, 25), (26, 34)]

    def test_fixed_fields_without_separators(self):
        """Fixed-length AIs need no separator between them."""
        fields = _fields(f"01{GTIN}1726043010LOT999")

        assert fields == {"01": GTIN, "17": "260430", "10": "LOT999"}

    def test_variable_then_separator_then_serial(self):
        """Separator ends the batch and is skipped."""
        fields = _fields(f"01{GTIN}10ABC|21XYZ")

        assert fields["10"] == "ABC"
        assert fields["21"] == "XYZ"

    def test_last_variable_runs_to_end(self):
        """The final variable-length value takes the rest of the string."""
        fields = _fields(f"01{GTIN}1726043021SN987654")

        assert fields["21"] == "SN987654"


class TestVariableBoundaries:
    """Boundary detection inside variable-length values."""

    def test_known_ai_ends_variable_value(self):
        """
        0105012345678901 10ABC21XYZ
        "21" after at least one batch character starts the serial.
        """
        fields = _fields(f"01{GTIN}10ABC21XYZ")

        assert fields["10"] == "ABC"
        assert fields["21"] == "XYZ"

    def test_back_to_back_codes_do_not_yield_empty_value(self):
        """
        0105012345678901 1021A
        "21" right after "10" is batch data, not an empty batch.
        """
        fields = _fields(f"01{GTIN}1021A")

        assert fields["10"] == "21A"
        assert "21" not in fields

    def test_boundary_requires_consumed_character(self):
        """The boundary probe ignores the first value position."""
        registry = load_ai_registry()

        assert next_ai_boundary("1021A", 2, 2, registry) is None
        boundary = next_ai_boundary("1021A", 2, 1, registry)
        assert boundary is not None
        assert boundary.code == "21"

    def test_boundary_probe_no_match(self):
        """Non-AI digits are not a boundary."""
        assert next_ai_boundary("10ABC", 3, 2, load_ai_registry()) is None

    def test_count_value_ended_by_separator(self):
        """AI(30) is consumed and discarded; the batch after it survives."""
        fields = _fields(f"01{GTIN}3012|10LOT")

        assert "30" not in fields
        assert fields["10"] == "LOT"


class TestTermination:
    """Unknown codes and truncated input end the scan without errors."""

    def test_unknown_ai_stops_scan(self):
        """Fields captured before an unknown AI are kept."""
        fields = _fields(f"01{GTIN}17260430" + "99INTERNAL10LOT")

        assert fields == {"01": GTIN, "17": "260430"}

    def test_unknown_ai_right_after_gtin(self):
        fields = _fields(f"01{GTIN}ZZ")

        assert fields == {"01": GTIN}

    def test_truncated_fixed_value(self):
        """A fixed field cut short by the end of input keeps what is there."""
        tokens = list(tokenize_bracketless(f"01{GTIN}172604"))

        assert tokens[-1].code == "17"
        assert tokens[-1].value == "2604"

    def test_code_at_end_without_value(self):
        """An AI code with nothing after it produces no field."""
        fields = _fields(f"01{GTIN}10")

        assert "10" not in fields

    def test_empty_input(self):
        assert list(tokenize_bracketless("")) == []

    def test_discarded_production_date(self):
        """AI(11) is tokenized but not kept as a field."""
        text = f"01{GTIN}11250101" + "17260430"

        assert [t.code for t in tokenize_bracketless(text)] == ["01", "11", "17"]
        assert _fields(text) == {"01": GTIN, "17": "260430"}


class TestMultiWidthProbe:
    """Registries with 3- and 4-digit AI codes."""

    @pytest.fixture
    def registry(self):
        return AIRegistry([
            AIDefinition("01", "GTIN", fixed_length=14),
            AIDefinition("10", "BATCH/LOT"),
            AIDefinition("7003", "EXPIRY TIME", fixed_length=10),
            AIDefinition("24", "SHORT"),
            AIDefinition("240", "ADDITIONAL ID"),
        ])

    def test_four_digit_fixed_ai(self, registry):
        tokens = list(tokenize_bracketless(f"01{GTIN}70032604301200" + "10LOT", registry))

        assert [t.code for t in tokens] == ["01", "7003", "10"]
        assert tokens[1].value == "2604301200"

    def test_shortest_code_wins(self, registry):
        tokens = list(tokenize_bracketless(f"01{GTIN}240ABC", registry))

        assert tokens[1].code == "24"
        assert tokens[1].value == "0ABC"

    def test_custom_separator(self):
        tokenizer = SequentialTokenizer(separator="~")
        tokens = list(tokenizer.tokens(f"01{GTIN}10ABC~21XYZ"))

        assert [t.value for t in tokens] == [GTIN, "ABC", "XYZ"]


def test_states_are_named():
    """The scanner exposes its four states."""
    assert {s.value for s in TokenizerState} == {
        "scanning", "fixed_capture", "variable_capture", "terminated",
    }
