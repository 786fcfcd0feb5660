"""
Core decoding modules for GS1 intake.
"""

from .normalizer import normalize, DEFAULT_SEPARATOR
from .classifier import classify, Gs1Format
from .parenthesized import extract_ai, extract_parenthesized
from .sequential import (
    SequentialTokenizer,
    Token,
    TokenizerState,
    extract_bracketless,
    next_ai_boundary,
    tokenize_bracketless,
)
from .decoder import decode_gs1, DecodeOptions, ParsedRecord

__all__ = [
    "normalize",
    "DEFAULT_SEPARATOR",
    "classify",
    "Gs1Format",
    "extract_ai",
    "extract_parenthesized",
    "SequentialTokenizer",
    "Token",
    "TokenizerState",
    "extract_bracketless",
    "next_ai_boundary",
    "tokenize_bracketless",
    "decode_gs1",
    "DecodeOptions",
    "ParsedRecord",
]
