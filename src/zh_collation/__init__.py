"""Stroke-count collation for Chinese text."""

from .comparator import build_comparator, build_sort_key, compare
from .errors import CollationError, InvalidEncodingError
from .models import (
    CharacterClass,
    ChineseVariant,
    DigitCaseOrder,
    NumeralMode,
    Options,
    OrderingKey,
    StrokeEntry,
)
from .ranking import classify, rank, rank_text
from .sorting import sort_zh
from .strokes.repository import StrokeTable, default_stroke_table

__all__ = [
    "sort_zh",
    "compare",
    "build_comparator",
    "build_sort_key",
    "rank",
    "rank_text",
    "classify",
    "Options",
    "CharacterClass",
    "ChineseVariant",
    "DigitCaseOrder",
    "NumeralMode",
    "OrderingKey",
    "StrokeEntry",
    "StrokeTable",
    "default_stroke_table",
    "CollationError",
    "InvalidEncodingError",
]
