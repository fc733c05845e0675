"""Data models shared by the ranking, comparison and sorting layers.

Options are explicit immutable values passed through every call; nothing in the
package reads global configuration. Ordering keys are derived per character and
never stored on the inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class CharacterClass(Enum):
    """Collation class of a single character.

    Every character maps to exactly one class. ``DIGIT_LOWERCASE_STYLE`` and
    ``DIGIT_UPPERCASE_STYLE`` are the two written styles of Chinese numerals
    (``一二三`` versus the financial ``壹貳參``); plain Arabic digits form their
    own class that always sorts ahead of both.
    """

    ARABIC_DIGIT = "arabic_digit"
    DIGIT_LOWERCASE_STYLE = "digit_lowercase_style"
    DIGIT_UPPERCASE_STYLE = "digit_uppercase_style"
    CHINESE_CHARACTER = "chinese_character"
    OTHER = "other"


class DigitCaseOrder(Enum):
    """Which Chinese numeral style ranks first when both appear."""

    LOWERCASE_FIRST = "lowercase_first"
    UPPERCASE_FIRST = "uppercase_first"


class NumeralMode(Enum):
    """How Chinese numeral glyphs are ranked.

    ``STROKES`` ranks numerals like any other Chinese character. ``DEFINITION``
    ranks both styles together by numeric value. ``DEFINITION_WITH_CASE`` keeps
    the styles in separate classes ordered by ``Options.digit_case_order``.
    """

    STROKES = "strokes"
    DEFINITION = "definition"
    DEFINITION_WITH_CASE = "definition-with-case"


class ChineseVariant(Enum):
    """Script variant selecting which Unihan stroke count is used."""

    TRADITIONAL = "traditional"
    SIMPLIFIED = "simplified"


@dataclass(frozen=True)
class Options:
    """Collation options.

    The defaults reproduce the documented "definition" ordering: Arabic digits,
    then lowercase-style numerals, then uppercase-style numerals, then other
    Chinese characters by traditional stroke count.
    """

    digit_case_order: DigitCaseOrder = DigitCaseOrder.LOWERCASE_FIRST
    numeral_mode: NumeralMode = NumeralMode.DEFINITION_WITH_CASE
    variant: ChineseVariant = ChineseVariant.TRADITIONAL


class OrderingKey(NamedTuple):
    """Two-level key compared lexicographically."""

    class_rank: int
    within_class_rank: int


@dataclass(frozen=True)
class StrokeEntry:
    """One parsed ``kTotalStrokes`` record.

    Unihan lists up to two counts: the first is preferred for simplified
    Chinese and the second for traditional Chinese. Single-valued records store
    the same count in both fields.
    """

    character: str
    simplified_strokes: int
    traditional_strokes: int

    def strokes_for(self, variant: ChineseVariant) -> int:
        """Return the stroke count preferred for ``variant``."""

        if variant is ChineseVariant.SIMPLIFIED:
            return self.simplified_strokes
        return self.traditional_strokes
