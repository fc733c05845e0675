"""Per-character ranking used to build collation keys.

Class ranks, lowest first:

0. empty string (no first character)
1. Arabic digits (any Unicode decimal digit)
2. the Chinese numeral style selected first by ``Options.digit_case_order``
3. the other numeral style (shares rank 2 under ``NumeralMode.DEFINITION``)
4. Chinese characters, ranked by stroke count
5. everything else, ranked by code point

Characters with equal keys are not separated further; callers rely on a stable
sort to keep their input order.
"""

from __future__ import annotations

import unicodedata

from pypinyin import constants as pypinyin_constants

from zh_collation.models import (
    CharacterClass,
    DigitCaseOrder,
    NumeralMode,
    Options,
    OrderingKey,
)
from zh_collation.numerals import (
    LOWERCASE_NUMERALS,
    UPPERCASE_NUMERALS,
    lowercase_numeral_value,
    uppercase_numeral_value,
)
from zh_collation.strokes.repository import StrokeTable, default_stroke_table

EMPTY_RANK = 0
ARABIC_DIGIT_RANK = 1
FIRST_NUMERAL_STYLE_RANK = 2
SECOND_NUMERAL_STYLE_RANK = 3
CHINESE_CHARACTER_RANK = 4
OTHER_RANK = 5

EMPTY_KEY = OrderingKey(EMPTY_RANK, 0)


def is_hanzi(character: str) -> bool:
    """Return whether ``character`` is a Han ideograph with a known reading.

    Recognition uses the pypinyin character dictionary, which covers the CJK
    unified ideograph blocks including the supplementary-plane extensions.
    """

    return ord(character) in pypinyin_constants.PINYIN_DICT


def _require_single_character(character: str) -> None:
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}.")


def classify(
    character: str,
    options: Options | None = None,
    table: StrokeTable | None = None,
) -> CharacterClass:
    """Assign ``character`` to exactly one collation class.

    Args:
        character: Single character to classify.
        options: Collation options; numerals are only recognized outside
            ``NumeralMode.STROKES``.
        table: Stroke table used to recognize Chinese characters.

    Returns:
        The character's class.

    Raises:
        ValueError: If ``character`` is not exactly one code point long.
    """

    _require_single_character(character)
    options = options or Options()
    table = table if table is not None else default_stroke_table()

    if unicodedata.decimal(character, None) is not None:
        return CharacterClass.ARABIC_DIGIT
    if options.numeral_mode is not NumeralMode.STROKES:
        if lowercase_numeral_value(character) is not None:
            return CharacterClass.DIGIT_LOWERCASE_STYLE
        if uppercase_numeral_value(character) is not None:
            return CharacterClass.DIGIT_UPPERCASE_STYLE
    if character in table or is_hanzi(character):
        return CharacterClass.CHINESE_CHARACTER
    return CharacterClass.OTHER


def class_rank(character_class: CharacterClass, options: Options) -> int:
    """Map a character class to its rank under ``options``."""

    if character_class is CharacterClass.ARABIC_DIGIT:
        return ARABIC_DIGIT_RANK
    if character_class is CharacterClass.CHINESE_CHARACTER:
        return CHINESE_CHARACTER_RANK
    if character_class is CharacterClass.OTHER:
        return OTHER_RANK

    if options.numeral_mode is NumeralMode.DEFINITION:
        return FIRST_NUMERAL_STYLE_RANK

    first_style = (
        CharacterClass.DIGIT_LOWERCASE_STYLE
        if options.digit_case_order is DigitCaseOrder.LOWERCASE_FIRST
        else CharacterClass.DIGIT_UPPERCASE_STYLE
    )
    if character_class is first_style:
        return FIRST_NUMERAL_STYLE_RANK
    return SECOND_NUMERAL_STYLE_RANK


def rank(
    character: str,
    options: Options | None = None,
    table: StrokeTable | None = None,
) -> OrderingKey:
    """Compute the ordering key of one character.

    Within-class ranks are the digit value for Arabic digits, the numeric value
    for Chinese numerals, the stroke count for Chinese characters and the code
    point for everything else. A Han ideograph missing from ``table`` ranks one
    past the table's largest stroke count, after every mapped character.

    Args:
        character: Single character to rank.
        options: Collation options; defaults to ``Options()``.
        table: Stroke table; defaults to the bundled table.

    Returns:
        The character's ``OrderingKey``.

    Raises:
        ValueError: If ``character`` is not exactly one code point long.
    """

    options = options or Options()
    table = table if table is not None else default_stroke_table()
    character_class = classify(character, options, table)
    key_class = class_rank(character_class, options)

    if character_class is CharacterClass.ARABIC_DIGIT:
        within = unicodedata.decimal(character)
    elif character_class is CharacterClass.DIGIT_LOWERCASE_STYLE:
        within = LOWERCASE_NUMERALS[character]
    elif character_class is CharacterClass.DIGIT_UPPERCASE_STYLE:
        within = UPPERCASE_NUMERALS[character]
    elif character_class is CharacterClass.CHINESE_CHARACTER:
        strokes = table.lookup(character, options.variant)
        within = strokes if strokes is not None else table.max_strokes + 1
    else:
        within = ord(character)

    return OrderingKey(key_class, within)


def rank_text(
    text: str,
    options: Options | None = None,
    table: StrokeTable | None = None,
) -> OrderingKey:
    """Rank a string by its first character; the empty string ranks lowest."""

    if not text:
        return EMPTY_KEY
    return rank(text[0], options, table)

