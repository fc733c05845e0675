"""Chinese numeral glyph tables.

Both traditional and simplified forms are listed. Large units such as 萬, 億
or 兆 are written the same way in both styles, so they are deliberately left
out; they rank as ordinary Chinese characters.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

LOWERCASE_NUMERALS: Mapping[str, int] = MappingProxyType(
    {
        "〇": 0,
        "零": 0,
        "一": 1,
        "二": 2,
        "三": 3,
        "四": 4,
        "五": 5,
        "六": 6,
        "七": 7,
        "八": 8,
        "九": 9,
        "十": 10,
        "百": 100,
        "千": 1000,
    }
)

UPPERCASE_NUMERALS: Mapping[str, int] = MappingProxyType(
    {
        "壹": 1,
        "貳": 2,
        "贰": 2,
        "參": 3,
        "参": 3,
        "叁": 3,
        "肆": 4,
        "伍": 5,
        "陸": 6,
        "陆": 6,
        "柒": 7,
        "捌": 8,
        "玖": 9,
        "拾": 10,
        "佰": 100,
        "仟": 1000,
    }
)


def lowercase_numeral_value(character: str) -> int | None:
    """Return the value of a lowercase-style numeral, or ``None``."""

    return LOWERCASE_NUMERALS.get(character)


def uppercase_numeral_value(character: str) -> int | None:
    """Return the value of an uppercase-style (financial) numeral, or ``None``."""

    return UPPERCASE_NUMERALS.get(character)
