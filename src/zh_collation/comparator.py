"""Comparator construction from explicit collation options.

Strings are compared by the ordering key of their first character only. Two
strings whose first characters share a key compare equal; no later character
is consulted.
"""

from __future__ import annotations

from typing import Callable

from zh_collation.models import Options, OrderingKey
from zh_collation.ranking import rank_text
from zh_collation.strokes.repository import StrokeTable, default_stroke_table

SortKey = Callable[[str], OrderingKey]
Comparator = Callable[[str, str], int]


def build_sort_key(options: Options | None = None, table: StrokeTable | None = None) -> SortKey:
    """Build a ``key=`` function closing over ``options`` and ``table``.

    Args:
        options: Collation options; defaults to ``Options()``.
        table: Stroke table; defaults to the bundled table.

    Returns:
        Pure function mapping a string to its ``OrderingKey``.
    """

    resolved_options = options or Options()
    resolved_table = table if table is not None else default_stroke_table()

    def sort_key(text: str) -> OrderingKey:
        return rank_text(text, resolved_options, resolved_table)

    return sort_key


def build_comparator(
    options: Options | None = None, table: StrokeTable | None = None
) -> Comparator:
    """Build a ``cmp``-style comparator returning -1, 0 or 1.

    The result can be wrapped with :func:`functools.cmp_to_key`.
    """

    sort_key = build_sort_key(options, table)

    def comparator(left: str, right: str) -> int:
        left_key = sort_key(left)
        right_key = sort_key(right)
        return (left_key > right_key) - (left_key < right_key)

    return comparator


def compare(
    left: str,
    right: str,
    options: Options | None = None,
    table: StrokeTable | None = None,
) -> int:
    """Compare two strings by their first characters.

    Returns:
        ``-1`` if ``left`` sorts first, ``1`` if ``right`` does, ``0`` on a tie.
    """

    return build_comparator(options, table)(left, right)
