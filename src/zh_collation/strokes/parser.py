"""Parsing utilities for Unihan ``kTotalStrokes`` records."""

from __future__ import annotations

import re
from typing import Iterable

from zh_collation.models import StrokeEntry

STROKE_PROPERTY = "kTotalStrokes"
CODEPOINT_RE = re.compile(r"^U\+([0-9A-Fa-f]{4,6})$")
STROKE_COUNT_RE = re.compile(r"^\d+$")


def parse_codepoint(token: str) -> str | None:
    """Convert a ``U+XXXX`` token into its character.

    Args:
        token: Code point token from the first Unihan column.

    Returns:
        The character, or ``None`` when the token is malformed or out of range.
    """

    match = CODEPOINT_RE.match(token.strip())
    if not match:
        return None
    value = int(match.group(1), 16)
    if value > 0x10FFFF:
        return None
    return chr(value)


def parse_stroke_counts(value: str) -> tuple[int, int] | None:
    """Parse a ``kTotalStrokes`` value into ``(simplified, traditional)`` counts.

    Unihan stores either one count or two space-separated counts where the
    first is preferred for zh-Hans and the second for zh-Hant.

    Args:
        value: Raw property value such as ``"9"`` or ``"9 10"``.

    Returns:
        Pair of stroke counts, or ``None`` if the value is malformed.
    """

    tokens = value.split()
    if not tokens or len(tokens) > 2:
        return None
    if not all(STROKE_COUNT_RE.fullmatch(token) for token in tokens):
        return None
    counts = [int(token) for token in tokens]
    return counts[0], counts[-1]


def parse_stroke_lines(lines: Iterable[str]) -> list[StrokeEntry]:
    """Parse Unihan lines into stroke entries.

    Comments, blank lines, records for other properties and malformed lines are
    ignored, so a complete ``Unihan_*.txt`` file can be fed in directly. A later
    record for the same character replaces an earlier one.

    Args:
        lines: Iterator of raw Unihan lines.

    Returns:
        Entries in first-seen character order.
    """

    entries: dict[str, StrokeEntry] = {}
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        parts = stripped.split("\t")
        if len(parts) < 3 or parts[1] != STROKE_PROPERTY:
            continue

        character = parse_codepoint(parts[0])
        counts = parse_stroke_counts(parts[2])
        if character is None or counts is None:
            continue

        entries[character] = StrokeEntry(
            character=character,
            simplified_strokes=counts[0],
            traditional_strokes=counts[1],
        )

    return list(entries.values())


def format_stroke_line(entry: StrokeEntry) -> str:
    """Render one entry back into the Unihan line format."""

    if entry.simplified_strokes == entry.traditional_strokes:
        value = str(entry.simplified_strokes)
    else:
        value = f"{entry.simplified_strokes} {entry.traditional_strokes}"
    return f"U+{ord(entry.character):04X}\t{STROKE_PROPERTY}\t{value}"
