"""Read-only repository over stroke-count data."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property, lru_cache
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from zh_collation.models import ChineseVariant, StrokeEntry
from zh_collation.strokes.parser import parse_stroke_lines

logger = logging.getLogger(__name__)

BUNDLED_STROKES_PATH = Path(__file__).resolve().parent / "data" / "kTotalStrokes.txt"


@dataclass(frozen=True)
class StrokeTable:
    """Character to stroke-count lookup backed by a Unihan-format file.

    The file is parsed once on first access and the resulting indexes are
    cached on the instance. Nothing mutates them afterwards, so a single table
    can be shared by any number of concurrent sorts.
    """

    path: Path

    @cached_property
    def entries(self) -> tuple[StrokeEntry, ...]:
        """Load and cache parsed entries from disk.

        Returns:
            Immutable tuple of stroke entries.

        Raises:
            FileNotFoundError: If the configured data file does not exist.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"Stroke data file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            parsed = parse_stroke_lines(handle)

        logger.info("Loaded %d stroke entries from %s", len(parsed), self.path)
        return tuple(parsed)

    @cached_property
    def entries_by_character(self) -> Mapping[str, StrokeEntry]:
        """Build and cache the read-only character-indexed entry map."""

        return MappingProxyType({entry.character: entry for entry in self.entries})

    @cached_property
    def max_strokes(self) -> int:
        """Largest stroke count in the table across both variants, or 0 when empty."""

        return max(
            (max(entry.simplified_strokes, entry.traditional_strokes) for entry in self.entries),
            default=0,
        )

    def lookup(
        self, character: str, variant: ChineseVariant = ChineseVariant.TRADITIONAL
    ) -> int | None:
        """Return the stroke count of ``character`` for ``variant``.

        Args:
            character: Single character to look up.
            variant: Script variant selecting between dual Unihan counts.

        Returns:
            Stroke count, or ``None`` when the character is not in the table.
        """

        entry = self.entries_by_character.get(character)
        if entry is None:
            return None
        return entry.strokes_for(variant)

    def __contains__(self, character: object) -> bool:
        return character in self.entries_by_character

    def __len__(self) -> int:
        return len(self.entries)


@lru_cache(maxsize=None)
def default_stroke_table() -> StrokeTable:
    """Return the process-wide table loaded from the bundled data file."""

    return StrokeTable(BUNDLED_STROKES_PATH)
