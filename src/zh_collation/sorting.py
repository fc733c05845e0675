"""Sort entry point for Chinese stroke-order collation."""

from __future__ import annotations

import logging
from typing import Sequence

from zh_collation.comparator import build_sort_key
from zh_collation.models import Options
from zh_collation.strokes.repository import StrokeTable
from zh_collation.validation import ensure_text

logger = logging.getLogger(__name__)


def sort_zh(
    items: Sequence[str | bytes],
    options: Options | None = None,
    table: StrokeTable | None = None,
) -> list[str]:
    """Return ``items`` ordered by stroke-count collation.

    The input sequence is left untouched and a new list is returned. Python's
    ``sorted`` is stable, so items whose first characters tie keep their input
    order; that stability is the only ordering guarantee past the first
    character.

    Args:
        items: Strings, or UTF-8 encoded bytes, to order.
        options: Collation options; defaults to ``Options()``.
        table: Stroke table; defaults to the bundled table.

    Returns:
        New list of decoded strings in collation order.

    Raises:
        InvalidEncodingError: If any item is not well-formed UTF-8 text. No
            partial result is produced.
        TypeError: If any item is neither ``str`` nor ``bytes``.
    """

    texts = ensure_text(items)
    sort_key = build_sort_key(options, table)
    ordered = sorted(texts, key=sort_key)
    logger.debug("Sorted %d items with %s", len(ordered), options or Options())
    return ordered
