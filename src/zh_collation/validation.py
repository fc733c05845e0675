"""Input validation for text handed to the sort entry point."""

from __future__ import annotations

from typing import Sequence

from zh_collation.errors import InvalidEncodingError

PREVIEW_LIMIT = 25


def _decode_item(item: str | bytes) -> str:
    """Return ``item`` as well-formed text.

    Raises:
        UnicodeDecodeError: If ``item`` bytes cannot be decoded.
        UnicodeEncodeError: If ``item`` text contains lone surrogates.
        TypeError: If ``item`` is neither ``str`` nor ``bytes``.
    """

    if isinstance(item, (bytes, bytearray)):
        return bytes(item).decode("utf-8", errors="strict")
    if isinstance(item, str):
        item.encode("utf-8", errors="strict")
        return item
    raise TypeError(f"Expected str or bytes, got {type(item).__name__}.")


def ensure_text(items: Sequence[str | bytes]) -> list[str]:
    """Decode and validate every item, failing the whole call on bad input.

    ``bytes`` items are decoded as strict UTF-8; ``str`` items must not contain
    lone surrogates. All offending items are collected before raising.

    Args:
        items: Input sequence of text or UTF-8 encoded bytes.

    Returns:
        New list of decoded strings in input order.

    Raises:
        InvalidEncodingError: If any item is not well-formed UTF-8 text.
        TypeError: If any item is neither ``str`` nor ``bytes``.
    """

    texts: list[str] = []
    errors: list[str] = []
    bad_indexes: list[int] = []

    for idx, item in enumerate(items):
        try:
            texts.append(_decode_item(item))
        except (UnicodeDecodeError, UnicodeEncodeError) as exc:
            bad_indexes.append(idx)
            errors.append(f"Item {idx}: {exc.reason} at position {exc.start}")

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:PREVIEW_LIMIT])
        rest = len(errors) - min(PREVIEW_LIMIT, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise InvalidEncodingError(
            f"Invalid UTF-8 input in {len(errors)} items:\n{preview}{more}",
            indexes=bad_indexes,
            detail=errors[0],
        )

    return texts
