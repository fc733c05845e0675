"""Unit tests for input text validation."""

from __future__ import annotations

import pytest

from zh_collation.errors import CollationError, InvalidEncodingError
from zh_collation.validation import ensure_text


def test_ensure_text_decodes_utf8_bytes() -> None:
    assert ensure_text(["一", "二".encode("utf-8"), bytearray(b"abc")]) == ["一", "二", "abc"]


def test_ensure_text_collects_every_invalid_item() -> None:
    with pytest.raises(InvalidEncodingError) as exc_info:
        ensure_text([b"\xff\xfe", "ok", "\ud800", b"fine"])

    exc = exc_info.value
    assert exc.indexes == (0, 2)
    assert exc.code == "INVALID_ENCODING"
    assert "Invalid UTF-8 input in 2 items" in str(exc)
    assert exc.detail is not None and exc.detail.startswith("Item 0:")
    assert isinstance(exc, CollationError)
    assert isinstance(exc, ValueError)


def test_ensure_text_truncates_error_preview() -> None:
    with pytest.raises(InvalidEncodingError, match=r"\.\.\. and 5 more"):
        ensure_text([b"\xff"] * 30)


def test_ensure_text_rejects_non_text_items() -> None:
    with pytest.raises(TypeError, match="Expected str or bytes"):
        ensure_text(["一", 2])  # type: ignore[list-item]
