"""Exception types raised by the collation package."""

from __future__ import annotations

from typing import Sequence


class CollationError(ValueError):
    default_code = "COLLATION_ERROR"
    default_message = "Collation failed."

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        detail: str | None = None,
    ):
        self.code = code or self.default_code
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidEncodingError(CollationError):
    """Raised when one or more input items are not well-formed UTF-8 text.

    ``indexes`` holds the zero-based positions of every offending item so a
    caller can report all of them at once.
    """

    default_code = "INVALID_ENCODING"
    default_message = "Input contains text that is not valid UTF-8."

    def __init__(
        self,
        message: str | None = None,
        *,
        indexes: Sequence[int] = (),
        detail: str | None = None,
    ):
        self.indexes = tuple(indexes)
        super().__init__(message, detail=detail)
