"""Exceptions raised for malformed tag input and invalid tag construction."""

from __future__ import annotations


class InvalidTagError(ValueError):
    """A tag could not be constructed or a recognizer was called incorrectly.

    Raised for caller errors: an empty tag body, a missing resolver or
    description factory, an empty method name, an invalid author e-mail.
    Input that merely fails to match a tag grammar is not an error; the
    recognizers return None for that.
    """

    def __init__(self, message: str, *, tag: str | None = None) -> None:
        super().__init__(message)
        self.tag = tag


__all__ = ["InvalidTagError"]
