"""Exceptions raised at the persistence boundary."""

from __future__ import annotations


class DecodeError(ValueError):
    """A stored blob is not a valid encoding of a trie."""


class StoreError(OSError):
    """The blob store could not be read or written."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = self.args[0] if self.args else ""
        return f"{msg} ({self.path})" if self.path else msg
