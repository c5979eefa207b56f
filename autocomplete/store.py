"""Blob stores the index loads from and flushes to."""

from __future__ import annotations

import contextlib
import logging
import os

from autocomplete.errors import StoreError

log = logging.getLogger("autocomplete")


class FileStore:
    """Whole-file blob store.

    ``load_bytes`` returns None when the file does not exist yet.
    ``store_bytes`` writes a sibling temp file and renames it over the
    target, so the previous blob survives a failed write.
    """

    def __init__(self, path: str):
        self.path = path

    def load_bytes(self) -> bytes | None:
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreError(f"cannot read blob: {exc.strerror or exc}", self.path) from exc
        log.debug("Read %d bytes from %s", len(data), self.path)
        return data

    def store_bytes(self, data: bytes) -> None:
        tmp_path = self.path + ".tmp"
        try:
            parent = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(parent, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(data)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
            raise StoreError(f"cannot write blob: {exc.strerror or exc}", self.path) from exc
        log.debug("Wrote %d bytes to %s", len(data), self.path)

    def __repr__(self) -> str:
        return f"FileStore({self.path!r})"


class MemoryStore:
    """In-process blob store, for tests and sessions that never touch disk."""

    def __init__(self, initial: bytes | None = None):
        self.data = initial
        self.writes = 0

    def load_bytes(self) -> bytes | None:
        return self.data

    def store_bytes(self, data: bytes) -> None:
        self.data = bytes(data)
        self.writes += 1

    def __repr__(self) -> str:
        size = "empty" if self.data is None else f"{len(self.data)} bytes"
        return f"MemoryStore({size})"
