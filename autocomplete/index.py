"""Autocomplete index: a trie plus the store it is loaded from and flushed to."""

from __future__ import annotations

import logging

from autocomplete.constants import FLUSH_EXIT, FLUSH_MODES, FLUSH_NEVER, FLUSH_WORD
from autocomplete.store import MemoryStore
from autocomplete.trie import Trie, TrieNode

log = logging.getLogger("autocomplete")


class AutocompleteIndex:
    """Word index with trie-backed completion and explicit persistence.

    The trie itself never touches storage. ``flush_mode`` picks the cadence:
    ``"word"`` writes after every added word, ``"exit"`` only on ``close()``,
    ``"never"`` keeps everything in memory.
    """

    def __init__(self, store=None, flush_mode: str = FLUSH_WORD):
        if flush_mode not in FLUSH_MODES:
            raise ValueError(f"flush_mode must be one of {FLUSH_MODES}, got {flush_mode!r}")
        self.store = store if store is not None else MemoryStore()
        self.flush_mode = flush_mode
        self.trie = Trie()
        self.dirty = False

    def load(self) -> None:
        """Replace the in-memory trie with the stored one.

        An empty store starts a fresh trie. StoreError and DecodeError
        propagate; a malformed blob is never partially loaded.
        """
        data = self.store.load_bytes()
        if data is None:
            log.info("No stored index at %s -- starting empty.", self.store)
            self.trie = Trie()
        else:
            self.trie = Trie.from_bytes(data)
            log.info("Loaded %s words from %s", f"{len(self.trie):,}", self.store)
        self.dirty = False

    def add(self, word: str) -> None:
        self.trie.insert(word)
        self.dirty = True
        log.debug("Inserted %r", word)
        if self.flush_mode == FLUSH_WORD:
            self.flush()

    def flush(self) -> bool:
        """Write the trie to the store if it changed. Returns True on a write."""
        if not self.dirty or self.flush_mode == FLUSH_NEVER:
            return False
        self.store.store_bytes(self.trie.to_bytes())
        self.dirty = False
        log.debug("Flushed index to %s", self.store)
        return True

    def close(self) -> None:
        if self.flush_mode in (FLUSH_WORD, FLUSH_EXIT):
            self.flush()

    def __enter__(self) -> AutocompleteIndex:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # don't persist a session that died mid-way
        if exc_type is None:
            self.close()

    # lookups

    def contains(self, word: str) -> bool:
        return self.trie.search(word)

    def lookup(self, prefix: str) -> TrieNode | None:
        return self.trie.search_partial(prefix)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        return self.trie.completions(prefix, limit)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self.trie)
