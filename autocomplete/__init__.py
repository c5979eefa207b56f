"""Autocomplete index -- character trie with durable storage."""

from autocomplete.constants import DEFAULT_LIMIT, DEFAULT_STORE_PATH, FLUSH_MODES
from autocomplete.errors import DecodeError, StoreError
from autocomplete.trie import Trie, TrieNode
from autocomplete.store import FileStore, MemoryStore
from autocomplete.index import AutocompleteIndex
from autocomplete.cli import run_session

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_STORE_PATH",
    "FLUSH_MODES",
    "AutocompleteIndex",
    "DecodeError",
    "FileStore",
    "MemoryStore",
    "StoreError",
    "Trie",
    "TrieNode",
    "run_session",
]
