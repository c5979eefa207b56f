#!/usr/bin/env python3
"""
Autocomplete Engine

Reads words from the terminal one per line, shows the stored words each
one completes to, and adds it to a trie-backed index that is persisted
to a JSON file between sessions. A blank line ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys

from autocomplete.cli import prompt_lines, run_session
from autocomplete.constants import (
    DEFAULT_LIMIT,
    DEFAULT_STORE_PATH,
    FLUSH_EXIT,
    FLUSH_NEVER,
    FLUSH_WORD,
)
from autocomplete.errors import DecodeError, StoreError
from autocomplete.index import AutocompleteIndex
from autocomplete.store import FileStore, MemoryStore


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("autocomplete")


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Autocomplete Engine -- interactive trie-backed word completion",
    )
    parser.add_argument("--store", type=str, default=DEFAULT_STORE_PATH,
                        help="Path of the JSON file the index is kept in")
    parser.add_argument("--no-persist", action="store_true",
                        help="Keep the index in memory only")
    parser.add_argument("--flush", choices=(FLUSH_WORD, FLUSH_EXIT), default=FLUSH_WORD,
                        help="Write the index after every word, or once on exit")
    parser.add_argument("--limit", type=positive_int, default=DEFAULT_LIMIT,
                        help="Maximum completions shown per word")
    parser.add_argument("--dump", action="store_true",
                        help="Print the serialized tree after every insert")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.no_persist:
        index = AutocompleteIndex(MemoryStore(), flush_mode=FLUSH_NEVER)
    else:
        index = AutocompleteIndex(FileStore(args.store), flush_mode=args.flush)

    print("AUTOCOMPLETE ENGINE -- Trie Word Index")

    try:
        index.load()
        with index:
            added = run_session(index, prompt_lines(), limit=args.limit, dump=args.dump)
    except DecodeError as exc:
        log.error("Stored index is corrupt: %s", exc)
        return 1
    except StoreError as exc:
        log.error("Storage failure: %s", exc)
        return 1

    log.info("Session ended -- %d word(s) added, %s stored.", added, f"{len(index):,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
