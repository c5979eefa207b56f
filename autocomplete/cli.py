"""Interactive terminal session for the autocomplete index."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from autocomplete.constants import DEFAULT_LIMIT, PROMPT
from autocomplete.index import AutocompleteIndex


def prompt_lines(prompt: str = PROMPT) -> Iterable[str]:
    """Yield lines typed at the terminal until EOF or Ctrl-C."""
    while True:
        try:
            yield input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return


def run_session(
    index: AutocompleteIndex,
    lines: Iterable[str],
    out: TextIO | None = None,
    limit: int | None = DEFAULT_LIMIT,
    dump: bool = False,
) -> int:
    """Feed words into ``index`` until a blank line. Returns the number added.

    For each word the existing completions are shown first, then the word
    is inserted (and flushed, depending on the index's flush mode).
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be a positive integer or None, got {limit!r}")
    out = out or sys.stdout

    def emit(text: str) -> None:
        print(text, file=out)

    added = 0

    for line in lines:
        word = line.strip()
        if not word:
            break
        emit(f"You entered: {word}")

        if index.lookup(word) is not None:
            matches = index.complete(word, limit)
            emit(f"Completions for '{word}': {', '.join(matches)}")
        else:
            emit(f"No match for '{word}'")

        index.add(word)
        added += 1
        if dump:
            emit(index.trie.dumps())

    return added
