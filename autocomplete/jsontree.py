"""JSON text for arbitrarily deep object trees.

The ``json`` module recurses once per nesting level, which caps a trie blob at
a few hundred characters of word depth. These walk the tree with an explicit
stack and reuse ``json``'s own string and number scanners.
"""

from __future__ import annotations

import json
import re
from json.decoder import JSONDecodeError, scanstring
from json.scanner import NUMBER_RE
from typing import Any

_WS = re.compile(r"[ \t\n\r]*")
_LITERALS = {"true": True, "false": False, "null": None}


def dumps(obj: Any, indent: int | None = None) -> str:
    """Encode nested dicts of scalars, keys sorted, like ``json.dumps(sort_keys=True)``."""
    key_sep = ":" if indent is None else ": "

    def pad(depth: int) -> str:
        return "" if indent is None else "\n" + " " * (indent * depth)

    out: list[str] = []
    stack: list[list[Any]] = []  # [items iterator, depth, first]
    value, depth = obj, 0
    while True:
        if isinstance(value, dict) and value:
            out.append("{")
            stack.append([iter(sorted(value.items())), depth + 1, True])
        elif isinstance(value, dict):
            out.append("{}")
        else:
            out.append(json.dumps(value, ensure_ascii=False))

        while stack:
            frame = stack[-1]
            item = next(frame[0], None)
            if item is None:
                stack.pop()
                out.append(pad(frame[1] - 1) + "}")
                continue
            if not frame[2]:
                out.append(",")
            frame[2] = False
            key, value = item
            depth = frame[1]
            out.append(pad(depth) + json.dumps(key, ensure_ascii=False) + key_sep)
            break
        else:
            return "".join(out)


def loads(s: str) -> Any:
    """Decode a JSON document of any nesting depth. Raises JSONDecodeError."""

    def skip(pos: int) -> int:
        return _WS.match(s, pos).end()

    def read_key(pos: int) -> tuple[str, int]:
        if s[pos:pos + 1] != '"':
            raise JSONDecodeError("Expecting property name enclosed in double quotes", s, pos)
        key, pos = scanstring(s, pos + 1)
        pos = skip(pos)
        if s[pos:pos + 1] != ":":
            raise JSONDecodeError("Expecting ':' delimiter", s, pos)
        return key, skip(pos + 1)

    stack: list[list[Any]] = []  # [container, pending key]
    pos = skip(0)
    while True:
        ch = s[pos:pos + 1]
        if ch == "{":
            pos = skip(pos + 1)
            if s[pos:pos + 1] == "}":
                value, pos = {}, pos + 1
            else:
                key, pos = read_key(pos)
                stack.append([{}, key])
                continue
        elif ch == "[":
            pos = skip(pos + 1)
            if s[pos:pos + 1] == "]":
                value, pos = [], pos + 1
            else:
                stack.append([[], None])
                continue
        elif ch == '"':
            value, pos = scanstring(s, pos + 1)
        else:
            for word, literal in _LITERALS.items():
                if s.startswith(word, pos):
                    value, pos = literal, pos + len(word)
                    break
            else:
                m = NUMBER_RE.match(s, pos)
                if m is None:
                    raise JSONDecodeError("Expecting value", s, pos)
                integer, frac, exp = m.groups()
                if frac or exp:
                    value = float(integer + (frac or "") + (exp or ""))
                else:
                    value = int(integer)
                pos = m.end()

        # hand the finished value to its parent, closing containers as they end
        while True:
            pos = skip(pos)
            if not stack:
                if pos != len(s):
                    raise JSONDecodeError("Extra data", s, pos)
                return value
            frame = stack[-1]
            container = frame[0]
            if isinstance(container, dict):
                container[frame[1]] = value
                closer = "}"
            else:
                container.append(value)
                closer = "]"
            ch = s[pos:pos + 1]
            if ch == ",":
                pos = skip(pos + 1)
                if closer == "}":
                    frame[1], pos = read_key(pos)
                break
            if ch != closer:
                raise JSONDecodeError(f"Expecting ',' or '{closer}' delimiter", s, pos)
            stack.pop()
            value, pos = container, pos + 1
