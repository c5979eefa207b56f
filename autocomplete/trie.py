"""Prefix trie for word lookups, prefix lookups and completion enumeration."""

from __future__ import annotations

from json import JSONDecodeError
from typing import Any, Iterator

from autocomplete import jsontree
from autocomplete.errors import DecodeError

_NODE_KEYS = frozenset(("children", "is_end_of_word"))


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_end_of_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a.is_end_of_word != b.is_end_of_word:
                return False
            if a.children.keys() != b.children.keys():
                return False
            stack.extend((child, b.children[ch]) for ch, child in a.children.items())
        return True

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        end = " end" if self.is_end_of_word else ""
        return f"<TrieNode [{''.join(self.children)}]{end}>"


class Trie:
    """Prefix trie over single-character edges.

    The trie does no I/O of its own: ``to_bytes`` / ``from_bytes`` hand a blob
    to whatever store the caller uses.
    """

    def __init__(self):
        self.root = TrieNode()

    # mutation

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_end_of_word = True

    # lookups

    def search(self, word: str) -> bool:
        """True only if ``word`` was inserted as a complete word."""
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    def search_partial(self, prefix: str) -> TrieNode | None:
        """Node reached by spelling ``prefix``, or None if the path is missing."""
        return self._walk(prefix)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # enumeration

    @staticmethod
    def enumerate_from(node: TrieNode) -> Iterator[str]:
        """Yield the key of every edge below ``node``, depth-first pre-order.

        Children are visited in the order they were added.
        """
        stack = [iter(node.children.items())]
        while stack:
            try:
                ch, child = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            yield ch
            stack.append(iter(child.children.items()))

    @staticmethod
    def iter_words(node: TrieNode, prefix: str = "") -> Iterator[str]:
        """Yield ``prefix`` + path for every end-of-word node at or below ``node``."""
        buf = list(prefix)
        if node.is_end_of_word:
            yield prefix

        stack = [(iter(node.children.items()), len(buf))]
        while stack:
            it, depth = stack[-1]
            try:
                ch, child = next(it)
            except StopIteration:
                stack.pop()
                continue
            del buf[depth:]
            buf.append(ch)
            if child.is_end_of_word:
                yield "".join(buf)
            stack.append((iter(child.children.items()), len(buf)))

    def completions(self, prefix: str, limit: int | None = None) -> list[str]:
        """Stored words starting with ``prefix``; empty when the prefix is missing."""
        node = self.search_partial(prefix)
        if node is None:
            return []
        out: list[str] = []
        for word in self.iter_words(node, prefix):
            if limit is not None and len(out) >= limit:
                break
            out.append(word)
        return out

    # introspection

    def node_count(self) -> int:
        """Number of nodes, root included."""
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children.values())
        return total

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_words(self.root))

    def __iter__(self) -> Iterator[str]:
        return self.iter_words(self.root)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self.root == other.root

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Trie words={len(self)} nodes={self.node_count()}>"

    # serialization

    def to_dict(self) -> dict[str, Any]:
        """Nested ``{"root": {"children": {...}, "is_end_of_word": bool}}`` form."""
        out: dict[str, Any] = {"children": {}, "is_end_of_word": self.root.is_end_of_word}
        stack = [(self.root, out)]
        while stack:
            node, obj = stack.pop()
            for ch in sorted(node.children):
                child = node.children[ch]
                child_obj = {"children": {}, "is_end_of_word": child.is_end_of_word}
                obj["children"][ch] = child_obj
                stack.append((child, child_obj))
        return {"root": out}

    def dumps(self, indent: int | None = 2) -> str:
        """Human-readable rendering of the serialized tree."""
        return jsontree.dumps(self.to_dict(), indent=indent)

    def to_bytes(self) -> bytes:
        return jsontree.dumps(self.to_dict()).encode("utf-8")

    @classmethod
    def from_dict(cls, obj: Any) -> Trie:
        """Rebuild a trie from the ``to_dict`` form; raises DecodeError on schema mismatch."""
        if not isinstance(obj, dict) or "root" not in obj:
            raise DecodeError("expected an object with a 'root' key")
        if len(obj) != 1:
            extra = sorted(k for k in obj if k != "root")
            raise DecodeError(f"unexpected top-level keys: {extra}")

        trie = cls()
        stack = [(obj["root"], trie.root, "")]
        while stack:
            data, node, path = stack.pop()
            where = f"node '{path}'" if path else "root node"
            if not isinstance(data, dict):
                raise DecodeError(f"{where} is not an object")
            if data.keys() != _NODE_KEYS:
                raise DecodeError(
                    f"{where} has keys {sorted(data)}, expected {sorted(_NODE_KEYS)}"
                )
            flag = data["is_end_of_word"]
            if not isinstance(flag, bool):
                raise DecodeError(f"{where}: is_end_of_word must be a boolean")
            children = data["children"]
            if not isinstance(children, dict):
                raise DecodeError(f"{where}: children must be an object")

            node.is_end_of_word = flag
            for ch, child_data in children.items():
                if len(ch) != 1:
                    raise DecodeError(f"{where}: child key {ch!r} is not a single character")
                child = TrieNode()
                node.children[ch] = child
                stack.append((child_data, child, path + ch))
        return trie

    @classmethod
    def from_bytes(cls, data: bytes) -> Trie:
        try:
            obj = jsontree.loads(data.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise DecodeError(f"blob is not valid UTF-8: {exc}") from exc
        except JSONDecodeError as exc:
            raise DecodeError(f"blob is not valid JSON: {exc}") from exc
        return cls.from_dict(obj)
