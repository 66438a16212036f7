"""
t9trie.trie
===========
9-ary prefix tree over keypad keys.

Each node has one child slot per letter key (``1``..``9``) and the list of
words whose full key-encoding ends at that node. Several words can share a
node: ``home``, ``good`` and ``gone`` all encode to ``4663``.

The trie is built once and never changes afterwards, so a single instance
can serve any number of concurrent lookups.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Iterable, NamedTuple

from .errors import UnexpectedKey
from .keys import Key, encode

log = logging.getLogger(__name__)

SLOT_COUNT = 9


class TrieNode(NamedTuple):
    """Immutable trie node: one child per letter key and the words ending here."""

    children: tuple[TrieNode | None, ...]
    words: tuple[str, ...]

    def __repr__(self) -> str:
        edges = "".join(Key.from_slot(i).value for i, c in enumerate(self.children) if c)
        return f"<TrieNode edges={edges!r} words={list(self.words)!r}>"


class _ScratchNode:
    # Working storage used while inserting; frozen into TrieNode afterwards.
    __slots__ = ("children", "words")

    def __init__(self) -> None:
        self.children: list[_ScratchNode | None] = [None] * SLOT_COUNT
        self.words: list[str] = []


def _freeze(scratch_root: _ScratchNode) -> tuple[TrieNode, int, int]:
    """Deep-copy a scratch tree into TrieNodes. Returns (root, node_count, max_depth)."""
    frozen: dict[int, TrieNode] = {}
    max_depth = 0
    # Post-order walk with an explicit stack: children are frozen before parents.
    stack: list[tuple[_ScratchNode, int, bool]] = [(scratch_root, 0, False)]
    while stack:
        node, depth, expanded = stack.pop()
        if expanded:
            children = tuple(
                frozen.pop(id(child)) if child is not None else None
                for child in node.children
            )
            frozen[id(node)] = TrieNode(children, tuple(node.words))
            continue
        max_depth = max(max_depth, depth)
        stack.append((node, depth, True))
        for child in node.children:
            if child is not None:
                stack.append((child, depth + 1, False))
    root = frozen.pop(id(scratch_root))
    return root, _count_nodes(root), max_depth


def _count_nodes(root: TrieNode) -> int:
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(c for c in node.children if c is not None)
    return count


class Trie:
    """
    Read-only T9 trie.

    Usage::

        trie = Trie.build(Dictionary(["home", "good", "gone"]))
        trie.lookup(parse_sequence("4663"))   # ['home', 'good', 'gone']
    """

    __slots__ = ("_root", "_node_count", "_word_count", "_max_depth")

    def __init__(self, root: TrieNode, node_count: int = 1, word_count: int = 0, max_depth: int = 0) -> None:
        self._root = root
        self._node_count = node_count
        self._word_count = word_count
        self._max_depth = max_depth

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def max_depth(self) -> int:
        """Length of the longest stored encoding."""
        return self._max_depth

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def build(cls, dictionary: Iterable[str | bytes]) -> Trie:
        """
        Build a trie from every word in ``dictionary``.

        All-or-nothing: the first word that cannot be typed on keys 1-9
        raises :class:`~t9trie.errors.InvalidWord` and no trie is returned.
        ``bytes`` words are decoded as UTF-8.
        """
        root = _ScratchNode()
        word_count = 0

        for word in dictionary:
            if isinstance(word, bytes):
                word = word.decode("utf-8")
            node = root
            for key in encode(word):
                slot = key.slot
                child = node.children[slot]
                if child is None:
                    child = node.children[slot] = _ScratchNode()
                node = child
            node.words.append(word)
            word_count += 1

        frozen_root, node_count, max_depth = _freeze(root)
        log.debug("built trie: %d nodes, %d words, depth %d", node_count, word_count, max_depth)
        return cls(frozen_root, node_count, word_count, max_depth)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def lookup(self, sequence: Iterable[Key | str]) -> list[str]:
        """
        Return the words whose encoding is exactly ``sequence``.

        Keys ``0``, ``*`` and ``#`` raise :class:`~t9trie.errors.UnexpectedKey`.
        An unknown path is not an error and yields ``[]``.
        """
        node: TrieNode | None = self.root
        for position, key in enumerate(sequence):
            key = Key(key)
            slot = key.slot
            if slot is None:
                raise UnexpectedKey(key, position)
            node = node.children[slot]
            if node is None:
                return []
        return list(node.words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        try:
            return word in self.lookup(encode(word))
        except ValueError:
            return False

    def __len__(self) -> int:
        return self.word_count

    def __repr__(self) -> str:
        return f"<Trie {self.word_count:,} words, {self.node_count:,} nodes>"

    # ── GraphViz export ───────────────────────────────────────────────────────

    def dump_graphviz(self, stream: IO[str]) -> None:
        """Write the trie structure as a GraphViz ``digraph`` for debugging."""
        names: dict[int, str] = {id(self.root): "n0"}
        stream.write("digraph {\n")
        stream.write('  START [shape=point, label=""];\n')
        stream.write("  START -> n0;\n")

        stack = [self.root]
        while stack:
            node = stack.pop()
            name = names[id(node)]
            if node.words:
                label = ", ".join(_escape(w) for w in node.words)
                stream.write(f'  {name} [shape=box,label="{label}"];\n')
            else:
                stream.write(f'  {name} [shape=point,label=""];\n')

            for index, child in enumerate(node.children):
                if child is None:
                    continue
                child_name = names[id(child)] = f"n{len(names)}"
                stream.write(f'  {name} -> {child_name} [label="{Key.from_slot(index).value}"];\n')
            stack.extend(reversed([c for c in node.children if c is not None]))

        stream.write("}\n")

    def to_dot(self) -> str:
        buf = io.StringIO()
        self.dump_graphviz(buf)
        return buf.getvalue()


def _escape(word: str) -> str:
    return word.replace("\\", "\\\\").replace('"', '\\"')
