"""
t9trie.errors
=============
Exceptions raised by the trie core.
"No match" is never an error: lookups return an empty list instead.
"""

from __future__ import annotations


class T9Error(Exception):
    """Base class for every error raised by t9trie."""


class InvalidWord(T9Error, ValueError):
    """A word contains a character that cannot be typed on keys 1-9."""

    def __init__(self, word: str, char: str | None = None, position: int = 0) -> None:
        self.word = word
        self.char = char
        self.position = position
        if char is None:
            msg = "empty words cannot be stored in the trie"
        else:
            msg = (
                f"{word!r} contains unsupported character {char!r} "
                f"(U+{ord(char):04X}) at position {position}"
            )
        super().__init__(msg)


class UnexpectedKey(T9Error, ValueError):
    """A lookup sequence contains a key the trie never indexes on (0, * or #)."""

    def __init__(self, key, position: int) -> None:
        self.key = key
        self.position = position
        super().__init__(f"key {getattr(key, 'value', key)!r} at position {position} is not a letter key")
