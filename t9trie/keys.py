"""
t9trie.keys
===========
Keypad model and the character → key classification table.

    1 2 3
    4 5 6
    7 8 9
    * 0 #

Only keys 1-9 carry characters that can be stored in the trie.
``0`` separates words, ``*`` selects the next alternative and ``#`` switches
case; they never appear as trie edges.
"""

from __future__ import annotations

import enum

from .errors import InvalidWord


class Key(enum.Enum):
    """A single key on a phone keypad. The value is the printed symbol."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ZERO = "0"
    STAR = "*"
    HASH = "#"

    @property
    def slot(self) -> int | None:
        """Child slot in a trie node (``1`` → 0 … ``9`` → 8), ``None`` otherwise."""
        return _SLOTS.get(self)

    @classmethod
    def from_slot(cls, index: int) -> Key:
        if not 0 <= index < len(LETTER_KEYS):
            raise IndexError(f"slot {index} out of range")
        return LETTER_KEYS[index]

    def __str__(self) -> str:
        return self.value


LETTER_KEYS: tuple[Key, ...] = (
    Key.ONE, Key.TWO, Key.THREE,
    Key.FOUR, Key.FIVE, Key.SIX,
    Key.SEVEN, Key.EIGHT, Key.NINE,
)

_SLOTS: dict[Key, int] = {key: i for i, key in enumerate(LETTER_KEYS)}


# ─── Classification table ────────────────────────────────────────────────────

KEY_MAP: dict[str, str] = {
    "1": ".,!\"?:;'-/\\&",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
    "0": " ",
}

# Accented letters share the key of their base letter.
# Only the forms listed here are supported; there is no case folding for them.
DIACRITIC_MAP: dict[str, str] = {
    "Ä": "2", "ä": "2", "Å": "2", "å": "2",
    "á": "2", "ç": "2", "â": "2", "à": "2", "æ": "2", "ã": "2",
    "é": "3", "É": "3", "è": "3", "ë": "3", "ê": "3",
    "î": "4", "í": "4", "ì": "4", "ï": "4",
    "Ö": "6", "ö": "6", "ô": "6", "ó": "6", "ò": "6", "ñ": "6", "ø": "6",
    "ẞ": "7", "ß": "7",
    "Ü": "8", "ü": "8", "ú": "8", "û": "8",
}


def _build_char_to_key() -> dict[str, Key]:
    mapping: dict[str, Key] = {}
    for digit, chars in KEY_MAP.items():
        key = Key(digit)
        mapping[digit] = key
        for ch in chars:
            mapping[ch] = key
            if ch.isascii() and ch.isalpha():
                mapping[ch.upper()] = key
    for ch, digit in DIACRITIC_MAP.items():
        mapping[ch] = Key(digit)
    return mapping


CHAR_TO_KEY: dict[str, Key] = _build_char_to_key()


# ─── Public helpers ──────────────────────────────────────────────────────────

def classify(char: str | int) -> Key | None:
    """Return the key a character is typed with, or ``None`` if it has none."""
    if isinstance(char, int):
        char = chr(char)
    return CHAR_TO_KEY.get(char)


def encode(word: str) -> list[Key]:
    """
    Return the key sequence that types ``word``.

    Raises :class:`InvalidWord` if the word is empty or contains a character
    that is not on keys 1-9 (spaces classify to ``0`` and are rejected too).
    """
    if not word:
        raise InvalidWord(word)
    keys: list[Key] = []
    for position, ch in enumerate(word):
        key = CHAR_TO_KEY.get(ch)
        if key is None or key.slot is None:
            raise InvalidWord(word, ch, position)
        keys.append(key)
    return keys


def to_digits(word: str) -> str:
    """Convert a word to its T9 digit string, e.g. ``"home"`` → ``"4663"``."""
    return "".join(key.value for key in encode(word))


def parse_sequence(text: str) -> list[Key]:
    """
    Parse typed key symbols such as ``"4663"`` or ``"4 6 6 3"``.
    Whitespace is ignored; any other non-key character raises ``ValueError``.
    """
    keys: list[Key] = []
    for ch in text:
        if ch.isspace():
            continue
        try:
            keys.append(Key(ch))
        except ValueError:
            raise ValueError(f"{ch!r} is not a keypad symbol") from None
    return keys
