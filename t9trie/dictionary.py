"""
t9trie.dictionary
=================
A flat bag of words used for trie construction, and the line-oriented
loader that fills it from a word list file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .errors import InvalidWord
from .keys import encode

log = logging.getLogger(__name__)


class Dictionary:
    """
    Deduplicated set of words.

    Words are kept in insertion order so that building a trie from the same
    word list always yields the same node word order.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: dict[str, None] = {}
        for word in words:
            self.insert(word)

    def insert(self, word: str | bytes) -> bool:
        """Add ``word`` if absent. Returns ``True`` if it was new."""
        if isinstance(word, bytes):
            word = word.decode("utf-8")
        if word in self._words:
            return False
        self._words[word] = None
        return True

    def contains(self, word: str) -> bool:
        return word in self._words

    def iterate(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"<Dictionary {len(self._words):,} words>"


def load_dictionary(path: str | Path, lowercase: bool = False) -> Dictionary:
    """
    Load a word list: one word per line, UTF-8.

    Surrounding whitespace is trimmed; blank lines and lines starting with
    ``#`` are skipped. Lines that are not valid UTF-8 or that cannot be typed
    on keys 1-9 are skipped with a warning.
    """
    path = Path(path)
    dictionary = Dictionary()
    count = 0
    skipped = 0
    max_len = 0
    total_len = 0

    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                log.warning("%s:%d is not valid UTF-8: %s", path, lineno, e.reason)
                skipped += 1
                continue

            word = line.strip(" \r\n\t")
            if not word or word.startswith("#"):
                continue
            if lowercase:
                word = word.lower()

            try:
                encode(word)
            except InvalidWord as e:
                log.warning(
                    "%s contains unsupported codepoint: U+%04X (%s)",
                    word, ord(e.char), e.char,
                )
                skipped += 1
                continue

            count += 1
            max_len = max(max_len, len(word))
            total_len += len(word)
            dictionary.insert(word)

    log.info("%s:", path)
    log.info("word count:      %10d", count)
    log.info("max word length: %10d", max_len)
    log.info("avg word length: %10d", total_len // count if count else 0)
    if skipped:
        log.info("skipped %d line(s) with unsupported characters", skipped)

    return dictionary
