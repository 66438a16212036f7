"""
t9trie
======
Predictive text lookup for a 9-key phone keypad, backed by a keypad trie.

Public API
----------
    from t9trie import Dictionary, Trie, parse_sequence

    trie = Trie.build(Dictionary(["home", "good", "gone", "hold"]))
    trie.lookup(parse_sequence("4663"))   # ['home', 'good', 'gone']
    trie.lookup(parse_sequence("4653"))   # ['hold']
"""

from .config import load_config
from .dictionary import Dictionary, load_dictionary
from .errors import InvalidWord, T9Error, UnexpectedKey
from .keys import Key, classify, encode, parse_sequence, to_digits
from .trie import Trie, TrieNode

__all__ = [
    "Dictionary",
    "InvalidWord",
    "Key",
    "T9Error",
    "Trie",
    "TrieNode",
    "UnexpectedKey",
    "classify",
    "encode",
    "load_config",
    "load_dictionary",
    "parse_sequence",
    "to_digits",
]
__version__ = "1.0.0"
