#!/usr/bin/env python3
"""
add_wordlist.py
===============
Helper utility: clean an external word list into a t9trie dictionary file,
dropping words that cannot be typed on keys 1-9 and deduplicating the rest.

Usage:
    python add_wordlist.py <source_file> <dest_file> [--append] [--lowercase]

Examples:
    # Import a German word list
    python add_wordlist.py /path/to/german_words.txt t9trie/wordlists/de.txt

    # Merge new words into an existing list without overwriting
    python add_wordlist.py /path/to/extra_english.txt words.txt --append
"""

import argparse
import logging
import sys
from pathlib import Path

from t9trie.dictionary import load_dictionary


def merge_wordlists(source: Path, dest: Path, append: bool = False, lowercase: bool = False) -> tuple[list[str], int]:
    """Return the sorted combined word list and how many words are new."""
    new_words = set(load_dictionary(source, lowercase=lowercase))
    existing: set[str] = set()
    if append and dest.exists():
        existing = set(load_dictionary(dest, lowercase=lowercase))
    combined = sorted(existing | new_words)
    return combined, len(combined) - len(existing)


def write_wordlist(dest: Path, words: list[str]) -> None:
    header = (
        f"# {dest.stem} word list for t9trie\n"
        f"# Imported by add_wordlist.py\n"
        f"# Words: {len(words):,}\n"
        f"# One word per line. Lines starting with # are ignored.\n\n"
    )
    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(dest, "w", encoding="utf-8") as f:
        f.write(header)
        for word in words:
            f.write(word + "\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Import a plain-text word list into a t9trie dictionary file."
    )
    parser.add_argument("source", help="Path to source word list (.txt, one word per line)")
    parser.add_argument("dest", help="Dictionary file to write")
    parser.add_argument(
        "--append", action="store_true",
        help="Merge into the existing destination instead of replacing it.",
    )
    parser.add_argument("--lowercase", action="store_true", help="Lowercase every word.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[T9] %(levelname)s: %(message)s")

    source_path = Path(args.source).resolve()
    if not source_path.exists():
        print(f"ERROR: Source file not found: {source_path}")
        return 1
    dest_path = Path(args.dest)

    print(f"Source : {source_path}")
    combined, added = merge_wordlists(source_path, dest_path, args.append, args.lowercase)

    write_wordlist(dest_path, combined)
    print(f"Written : {dest_path}")
    print(f"Total   : {len(combined):,} words  (+{added} new)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
