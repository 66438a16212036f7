"""
t9trie.cli
==========
Command-line entry point.
Registered as the ``t9trie`` console script in pyproject.toml.

Usage:
    t9trie 4663 5243             # look up key sequences
    t9trie < sequences.txt       # one sequence per line from stdin
    t9trie --dict words.txt 4663 # use another word list
    t9trie --dot trie.dot        # dump the trie for GraphViz
    t9trie --capture             # type a sequence on the numpad
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from .config import load_config
from .dictionary import load_dictionary
from .errors import InvalidWord
from .keys import Key, parse_sequence
from .trie import Trie

log = logging.getLogger("t9trie")

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_BAD_QUERY = 2
EXIT_NO_KEYPAD = 3


def _format_result(keys: list[Key], words: list[str], max_results: int) -> str:
    digits = "".join(k.value for k in keys)
    if not words:
        return f"{digits}: (no match)"
    shown = words[:max_results] if max_results > 0 else words
    text = ", ".join(shown)
    if len(shown) < len(words):
        text += f", ... (+{len(words) - len(shown)})"
    return f"{digits}: {text}"


def _run_queries(trie: Trie, queries: Iterable[str], max_results: int) -> int:
    status = EXIT_OK
    for query in queries:
        query = query.strip()
        if not query:
            continue
        try:
            keys = parse_sequence(query)
            words = trie.lookup(keys)
        except ValueError as e:
            # UnexpectedKey or a symbol that is not on the keypad
            print(f"{query}: error: {e}", file=sys.stderr)
            status = EXIT_BAD_QUERY
            continue
        print(_format_result(keys, words, max_results))
    return status


def _capture(trie: Trie, max_results: int) -> int:
    # Imported lazily so the CLI works without pynput installed.
    try:
        from .keypad import capture_sequence
    except ImportError as e:
        log.error("%s", e)
        return EXIT_NO_KEYPAD

    print("Type a sequence on the numpad (Enter/0: look up, *: erase, Esc: cancel)")
    keys = capture_sequence(
        on_change=lambda ks: print("  " + " ".join(k.value for k in ks) + "  ▸")
    )
    if keys is None:
        print("Cancelled.")
        return EXIT_OK
    print(_format_result(keys, trie.lookup(keys), max_results))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="t9trie",
        description="Look up T9 keypad sequences in a word list.",
    )
    parser.add_argument(
        "sequences",
        nargs="*",
        metavar="SEQUENCE",
        help="Key sequences to look up, e.g. 4663. Read from stdin if none are given.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--dict", "-d",
        metavar="PATH",
        dest="dictionary",
        help="Word list to build the trie from (overrides config).",
    )
    parser.add_argument(
        "--lowercase",
        action="store_true",
        default=None,
        help="Lowercase every word while loading.",
    )
    parser.add_argument(
        "--max-results", "-n",
        type=int,
        metavar="N",
        help="Show at most N words per sequence (0 = all).",
    )
    parser.add_argument(
        "--dot",
        metavar="FILE",
        help="Write the trie as a GraphViz digraph to FILE ('-' for stdout).",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print trie size statistics.",
    )
    parser.add_argument(
        "--capture",
        action="store_true",
        help="Read one sequence from the numpad (requires pynput).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors.")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.dictionary:
        config["dictionary"] = args.dictionary
    if args.lowercase is not None:
        config["lowercase"] = args.lowercase
    if args.max_results is not None:
        config["max_results"] = args.max_results

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = getattr(logging, str(config.get("log_level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format="[T9] %(levelname)s: %(message)s")

    try:
        dictionary = load_dictionary(config["dictionary"], lowercase=bool(config["lowercase"]))
    except OSError as e:
        log.error("could not read dictionary: %s", e)
        return EXIT_BUILD_FAILED

    try:
        trie = Trie.build(dictionary)
    except InvalidWord as e:
        log.error("trie build failed: %s", e)
        return EXIT_BUILD_FAILED

    if args.stats:
        print(f"words     : {trie.word_count:>10,}")
        print(f"nodes     : {trie.node_count:>10,}")
        print(f"max depth : {trie.max_depth:>10,}")

    if args.dot == "-":
        trie.dump_graphviz(sys.stdout)
    elif args.dot:
        try:
            with open(args.dot, "w", encoding="utf-8") as f:
                trie.dump_graphviz(f)
        except OSError as e:
            log.error("could not write %s: %s", args.dot, e)
            return EXIT_BUILD_FAILED
        log.info("wrote %s", args.dot)

    max_results = int(config.get("max_results") or 0)

    if args.capture:
        return _capture(trie, max_results)
    if args.sequences:
        return _run_queries(trie, args.sequences, max_results)
    if args.dot or args.stats:
        return EXIT_OK
    return _run_queries(trie, sys.stdin, max_results)


if __name__ == "__main__":
    sys.exit(main())
