"""
t9trie.config
=============
Loads config.json.
Falls back to defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

ENV_VAR = "T9TRIE_CONFIG"


DEFAULTS: dict = {
    "dictionary": str(_PACKAGE_DIR / "wordlists" / "example.txt"),
    "lowercase": False,
    "max_results": 0,
    "log_level": "INFO",
}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``T9TRIE_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``t9trie/config.json``

    Returns a fully-populated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env = os.environ.get(ENV_VAR)
    if env:
        candidates.append(Path(env))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if not candidate.exists():
            continue
        try:
            with open(candidate, "r", encoding="utf-8") as f:
                user = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("could not parse %s: %s", candidate, e)
            break
        if not isinstance(user, dict):
            log.warning("ignoring %s: top level must be an object", candidate)
            break
        # Strip comment keys (keys starting with _)
        cfg.update({k: v for k, v in user.items() if not k.startswith("_")})
        # Resolve the dictionary path relative to the config file's location
        if not Path(cfg["dictionary"]).is_absolute():
            cfg["dictionary"] = str(candidate.parent / cfg["dictionary"])
        log.debug("loaded config from %s", candidate)
        break   # stop at first found

    return cfg
