# config.py — Fixed Configuration

import os

from .laws import ConfigError

# --- Environment-driven configuration ---
# Nothing here is a secret; every value has a working default.
THUMBNAIL_BASE = os.getenv("PUZZLECODEC_THUMBNAIL_BASE", "https://api.sudokupad.com/thumbnail/")
THUMBNAIL_SIZE = os.getenv("PUZZLECODEC_THUMBNAIL_SIZE", "512x512")


def _check_size(size: str) -> str:
    width, sep, height = size.partition("x")
    if not sep or not width.isdigit() or not height.isdigit():
        raise ConfigError(
            f"Bad thumbnail size {size!r}.",
            hint="Set PUZZLECODEC_THUMBNAIL_SIZE to WIDTHxHEIGHT, e.g. 512x512.",
            code="CONFIG_THUMBNAIL_SIZE",
        )
    return size


THUMBNAIL_SIZE = _check_size(THUMBNAIL_SIZE)

# Partner play links, keyed by shortcut name
SHORTCUT_TEMPLATES = {
    "fpuzzles": "https://f-puzzles.com/?load={payload}",
    "sudokupad": "https://sudokupad.app/fpuzzles{payload}",
    "beta-sudokupad": "https://beta.sudokupad.app/fpuzzles{payload}",
    "sudokupad-beta": "https://beta.sudokupad.app/fpuzzles{payload}",
}

# Standard (f-puzzles) top-level field names
STANDARD_FIELDS = {
    "size": "size",
    "title": "title",
    "author": "author",
    "rules": "ruleset",
    "solution": "solution",
}

# Compact (CtC) field names
COMPACT_CELLS = "ce"
COMPACT_EXTRAS = "ca"
COMPACT_EXTRA_VALUE = "v"

# Prefixes of the metadata strings stored among the compact extras
COMPACT_PREFIXES = {
    "title": "title: ",
    "author": "author: ",
    "rules": "rules: ",
    "solution": "solution: ",
}

# Hex colour shorthands of the compact grammar
HEX_SHORTHANDS = {
    "0": "#000000",
    "F": "#FFFFFF",
}
