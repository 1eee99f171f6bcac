# standard.py — f-puzzles style payloads: lz-string over plain JSON

import json
import logging
from decimal import Decimal
from typing import Any, List, Optional

from .codec import compress_text, decompress_text
from .config import SHORTCUT_TEMPLATES, THUMBNAIL_BASE, THUMBNAIL_SIZE
from .laws import MalformedPayload, PuzzleCodecError, UnknownShortcut

logger = logging.getLogger(__name__)


# ---------- Decode ----------
def _reject_constant(name: str):
    raise MalformedPayload(f"{name} is not a JSON number.")


def _check_text(value: Any) -> None:
    # json.loads lets "\ud800" escapes through; they cannot be re-encoded
    if isinstance(value, str):
        try:
            value.encode("utf-16-le")
        except UnicodeEncodeError as e:
            raise MalformedPayload(f"Unpaired surrogate in string at {e.start}.") from e
    elif isinstance(value, dict):
        for k, v in value.items():
            _check_text(k)
            _check_text(v)
    elif isinstance(value, list):
        for v in value:
            _check_text(v)


def decode_standard(payload: str) -> Any:
    """Decompress a standard payload and parse the JSON inside.

    Non-integral numbers come back as Decimal so their digits survive.
    """
    text = decompress_text(payload)
    try:
        value = json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
        _check_text(value)
    except RecursionError as e:
        raise MalformedPayload("Payload is nested too deeply.") from e
    except ValueError as e:
        raise MalformedPayload(f"Decompressed payload is not JSON: {e}",
                               hint="The payload may belong to the compact grammar instead.") from e
    return value


def try_decode_standard(payload: str) -> Optional[Any]:
    try:
        return decode_standard(payload)
    except PuzzleCodecError as e:
        logger.debug(f"Standard decode failed: {e.code}: {e}")
        return None


# ---------- Encode ----------
def _dump_into(out: List[str], value: Any) -> None:
    # json.dumps has no way to emit a Decimal as a bare number, so walk by hand
    if isinstance(value, dict):
        out.append("{")
        for i, (k, v) in enumerate(value.items()):
            if i:
                out.append(",")
            out.append(json.dumps(str(k), ensure_ascii=False))
            out.append(":")
            _dump_into(out, v)
        out.append("}")
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for i, v in enumerate(value):
            if i:
                out.append(",")
            _dump_into(out, v)
        out.append("]")
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot encode non-finite number {value}")
        out.append(str(value))
    elif value is None or isinstance(value, (bool, int, float, str)):
        out.append(json.dumps(value, ensure_ascii=False, allow_nan=False))
    else:
        raise TypeError(f"Cannot encode {type(value).__name__} as JSON")


def to_json(value: Any) -> str:
    out: List[str] = []
    _dump_into(out, value)
    return "".join(out)


def encode(value: Any) -> str:
    """Serialize a Value to compact JSON and compress it."""
    return compress_text(to_json(value))


# ---------- Links ----------
def shortcut_url(value: Any, target: str) -> str:
    """Play link for a standard Value on one of the partner sites."""
    template = SHORTCUT_TEMPLATES.get(target)
    if template is None:
        raise UnknownShortcut(target, SHORTCUT_TEMPLATES)
    return template.format(payload=encode(value))


def grid_url(value: Any) -> str:
    """Thumbnail image of the grid, rendered by the sudokupad service."""
    return f"{THUMBNAIL_BASE}fpuzzles{encode(value)}_{THUMBNAIL_SIZE}.svg"
