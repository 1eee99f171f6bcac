# codec.py — LZ-string compression boundary shared by both partner formats
"""
Partner sites compress their payloads with the JavaScript `lz-string`
library (`compressToBase64` / `decompressFromBase64`). That library works
on UTF-16 code units, so text is split into code units before
compression and re-joined after decompression.
"""

import logging

from lzstring import LZString

from .laws import BadCompressedInput, BadTextEncoding

logger = logging.getLogger(__name__)

_lz = LZString()


# ---------- UTF-16 code units ----------
def to_code_units(text: str) -> str:
    """Split astral characters into surrogate pairs, one char per code unit."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return "".join(chr(int.from_bytes(raw[i:i + 2], "little")) for i in range(0, len(raw), 2))


def from_code_units(units: str) -> str:
    """Re-join surrogate pairs; unpaired surrogates raise BadTextEncoding."""
    try:
        return units.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise BadTextEncoding(f"Decompressed payload is not valid UTF-16: {e.reason}") from e


# ---------- lz-string base64 ----------
def compress_text(text: str) -> str:
    return _lz.compressToBase64(to_code_units(text))


def decompress_text(payload: str) -> str:
    if not isinstance(payload, str) or not payload:
        raise BadCompressedInput("Empty payload.")
    try:
        units = _lz.decompressFromBase64(payload)
    except Exception as e:
        # lzstring signals bad alphabet/truncation with assorted lookup errors
        logger.debug(f"lzstring rejected payload: {e.__class__.__name__}: {e}")
        raise BadCompressedInput() from e
    if not units:
        raise BadCompressedInput("Payload decompressed to nothing.")
    return from_code_units(units)
