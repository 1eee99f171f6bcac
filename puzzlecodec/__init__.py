# puzzlecodec — partner puzzle payload extraction, codecs and summaries
"""
Caller-facing API:

    extract(url_or_payload)        -> Value | None
    encode(value)                  -> standard payload
    parse_compact(text)            -> Value            (raises ParseError)
    encode_compact(value)          -> compact grammar text
    metadata(value, origin)        -> GridMetadata
    select_best_visible(revisions) -> index
"""

from .codec import compress_text, decompress_text
from .compact import decode_compact, encode_compact, encode_compact_payload, parse_compact
from .hosts import HOST_RULES, extract
from .laws import (
    BadCompressedInput, BadTextEncoding, CompressionError, ConfigError, MalformedPayload, NestingTooDeep,
    NumberFormatError, ParseError, PuzzleCodecError, UnexpectedCharacter, UnexpectedEndOfInput,
    UnknownShortcut,
)
from .metadata import GridMetadata, Origin, metadata
from .standard import decode_standard, encode, grid_url, shortcut_url, try_decode_standard
from .visibility import Revision, VisibilityLevel, best_visible_revision, select_best_visible

__all__ = [
    "extract", "encode", "decode_standard", "try_decode_standard", "shortcut_url", "grid_url",
    "parse_compact", "encode_compact", "decode_compact", "encode_compact_payload",
    "compress_text", "decompress_text", "HOST_RULES",
    "metadata", "GridMetadata", "Origin",
    "select_best_visible", "best_visible_revision", "Revision", "VisibilityLevel",
    "PuzzleCodecError", "ConfigError", "CompressionError", "BadCompressedInput", "BadTextEncoding",
    "ParseError", "UnexpectedEndOfInput", "UnexpectedCharacter", "NumberFormatError", "NestingTooDeep",
    "MalformedPayload", "UnknownShortcut",
]
