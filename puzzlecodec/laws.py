# laws.py — puzzlecodec error taxonomy


class PuzzleCodecError(Exception):
    def __init__(self, message, hint=None, code=None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.code = code or "CODEC_ERROR"


class ConfigError(PuzzleCodecError):
    pass


# ===== Compression boundary =====
class CompressionError(PuzzleCodecError):
    """The payload could not even be decompressed into text."""


class BadCompressedInput(CompressionError):
    def __init__(self, message="Payload is not valid LZ-string base64.", hint=None):
        super().__init__(message,
                         hint=hint or "Check that the payload was copied whole and not URL-mangled.",
                         code="COMPRESSION_BAD_INPUT")


class BadTextEncoding(CompressionError):
    def __init__(self, message="Decompressed payload is not valid UTF-16.", hint=None):
        super().__init__(message, hint=hint, code="COMPRESSION_BAD_UTF16")


# ===== Compact grammar =====
class ParseError(PuzzleCodecError):
    """Decompressed fine, but the compact grammar text is malformed."""

    def __init__(self, message, position=None, hint=None, code=None):
        super().__init__(message, hint=hint, code=code or "PARSE_ERROR")
        self.position = position


class UnexpectedEndOfInput(ParseError):
    def __init__(self, position=None):
        super().__init__("Unexpected end of input.", position=position,
                         code="PARSE_UNEXPECTED_END")


class UnexpectedCharacter(ParseError):
    def __init__(self, char, position=None):
        super().__init__(f"Unexpected character {char!r} at {position}.", position=position,
                         code="PARSE_UNEXPECTED_CHAR")
        self.char = char


class NumberFormatError(ParseError):
    def __init__(self, literal, position=None):
        super().__init__(f"Bad number literal {literal!r}.", position=position,
                         hint="Numbers are digits with at most one '.' followed by digits.",
                         code="PARSE_BAD_NUMBER")
        self.literal = literal


class NestingTooDeep(ParseError):
    def __init__(self, position=None):
        super().__init__("Arrays/objects are nested too deeply.", position=position,
                         code="PARSE_TOO_DEEP")


# ===== Standard payloads =====
class MalformedPayload(PuzzleCodecError):
    def __init__(self, message, hint=None):
        super().__init__(message, hint=hint, code="PAYLOAD_MALFORMED")


class UnknownShortcut(PuzzleCodecError):
    def __init__(self, target, allowed):
        super().__init__(f"Unknown shortcut target: {target!r}",
                         hint=f"Use one of: {', '.join(sorted(allowed))}",
                         code="SHORTCUT_UNKNOWN")
        self.target = target
