"""Exceptions raised while parsing or building Content-Disposition values."""

from __future__ import annotations


class ContentDispositionError(Exception):
    """Base class for every error raised by this package.

    Attributes:
        value: The offending input (a header, a parameter fragment, a file name
            or an option value) so callers can build their own diagnostics.
    """

    message = "invalid Content-Disposition"

    def __init__(self, value: object = None, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or self.message)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class ParseError(ContentDispositionError, ValueError):
    """A header value does not follow the RFC 6266 grammar."""


class MissingInputError(ParseError, TypeError):
    message = "argument string is required"


class InvalidTypeFormatError(ParseError):
    message = "invalid type format"


class InvalidParameterFormatError(ParseError):
    message = "invalid parameter format"


class DuplicateParameterError(ParseError):
    message = "invalid duplicate parameter"

    def __init__(self, value: object = None, name: str = "") -> None:
        self.name = name
        super().__init__(value, f"{self.message}: {name}" if name else None)


class InvalidExtendedFieldValueError(ParseError):
    message = "invalid extended field value"


class UnsupportedCharsetError(ParseError):
    message = "unsupported charset in extended field"

    def __init__(self, value: object = None, charset: str = "") -> None:
        self.charset = charset
        super().__init__(value, f"{self.message}: {charset}" if charset else None)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class FormatError(ContentDispositionError, TypeError):
    """Arguments given to ``create`` cannot produce a valid header."""


class InvalidArgumentError(FormatError):
    message = "invalid argument"


class InvalidTypeError(FormatError):
    message = "invalid type"
