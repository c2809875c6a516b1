"""content-disposition - RFC 6266 Content-Disposition parsing and formatting.

Parses header values strictly, and builds them with RFC 5987 extended file
names and ISO-8859-1 fallbacks for older clients.
"""

__version__ = "1.0.0"

from ._errors import (
    ContentDispositionError,
    DuplicateParameterError,
    FormatError,
    InvalidArgumentError,
    InvalidExtendedFieldValueError,
    InvalidParameterFormatError,
    InvalidTypeError,
    InvalidTypeFormatError,
    MissingInputError,
    ParseError,
    UnsupportedCharsetError,
)
from ._ext_value import decode_ext_value, encode_ext_value
from ._formatter import create, format_disposition
from ._parser import parse
from ._types import ContentDisposition, CreateOptions

__all__ = [
    "ContentDisposition",
    "ContentDispositionError",
    "CreateOptions",
    "DuplicateParameterError",
    "FormatError",
    "InvalidArgumentError",
    "InvalidExtendedFieldValueError",
    "InvalidParameterFormatError",
    "InvalidTypeError",
    "InvalidTypeFormatError",
    "MissingInputError",
    "ParseError",
    "UnsupportedCharsetError",
    "create",
    "decode_ext_value",
    "encode_ext_value",
    "format_disposition",
    "parse",
]
