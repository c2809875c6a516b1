"""RFC 5987 extended parameter values (``charset'language'value``)."""

from __future__ import annotations

import re
from urllib.parse import quote, unquote_to_bytes

from ._errors import InvalidExtendedFieldValueError, UnsupportedCharsetError
from ._grammar import ATTR_CHAR_ESCAPE_RE, EXT_VALUE_RE, NON_LATIN1_RE

# Left unescaped by a URI component escaper on top of quote()'s own set.
_URI_COMPONENT_SAFE = "!*'()"


def to_latin1(value: str) -> str:
    """Replace every character outside printable ISO-8859-1 with ``?``.

    Examples:
        >>> to_latin1("€ rates.pdf")
        '? rates.pdf'
    """
    return NON_LATIN1_RE.sub("?", value)


def decode_ext_value(raw: str) -> str:
    """Decode an extended value such as ``UTF-8''%E2%82%AC%20rates.pdf``.

    Only the ``UTF-8`` and ``ISO-8859-1`` charsets are understood (compared
    case-insensitively) and the language tag is discarded. Invalid UTF-8
    sequences decode to U+FFFD instead of failing.

    Raises:
        InvalidExtendedFieldValueError: *raw* is not an ext-value, including
            quoted values and stray ``%`` signs.
        UnsupportedCharsetError: the charset is anything else.
    """
    match = EXT_VALUE_RE.fullmatch(raw)
    if not match:
        raise InvalidExtendedFieldValueError(raw)

    charset = match.group(1).lower()
    # the grammar guarantees every "%" starts a complete escape
    binary = unquote_to_bytes(match.group(2))

    if charset == "iso-8859-1":
        return to_latin1(binary.decode("latin-1"))
    if charset == "utf-8":
        return binary.decode("utf-8", "replace")
    raise UnsupportedCharsetError(raw, charset=match.group(1))


def _pencode(match: re.Match[str]) -> str:
    return "%{:02X}".format(ord(match.group(0)))


def encode_ext_value(value: str) -> str:
    """Encode *value* as a ``UTF-8''`` extended value.

    Examples:
        >>> encode_ext_value("€ rates.pdf")
        "UTF-8''%E2%82%AC%20rates.pdf"
    """
    encoded = quote(value, safe=_URI_COMPONENT_SAFE)
    return "UTF-8''" + ATTR_CHAR_ESCAPE_RE.sub(_pencode, encoded)
