"""Strict parser for Content-Disposition header values."""

from __future__ import annotations

import logging

from ._errors import (
    DuplicateParameterError,
    InvalidParameterFormatError,
    InvalidTypeFormatError,
    MissingInputError,
)
from ._ext_value import decode_ext_value
from ._grammar import DISPOSITION_TYPE_RE, PARAM_RE, QUOTED_PAIR_RE, is_extended_name
from ._types import ContentDisposition

logger = logging.getLogger("content_disposition")


def _unquote(value: str) -> str:
    if value[:1] == '"':
        return QUOTED_PAIR_RE.sub(r"\1", value[1:-1])
    return value


def parse(header: str) -> ContentDisposition:
    """Parse a Content-Disposition header value.

    Parameters must follow the disposition type back to back: each
    ``; name=value`` segment has to start exactly where the previous one
    ended, and the last one has to end the string.

    Args:
        header: The raw header value, e.g. ``'attachment; filename="a.pdf"'``.

    Returns:
        A new ``ContentDisposition`` with the lower-cased type and parameters.

    Raises:
        MissingInputError: *header* is empty or not a string.
        InvalidTypeFormatError: the value does not start with a bare token.
        InvalidParameterFormatError: a parameter is malformed or trailing
            content follows the last parameter.
        DuplicateParameterError: a parameter name occurs twice.
        InvalidExtendedFieldValueError: a ``name*`` value is not an ext-value.
        UnsupportedCharsetError: an ext-value uses a charset other than
            UTF-8 or ISO-8859-1.

    Examples:
        >>> parse('attachment; filename="plans.pdf"')
        ContentDisposition(type='attachment', parameters={'filename': 'plans.pdf'})
    """
    if not header or not isinstance(header, str):
        raise MissingInputError(header)

    match = DISPOSITION_TYPE_RE.match(header)
    if not match:
        raise InvalidTypeFormatError(header)

    disposition_type = match.group(1).lower()
    index = match.end()
    if match.group(0).endswith(";"):
        index -= 1

    names: set[str] = set()
    extended: set[str] = set()
    params: dict[str, str] = {}

    while True:
        match = PARAM_RE.match(header, index)
        if not match:
            break
        index = match.end()

        name = match.group(1).lower()
        value = match.group(2)

        if name in names:
            raise DuplicateParameterError(header, name=name)
        names.add(name)

        if is_extended_name(name):
            name = name[:-1]
            params[name] = decode_ext_value(value)
            extended.add(name)
            continue

        if name in extended:
            continue

        params[name] = _unquote(value)

    if index != len(header):
        raise InvalidParameterFormatError(header[index:])

    logger.debug("Parsed Content-Disposition: type=%s parameters=%s", disposition_type, sorted(params))
    return ContentDisposition(disposition_type, params)
