"""Build Content-Disposition header values."""

from __future__ import annotations

import logging
import posixpath

from ._errors import InvalidArgumentError, InvalidTypeError
from ._ext_value import encode_ext_value, to_latin1
from ._grammar import NON_LATIN1_RE, QUOTE_RE, has_hex_escape, is_extended_name, is_quotable, is_token
from ._types import ContentDisposition, CreateOptions

logger = logging.getLogger("content_disposition")


def _basename(path: str) -> str:
    return posixpath.basename(path.rstrip("/"))


def quote_string(value: str) -> str:
    """Quote *value* as an RFC 2616 quoted-string.

    Examples:
        >>> quote_string('the "plans".pdf')
        '"the \\\\"plans\\\\".pdf"'
    """
    return '"' + QUOTE_RE.sub(r"\\\1", value) + '"'


def _build_params(filename: str | None, fallback: object) -> dict[str, str]:
    if filename is None:
        return {}

    if not isinstance(filename, str):
        raise InvalidArgumentError(filename, "filename must be a string")

    if fallback is None:
        fallback = True

    if not isinstance(fallback, (bool, str)):
        raise InvalidArgumentError(fallback, "fallback must be a string or boolean")

    if isinstance(fallback, str) and NON_LATIN1_RE.search(fallback):
        raise InvalidArgumentError(fallback, "fallback must be ISO-8859-1 string")

    name = _basename(filename)
    quotable = is_quotable(name)

    if isinstance(fallback, str):
        fallback_name: str | None = _basename(fallback)
    else:
        fallback_name = to_latin1(name) if fallback else None
    has_fallback = fallback_name is not None and fallback_name != name

    params: dict[str, str] = {}
    # an ext-value needs at least one character, so an empty name stays quoted
    if name and (has_fallback or not quotable or has_hex_escape(name)):
        params["filename*"] = name
    if quotable or has_fallback or not name:
        params["filename"] = fallback_name if has_fallback else name
    return params


def _format(disposition_type: object, params: dict[str, str]) -> str:
    if not disposition_type or not isinstance(disposition_type, str) or not is_token(disposition_type):
        raise InvalidTypeError(disposition_type)

    header = disposition_type.lower()
    for name in sorted(params):
        value = params[name]
        encoded = encode_ext_value(value) if is_extended_name(name) else quote_string(value)
        header += f"; {name}={encoded}"
    return header


def _serializable_params(parameters: dict[str, str]) -> dict[str, str]:
    params = dict(parameters)
    for name, value in parameters.items():
        if is_extended_name(name):
            if not value:
                raise InvalidArgumentError(value, f"extended parameter {name} must not be empty")
            continue
        if not value or is_quotable(value):
            continue
        if "*" in name:
            raise InvalidArgumentError(value, f"parameter {name} must be ISO-8859-1 text")
        # non-Latin-1 text moves to the extended form, with a quoted fallback
        params.setdefault(f"{name}*", value)
        params[name] = to_latin1(value)
    return params


def format_disposition(disposition: ContentDisposition) -> str:
    """Serialize a :class:`ContentDisposition` into a header value.

    Parameter names ending in ``*`` are written as extended values, all others
    as quoted-strings, in ascending order of name. A plain value that cannot be
    quoted is sent as ``name*`` with an ISO-8859-1 ``name`` fallback, so that
    ``parse(disposition.to_header()) == disposition``.

    Raises:
        InvalidTypeError: the type is empty or not a token.
        InvalidArgumentError: an extended value is empty, or a value that
            cannot be quoted belongs to a name that has no extended form.
    """
    return _format(disposition.type, _serializable_params(disposition.parameters))


def create(filename: str | None = None, options: CreateOptions | None = None) -> str:
    """Create a Content-Disposition header value for *filename*.

    Only the last path segment of *filename* is used. Names that are not plain
    ISO-8859-1, or that contain something that looks like a percent escape, are
    sent as a ``filename*`` extended value; a ``filename`` parameter carries
    either the name itself or its ISO-8859-1 fallback.

    Args:
        filename: The file name to advertise, or ``None`` for no parameters.
        options: Optional ``type`` and ``fallback`` settings.

    Returns:
        The header value.

    Raises:
        InvalidArgumentError: *filename* is not a string, or ``fallback`` is
            neither a bool nor an ISO-8859-1 string.
        InvalidTypeError: ``type`` is empty, not a string or not a token.

    Examples:
        >>> create("plans.pdf")
        'attachment; filename="plans.pdf"'
        >>> create("€ rates.pdf")
        'attachment; filename="? rates.pdf"; filename*=UTF-8\\'\\'%E2%82%AC%20rates.pdf'
    """
    opts: CreateOptions = {**(options or {})}
    disposition_type = opts.get("type")
    if disposition_type is None:
        disposition_type = "attachment"

    params = _build_params(filename, opts.get("fallback"))
    header = _format(disposition_type, params)
    logger.debug("Created Content-Disposition: %s", header)
    return header
