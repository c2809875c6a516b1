"""Helpers for reading and writing Content-Disposition on httpx messages.

Requires the ``http`` extra (``pip install content-disposition[http]``).
"""

from __future__ import annotations

import logging
import os
import posixpath

import httpx

from ._formatter import create
from ._parser import parse
from ._types import ContentDisposition, CreateOptions

logger = logging.getLogger("content_disposition")

__all__ = [
    "attachment_headers",
    "disposition_from_response",
    "fetch_filename",
    "filename_from_header",
    "filename_from_response",
]


def filename_from_header(header_value: str | None) -> tuple[str | None, str | None]:
    """Extract the file name and extension from a Content-Disposition value.

    The decoded ``filename*`` value wins over ``filename``. The name is reduced
    to its last path segment, since it is chosen by the sender.

    Args:
        header_value: The raw Content-Disposition header string.

    Returns:
        A tuple of (filename, extension). Either or both may be ``None`` if they
        cannot be determined from the header.

    Raises:
        ParseError: the header is present but malformed.

    Examples:
        >>> filename_from_header('attachment; filename="report.pdf"')
        ('report.pdf', '.pdf')
        >>> filename_from_header("attachment; filename*=UTF-8''my%20file.txt")
        ('my file.txt', '.txt')
    """
    if not header_value:
        return None, None

    raw_name = parse(header_value).filename
    if raw_name is None:
        return None, None

    filename = posixpath.basename(raw_name.replace("\\", "/"))
    if not filename:
        return None, None

    _, ext = os.path.splitext(filename)
    return filename, ext if ext else None


def disposition_from_response(response: httpx.Response) -> ContentDisposition | None:
    """Parse the Content-Disposition header of *response*, if it has one."""
    header = response.headers.get("content-disposition")
    if header is None:
        return None
    return parse(header)


def filename_from_response(response: httpx.Response) -> tuple[str | None, str | None]:
    return filename_from_header(response.headers.get("content-disposition"))


def attachment_headers(filename: str | None = None, options: CreateOptions | None = None) -> httpx.Headers:
    """Build response headers advertising *filename* as a download.

    Examples:
        >>> attachment_headers("plans.pdf")["content-disposition"]
        'attachment; filename="plans.pdf"'
    """
    return httpx.Headers({"Content-Disposition": create(filename, options)}, encoding="iso-8859-1")


async def fetch_filename(url: str, client: httpx.AsyncClient | None = None) -> tuple[str | None, str | None]:
    """Ask the server at *url* what it would name the download.

    Issues a ``HEAD`` request (following redirects) and reads the file name from
    the Content-Disposition response header.

    Args:
        url: The URL to query.
        client: An existing client to reuse; a short-lived one is created
            otherwise.

    Returns:
        A tuple of (filename, extension), as for :func:`filename_from_header`.

    Raises:
        httpx.HTTPStatusError: the server answered with an error status.
        ParseError: the Content-Disposition header is malformed.
    """
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            response = await own_client.head(url)
    else:
        response = await client.head(url, follow_redirects=True)
    response.raise_for_status()

    filename, ext = filename_from_response(response)
    logger.debug("Filename from %s: name=%s ext=%s", url, filename, ext)
    return filename, ext
