"""ContentDisposition dataclass and CreateOptions TypedDict."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict


class CreateOptions(TypedDict, total=False):
    """Options accepted by :func:`content_disposition.create`.

    ``type`` defaults to ``"attachment"``. ``fallback`` defaults to ``True``,
    which derives an ISO-8859-1 file name by replacing every other character
    with ``?``; ``False`` disables the fallback and a string supplies one.

    Examples:
        >>> options: CreateOptions = {"type": "inline", "fallback": "EURO rates.pdf"}
    """

    type: str
    fallback: bool | str


@dataclass
class ContentDisposition:
    """A parsed Content-Disposition header value.

    ``type`` is the lower-cased disposition type and ``parameters`` maps
    lower-cased parameter names to their decoded values. When a header carries
    both ``filename`` and ``filename*``, only the decoded extended value is
    kept under ``filename``.

    Examples:
        >>> cd = ContentDisposition("attachment", {"filename": "plans.pdf"})
        >>> cd.filename
        'plans.pdf'
    """

    type: str = field(default="attachment")
    parameters: dict[str, str] = field(default_factory=dict)

    @property
    def filename(self) -> str | None:
        return self.parameters.get("filename")

    @property
    def is_attachment(self) -> bool:
        return self.type == "attachment"

    @property
    def is_inline(self) -> bool:
        return self.type == "inline"

    def to_header(self) -> str:
        """Serialize back into a header value."""
        from ._formatter import format_disposition

        return format_disposition(self)
