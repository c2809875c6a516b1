"""Shared fixtures for content-disposition tests."""

from __future__ import annotations

import pytest

# ---------------------------------------------------------------------------
# Header fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def download_url() -> str:
    return "https://example.com/download/42"


@pytest.fixture()
def euro_header() -> str:
    """A header whose file name only survives through the extended value."""
    return "attachment; filename=\"EURO rates.pdf\"; filename*=UTF-8''%E2%82%AC%20rates.pdf"


@pytest.fixture()
def unicode_names() -> list[str]:
    return [
        "планы.pdf",
        "€ rates.pdf",
        "£ and € rates.pdf",
        "日本語のファイル.txt",
        "emoji-\U0001f600.png",
        "mixed \"quotes\" & 100%.csv",
    ]
