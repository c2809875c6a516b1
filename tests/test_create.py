"""Tests for _formatter module -- building Content-Disposition values."""

from __future__ import annotations

import pytest

from content_disposition import (
    ContentDisposition,
    InvalidArgumentError,
    InvalidTypeError,
    create,
    format_disposition,
)


class TestCreate:
    def test_no_filename(self) -> None:
        assert create() == "attachment"

    def test_filename_must_be_string(self) -> None:
        with pytest.raises(InvalidArgumentError, match="filename must be a string") as info:
            create(42)  # type: ignore[arg-type]
        assert info.value.value == 42

    def test_filename(self) -> None:
        assert create("plans.pdf") == 'attachment; filename="plans.pdf"'

    def test_basename(self) -> None:
        assert create("/path/to/plans.pdf") == 'attachment; filename="plans.pdf"'

    def test_basename_trailing_slash(self) -> None:
        assert create("/path/to/plans/") == 'attachment; filename="plans"'

    def test_empty_name_stays_quoted(self) -> None:
        assert create("") == 'attachment; filename=""'
        assert create("/") == 'attachment; filename=""'

    def test_empty_name_with_fallback_string(self) -> None:
        assert create("", {"fallback": "plans.pdf"}) == 'attachment; filename="plans.pdf"'


class TestUsAscii:
    def test_only_filename_parameter(self) -> None:
        assert create("plans.pdf") == 'attachment; filename="plans.pdf"'

    def test_escape_quotes(self) -> None:
        assert create('the "plans".pdf') == 'attachment; filename="the \\"plans\\".pdf"'

    def test_escape_backslash(self) -> None:
        assert create("back\\slash.pdf") == 'attachment; filename="back\\\\slash.pdf"'


class TestLatin1:
    def test_only_filename_parameter(self) -> None:
        assert create("«plans».pdf") == 'attachment; filename="«plans».pdf"'

    def test_escape_quotes(self) -> None:
        assert create('the "plans" (1µ).pdf') == 'attachment; filename="the \\"plans\\" (1µ).pdf"'


class TestUnicode:
    def test_extended_parameter(self) -> None:
        assert create("планы.pdf") == (
            "attachment; filename=\"?????.pdf\"; filename*=UTF-8''%D0%BF%D0%BB%D0%B0%D0%BD%D1%8B.pdf"
        )

    def test_fallback(self) -> None:
        assert create("£ and € rates.pdf") == (
            "attachment; filename=\"£ and ? rates.pdf\"; filename*=UTF-8''%C2%A3%20and%20%E2%82%AC%20rates.pdf"
        )
        assert create("€ rates.pdf") == "attachment; filename=\"? rates.pdf\"; filename*=UTF-8''%E2%82%AC%20rates.pdf"

    def test_special_characters(self) -> None:
        assert create("€'*%().pdf") == (
            "attachment; filename=\"?'*%().pdf\"; filename*=UTF-8''%E2%82%AC%27%2A%25%28%29.pdf"
        )


class TestHexEscape:
    def test_extended_parameter(self) -> None:
        assert create("the%20plans.pdf") == (
            "attachment; filename=\"the%20plans.pdf\"; filename*=UTF-8''the%2520plans.pdf"
        )

    def test_unicode(self) -> None:
        assert create("€%20£.pdf") == "attachment; filename=\"?%20£.pdf\"; filename*=UTF-8''%E2%82%AC%2520%C2%A3.pdf"


class TestFallbackOption:
    def test_must_be_string_or_bool(self) -> None:
        with pytest.raises(InvalidArgumentError, match="fallback must be a string or boolean"):
            create("plans.pdf", {"fallback": 42})  # type: ignore[typeddict-item]

    def test_default_true(self) -> None:
        assert create("€ rates.pdf") == create("€ rates.pdf", {"fallback": True})

    def test_false_drops_fallback(self) -> None:
        assert create("£ and € rates.pdf", {"fallback": False}) == (
            "attachment; filename*=UTF-8''%C2%A3%20and%20%E2%82%AC%20rates.pdf"
        )

    def test_false_keeps_latin1_filename(self) -> None:
        assert create("£ rates.pdf", {"fallback": False}) == 'attachment; filename="£ rates.pdf"'

    def test_true_passes_latin1_filename(self) -> None:
        assert create("£ rates.pdf", {"fallback": True}) == 'attachment; filename="£ rates.pdf"'

    def test_string_must_be_latin1(self) -> None:
        with pytest.raises(InvalidArgumentError, match="fallback must be ISO-8859-1 string"):
            create("€ rates.pdf", {"fallback": "€ rates.pdf"})

    def test_string_used_as_fallback(self) -> None:
        assert create("£ and € rates.pdf", {"fallback": "£ and EURO rates.pdf"}) == (
            "attachment; filename=\"£ and EURO rates.pdf\"; filename*=UTF-8''%C2%A3%20and%20%E2%82%AC%20rates.pdf"
        )

    def test_string_used_even_for_latin1_filename(self) -> None:
        assert create('"£ rates".pdf', {"fallback": "£ rates.pdf"}) == (
            "attachment; filename=\"£ rates.pdf\"; filename*=UTF-8''%22%C2%A3%20rates%22.pdf"
        )

    def test_string_equal_to_filename(self) -> None:
        assert create("plans.pdf", {"fallback": "plans.pdf"}) == 'attachment; filename="plans.pdf"'

    def test_string_basename(self) -> None:
        assert create("€ rates.pdf", {"fallback": "/path/to/EURO rates.pdf"}) == (
            "attachment; filename=\"EURO rates.pdf\"; filename*=UTF-8''%E2%82%AC%20rates.pdf"
        )

    def test_ignored_without_filename(self) -> None:
        assert create(None, {"fallback": "plans.pdf"}) == "attachment"
        assert create(None, {"fallback": 42}) == "attachment"  # type: ignore[typeddict-item]


class TestTypeOption:
    def test_default_attachment(self) -> None:
        assert create(None, {}) == "attachment"

    def test_must_be_string(self) -> None:
        with pytest.raises(InvalidTypeError, match="invalid type"):
            create(None, {"type": 42})  # type: ignore[typeddict-item]

    @pytest.mark.parametrize("value", ["", "invlaid;type", "in line", '"inline"'])
    def test_must_be_token(self, value: str) -> None:
        with pytest.raises(InvalidTypeError, match="invalid type") as info:
            create(None, {"type": value})
        assert info.value.value == value

    def test_inline(self) -> None:
        assert create(None, {"type": "inline"}) == "inline"

    def test_inline_with_filename(self) -> None:
        assert create("plans.pdf", {"type": "inline"}) == 'inline; filename="plans.pdf"'

    def test_normalized(self) -> None:
        assert create(None, {"type": "INLINE"}) == "inline"


class TestFormatDisposition:
    def test_sorted_parameters(self) -> None:
        disposition = ContentDisposition("Inline", {"title*": "café", "filename": "a.txt", "b": 'x"y'})
        assert format_disposition(disposition) == (
            "inline; b=\"x\\\"y\"; filename=\"a.txt\"; title*=UTF-8''caf%C3%A9"
        )

    def test_to_header(self) -> None:
        assert ContentDisposition("attachment", {"filename": "plans.pdf"}).to_header() == (
            'attachment; filename="plans.pdf"'
        )

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidTypeError):
            format_disposition(ContentDisposition("", {}))

    def test_non_latin1_plain_value_uses_extended_form(self) -> None:
        disposition = ContentDisposition("attachment", {"filename": "€ rates.pdf"})
        assert disposition.to_header() == (
            "attachment; filename=\"? rates.pdf\"; filename*=UTF-8''%E2%82%AC%20rates.pdf"
        )

    def test_non_latin1_plain_value_keeps_existing_extended_value(self) -> None:
        disposition = ContentDisposition("inline", {"title": "€", "title*": "€ euro"})
        assert format_disposition(disposition) == "inline; title=\"?\"; title*=UTF-8''%E2%82%AC%20euro"

    def test_empty_plain_value(self) -> None:
        assert format_disposition(ContentDisposition("attachment", {"filename": ""})) == 'attachment; filename=""'

    def test_empty_extended_value(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be empty"):
            format_disposition(ContentDisposition("attachment", {"filename*": ""}))

    def test_unquotable_continuation_value(self) -> None:
        with pytest.raises(InvalidArgumentError, match="ISO-8859-1"):
            format_disposition(ContentDisposition("attachment", {"filename*0": "€"}))

    def test_continuation_names_stay_quoted(self) -> None:
        disposition = ContentDisposition("attachment", {"filename*0*": "UTF-8''foo-%c3%a4"})
        assert format_disposition(disposition) == "attachment; filename*0*=\"UTF-8''foo-%c3%a4\""
