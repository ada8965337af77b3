from __future__ import annotations

import pytest

from pdf_range_splitter.exceptions import (
    ExceedsDocumentError,
    InvalidFormatError,
    InvalidOrderError,
    PageOutOfBoundsError,
    RangeValidationError,
)
from pdf_range_splitter.ranges import describe_action, match_range, parse_range
from pdf_range_splitter.types import PageRange


def test_single_page_is_normalised_to_range() -> None:
    assert parse_range("5", 10) == PageRange(5, 5)


def test_range_is_parsed() -> None:
    assert parse_range("2-4") == PageRange(2, 4)


@pytest.mark.parametrize("text", ["  2-4  ", "2 - 4", "2\t-  4", "\n2-4\n"])
def test_whitespace_is_tolerated(text: str) -> None:
    assert parse_range(text, 10) == PageRange(2, 4)


@pytest.mark.parametrize(
    "text",
    ["abc", "", "   ", "2-", "-4", "2-4-6", "1,3", "2 4", "+3", "2.5", "٣", "２-４", None],
)
def test_invalid_format(text: str | None) -> None:
    with pytest.raises(InvalidFormatError) as exc_info:
        parse_range(text, 10)
    assert exc_info.value.kind == "InvalidFormat"


@pytest.mark.parametrize("text", ["0-2", "0", "0-0", "00"])
def test_page_zero_is_out_of_bounds(text: str) -> None:
    with pytest.raises(PageOutOfBoundsError):
        parse_range(text, 10)


def test_reversed_range_is_invalid_order() -> None:
    with pytest.raises(InvalidOrderError):
        parse_range("4-2", 10)


def test_range_past_last_page_exceeds_document() -> None:
    with pytest.raises(ExceedsDocumentError) as exc_info:
        parse_range("3-20", 10)
    assert "(10)" in str(exc_info.value)


def test_unknown_page_count_skips_document_check() -> None:
    assert parse_range("3-20", None) == PageRange(3, 20)


def test_zero_page_count_is_a_known_bound() -> None:
    with pytest.raises(ExceedsDocumentError):
        parse_range("1", 0)


def test_last_page_is_inclusive() -> None:
    assert parse_range("10", 10) == PageRange(10, 10)
    assert parse_range("1-10", 10) == PageRange(1, 10)


def test_validation_errors_share_a_base_class() -> None:
    for text in ("abc", "0-1", "3-2", "1-11"):
        with pytest.raises(RangeValidationError):
            parse_range(text, 10)


@pytest.mark.parametrize("text", ["7", "2-4", " 3 - 9 ", "1-1", "04-06"])
def test_parse_is_idempotent_on_its_label(text: str) -> None:
    first = parse_range(text, 10)
    assert parse_range(first.label(), 10) == first
    assert parse_range(parse_range(first.label(), 10).label(), 10) == first


def test_leading_zeros_are_numeric() -> None:
    assert parse_range("04-06", 10) == PageRange(4, 6)


@pytest.mark.parametrize("text", ["1-" + "9" * 5000, "9" * 5000, "1-1234567890"])
def test_oversized_page_numbers_are_invalid_format(text: str) -> None:
    for total_pages in (10, None):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_range(text, total_pages)
        assert "too large" in exc_info.value.message


def test_oversized_page_numbers_never_match() -> None:
    huge = "1-" + "9" * 5000
    assert match_range(huge) is None
    assert describe_action(huge) == "Start"
    assert match_range("000000000001-2") == (1, 2)


def test_match_range_is_syntax_only() -> None:
    assert match_range("4-2") == (4, 2)
    assert match_range("0") == (0, 0)
    assert match_range("x") is None


@pytest.mark.parametrize(
    ("text", "label"),
    [
        ("", "Start"),
        ("abc", "Start"),
        ("5", "Start (Remove page 5)"),
        (" 2 - 4 ", "Start (Remove pages 2–4)"),
    ],
)
def test_describe_action(text: str, label: str) -> None:
    assert describe_action(text) == label


def test_page_range_rejects_invalid_values() -> None:
    with pytest.raises(PageOutOfBoundsError):
        PageRange(0, 3)
    with pytest.raises(InvalidOrderError):
        PageRange(5, 3)


def test_page_range_helpers() -> None:
    page_range = PageRange(3, 5)
    assert page_range.page_count == 3
    assert page_range.to_indices() == (2, 3, 4)
    assert str(page_range) == "3-5"
    assert PageRange(4, 4).label() == "4"
