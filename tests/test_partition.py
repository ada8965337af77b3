from __future__ import annotations

import pytest

from pdf_range_splitter.exceptions import InvalidRangeError
from pdf_range_splitter.partition import partition_pages
from pdf_range_splitter.types import PageRange


def test_middle_range() -> None:
    partition = partition_pages(10, PageRange(3, 5))

    assert partition.extracted == (2, 3, 4)
    assert partition.remaining == (0, 1, 5, 6, 7, 8, 9)


def test_whole_document_leaves_nothing_remaining() -> None:
    partition = partition_pages(7, PageRange(1, 7))

    assert partition.extracted == tuple(range(7))
    assert partition.remaining == ()


def test_single_page_document() -> None:
    partition = partition_pages(1, PageRange(1, 1))

    assert partition.extracted == (0,)
    assert partition.remaining == ()


def test_single_page_range() -> None:
    partition = partition_pages(10, PageRange(10, 10))

    assert partition.extracted == (9,)
    assert partition.remaining == tuple(range(9))


def test_every_valid_range_partitions_the_index_space() -> None:
    for total in range(1, 13):
        for start in range(1, total + 1):
            for end in range(start, total + 1):
                partition = partition_pages(total, PageRange(start, end))
                extracted, remaining = partition.extracted, partition.remaining

                assert len(extracted) == end - start + 1
                assert len(remaining) == total - (end - start + 1)
                assert not set(extracted) & set(remaining)
                assert sorted(extracted + remaining) == list(range(total))
                assert list(extracted) == sorted(set(extracted))
                assert list(remaining) == sorted(set(remaining))


def test_range_past_document_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        partition_pages(4, PageRange(2, 5))


def test_zero_page_document_rejects_any_range() -> None:
    with pytest.raises(InvalidRangeError):
        partition_pages(0, PageRange(1, 1))


def test_negative_page_count_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        partition_pages(-1, PageRange(1, 1))
