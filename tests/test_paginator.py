"""Tests for page normalization and derived page numbers."""
import math
from contextlib import closing

import pytest

from fastapi_paginator import Paginator, PaginationTypeError, PaginationValueError


def test_zero_page_normalizes_to_first_page():
    assert Paginator(10, 2, 0).current_page == 1
    assert Paginator.create(10, 2).current_page == 1


def test_page_past_the_end_normalizes_to_last_page():
    paginator = Paginator(10, 2, 7)
    assert paginator.number_of_pages == 5
    assert paginator.current_page == 5


def test_page_in_range_is_unchanged():
    assert Paginator(73, 25, 2).current_page == 2


def test_negative_page_normalizes_to_first_page():
    assert Paginator(73, 25, -4).current_page == 1


@pytest.mark.parametrize(
    "number_of_items, items_per_page, page, expected",
    [(28, 25, 2, 25), (10, 3, 1, 0), (10, 3, 4, 9)],
)
def test_offset(number_of_items, items_per_page, page, expected):
    assert Paginator(number_of_items, items_per_page, page).offset == expected


@pytest.mark.parametrize(
    "number_of_items, items_per_page, expected",
    [(28, 25, 2), (10, 3, 4), (10, 25, 1), (0, 25, 1), (50, 25, 2)],
)
def test_number_of_pages(number_of_items, items_per_page, expected):
    assert Paginator(number_of_items, items_per_page, 1).number_of_pages == expected


def test_number_of_pages_matches_ceiling_division():
    for number_of_items in range(0, 60):
        for items_per_page in range(1, 12):
            paginator = Paginator(number_of_items, items_per_page, 1)
            assert paginator.number_of_pages == max(1, math.ceil(number_of_items / items_per_page))


def test_empty_collection_has_one_page():
    paginator = Paginator(0, 10, 3)
    assert paginator.number_of_pages == 1
    assert paginator.current_page == 1
    assert paginator.offset == 0
    assert paginator.show is False


@pytest.mark.parametrize(
    "number_of_items, items_per_page, page, expected",
    [(28, 25, 2, 1), (10, 3, 1, 1), (101, 25, 5, 4)],
)
def test_previous_page(number_of_items, items_per_page, page, expected):
    assert Paginator(number_of_items, items_per_page, page).previous_page == expected


@pytest.mark.parametrize(
    "number_of_items, items_per_page, page, expected",
    [(28, 25, 2, 2), (10, 3, 1, 2), (101, 25, 5, 5)],
)
def test_next_page(number_of_items, items_per_page, page, expected):
    assert Paginator(number_of_items, items_per_page, page).next_page == expected


def test_neighbouring_pages_stay_in_range():
    for page in range(-2, 10):
        paginator = Paginator(37, 5, page)
        assert 1 <= paginator.previous_page <= paginator.number_of_pages
        assert 1 <= paginator.next_page <= paginator.number_of_pages
        assert paginator.offset == (paginator.current_page - 1) * paginator.items_per_page


def test_is_current_page():
    paginator = Paginator(28, 25, 2)
    assert paginator.is_current_page(2)
    assert not paginator.is_current_page(1)
    assert not paginator.is_current_page(99)


def test_pages():
    assert Paginator(10, 3, 1).pages() == [1, 2, 3, 4]
    assert Paginator(10, 25, 1).pages() == [1]


def test_pages_stream_matches_pages():
    paginator = Paginator(101, 25, 1)
    assert list(paginator.pages_stream()) == paginator.pages()


def test_pages_stream_is_lazy_and_one_shot():
    stream = Paginator(10, 3, 1).pages_stream()
    assert next(stream) == 1
    assert next(stream) == 2
    assert list(stream) == [3, 4]
    assert list(stream) == []


def test_pages_stream_can_be_closed_early():
    with closing(Paginator(1000, 1, 1).pages_stream()) as stream:
        assert next(stream) == 1
        assert next(stream) == 2
    with pytest.raises(StopIteration):
        next(stream)


@pytest.mark.parametrize(
    "number_of_items, items_per_page, expected",
    [(28, 25, True), (10, 25, False), (25, 25, False), (26, 25, True)],
)
def test_show(number_of_items, items_per_page, expected):
    assert Paginator(number_of_items, items_per_page, 1).show is expected


def test_scenario_28_items_page_2():
    paginator = Paginator(28, 25, 2)
    assert paginator.offset == 25
    assert paginator.number_of_pages == 2
    assert paginator.previous_page == 1
    assert paginator.next_page == 2
    assert paginator.show is True


@pytest.mark.parametrize("items_per_page", [0, -1])
def test_rejects_non_positive_page_size(items_per_page):
    with pytest.raises(PaginationValueError):
        Paginator(10, items_per_page, 1)


def test_rejects_negative_item_count():
    with pytest.raises(ValueError):
        Paginator(-1, 10, 1)


def test_paginator_is_read_only():
    paginator = Paginator(10, 2, 1)
    with pytest.raises(AttributeError):
        paginator.current_page = 3
    with pytest.raises(AttributeError):
        paginator.extra = True


def test_equality_and_repr():
    assert Paginator(10, 2, 0) == Paginator(10, 2, 1)
    assert Paginator(10, 2, 1) != Paginator(10, 2, 2)
    assert len({Paginator(10, 2, 0), Paginator(10, 2, 1)}) == 1
    assert repr(Paginator(10, 2, 7)) == "Paginator(number_of_items=10, items_per_page=2, page=5)"


@pytest.mark.parametrize(
    "number_of_items, items_per_page, page",
    [(10, 2.5, 1), (10.0, 2, 1), (10, 2, "1"), (10, None, 1)],
)
def test_rejects_non_integer_arguments(number_of_items, items_per_page, page):
    with pytest.raises(PaginationTypeError):
        Paginator(number_of_items, items_per_page, page)


def test_accepts_integer_like_arguments():
    class PageNumber:
        def __index__(self):
            return 2

    paginator = Paginator(28, 25, PageNumber())
    assert paginator.current_page == 2
    assert paginator.pages() == [1, 2]
