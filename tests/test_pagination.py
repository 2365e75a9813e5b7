"""Catalogue pagination tests: pure page math and the Paginator state holder."""

import pytest

from bookshop.catalog.pagination import (
    Paginator,
    change_page,
    page_slice,
    should_paginate,
    total_pages,
)


# -- total_pages ---------------------------------------------------------------

def test_total_pages_empty_list_has_no_pages():
    assert total_pages(0, 12) == 0
    assert total_pages(0, 1) == 0


@pytest.mark.parametrize(
    "length,size,expected",
    [(1, 12, 1), (12, 12, 1), (13, 12, 2), (25, 12, 3), (24, 12, 2), (7, 1, 7)],
)
def test_total_pages_rounds_up(length, size, expected):
    assert total_pages(length, size) == expected


def test_total_pages_rejects_bad_page_size():
    with pytest.raises(ValueError):
        total_pages(10, 0)


# -- page_slice ----------------------------------------------------------------

def test_page_slices_cover_list_without_overlap():
    items = list(range(25))
    pages = [page_slice(items, p, 12) for p in range(1, total_pages(25, 12) + 1)]
    assert [len(p) for p in pages] == [12, 12, 1]
    assert sum(pages, []) == items


def test_page_slice_past_the_end_is_empty():
    assert page_slice(list(range(25)), 4, 12) == []
    assert page_slice([], 1, 12) == []


def test_page_slice_requires_positive_page():
    with pytest.raises(ValueError):
        page_slice([1, 2, 3], 0, 12)


# -- change_page ---------------------------------------------------------------

def test_change_page_accepts_pages_in_range():
    assert change_page(2, 1, 3) == 2
    assert change_page(3, 1, 3) == 3


def test_change_page_ignores_out_of_range_requests():
    assert change_page(0, 2, 3) == 2
    assert change_page(4, 3, 3) == 3
    assert change_page(1, 1, 0) == 1


def test_change_page_to_current_page_is_noop():
    assert change_page(2, 2, 3) == 2


def test_should_paginate_only_with_several_pages():
    assert not should_paginate(0)
    assert not should_paginate(1)
    assert should_paginate(2)


# -- Paginator -----------------------------------------------------------------

def test_paginator_scenario_25_items():
    paginator = Paginator(list(range(25)), page_size=12)
    assert paginator.total_pages == 3
    assert paginator.current_items == list(range(12))

    assert paginator.go_to(2)
    assert paginator.current_items == list(range(12, 24))

    assert paginator.go_to(3)
    assert paginator.current_items == [24]

    assert not paginator.go_to(4)
    assert paginator.current_page == 3


def test_paginator_next_and_previous_stop_at_bounds():
    paginator = Paginator(list(range(5)), page_size=2)
    assert not paginator.has_previous
    assert not paginator.previous()
    assert paginator.next() and paginator.next()
    assert paginator.current_page == 3
    assert not paginator.has_next
    assert not paginator.next()
    assert paginator.page_numbers == [1, 2, 3]


def test_paginator_empty_catalogue():
    paginator = Paginator([], page_size=12)
    assert paginator.total_pages == 0
    assert paginator.current_items == []
    assert not paginator.show_controls
    assert not paginator.go_to(1)
    assert paginator.current_page == 1
