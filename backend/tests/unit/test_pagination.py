"""Unit tests for the pagination resolver."""

import pytest

from app.application.services.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    get_pagination_meta,
    parse_list_query,
    resolve_pagination,
)
from app.domain.entities import ListQuery


def test_parse_list_query_defaults():
    query = parse_list_query({})
    assert query == ListQuery(page=1, page_size=DEFAULT_PAGE_SIZE, search="", all=False, dropdown=False)


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "", "NaN", "Infinity", "0.5"])
def test_parse_list_query_falls_back_to_first_page(raw):
    assert parse_list_query({"page": raw}).page == 1


def test_parse_list_query_floors_fractional_values():
    query = parse_list_query({"page": "2.9", "pageSize": "15.7"})
    assert query.page == 2
    assert query.page_size == 15


def test_parse_list_query_clamps_page_size():
    assert parse_list_query({"pageSize": "1000"}).page_size == MAX_PAGE_SIZE
    assert parse_list_query({"pageSize": "-1"}).page_size == DEFAULT_PAGE_SIZE


def test_parse_list_query_trims_search_and_reads_flags():
    query = parse_list_query({"q": "  acme ", "all": "true", "dropdown": "true"})
    assert query.search == "acme"
    assert query.all is True
    assert query.dropdown is True


@pytest.mark.parametrize("raw", ["1", "True", "yes", ""])
def test_flags_only_accept_literal_true(raw):
    query = parse_list_query({"all": raw, "dropdown": raw})
    assert query.all is False
    assert query.dropdown is False


def test_resolve_pagination_bounded_window():
    bounds = resolve_pagination(22, ListQuery(page=3, page_size=10))
    assert (bounds.skip, bounds.take, bounds.page, bounds.page_size) == (20, 10, 3, 10)


def test_resolve_pagination_keeps_out_of_range_page_for_fetch():
    bounds = resolve_pagination(22, ListQuery(page=5, page_size=10))
    assert bounds.skip == 40
    assert bounds.take == 10


def test_resolve_pagination_all_mode_is_unbounded():
    bounds = resolve_pagination(37, ListQuery(page=4, page_size=10, all=True))
    assert bounds.skip == 0
    assert bounds.take is None
    assert bounds.page == 1
    assert bounds.page_size == 37


def test_resolve_pagination_all_mode_without_rows_keeps_requested_size():
    bounds = resolve_pagination(0, ListQuery(page_size=25, all=True))
    assert bounds.page_size == 25


def test_meta_on_last_page():
    meta = get_pagination_meta(22, 3, 10)
    assert meta.total_pages == 3
    assert meta.page == 3
    assert meta.has_next is False
    assert meta.has_prev is True


def test_meta_clamps_page_past_the_end():
    meta = get_pagination_meta(22, 5, 10)
    assert meta.page == 3
    assert meta.has_next is False
    assert meta.has_prev is True


def test_meta_for_empty_result():
    meta = get_pagination_meta(0, 4, 10)
    assert meta.page == 1
    assert meta.total_pages == 0
    assert meta.has_next is False
    assert meta.has_prev is False


@pytest.mark.parametrize(
    ("total", "page_size", "expected_pages"),
    [(1, 10, 1), (10, 10, 1), (11, 10, 2), (100, 7, 15)],
)
def test_meta_total_pages_is_ceiling(total, page_size, expected_pages):
    meta = get_pagination_meta(total, 1, page_size)
    assert meta.total_pages == expected_pages
    assert meta.has_next is (expected_pages > 1)


def test_huge_page_keeps_offset_within_64_bits():
    query = parse_list_query({"page": "100000000000000000000", "pageSize": "100"})
    bounds = resolve_pagination(5, query)

    assert query.page == MAX_PAGE
    assert 0 < bounds.skip <= 2**63 - 1
    assert get_pagination_meta(5, bounds.page, bounds.page_size).page == 1
