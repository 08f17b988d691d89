"""Tests for the offset pagination helper."""

from domo.pagination import PAGE_SIZE, fetch_all


def make_fetcher(total):
    calls = []

    def fetch_page(limit, offset):
        calls.append((limit, offset))
        return list(range(offset, min(offset + limit, total)))

    return fetch_page, calls


class TestFetchAll:
    def test_stops_on_short_page(self):
        fetch_page, calls = make_fetcher(123)

        result = fetch_all(fetch_page)

        assert result == list(range(123))
        assert calls == [(50, 0), (50, 50), (50, 100)]

    def test_exact_multiple_needs_empty_page(self):
        fetch_page, calls = make_fetcher(100)

        result = fetch_all(fetch_page)

        assert len(result) == 100
        assert calls == [(50, 0), (50, 50), (50, 100)]

    def test_empty(self):
        fetch_page, calls = make_fetcher(0)

        assert fetch_all(fetch_page) == []
        assert calls == [(50, 0)]

    def test_custom_page_size(self):
        fetch_page, calls = make_fetcher(5)

        assert fetch_all(fetch_page, page_size=2) == [0, 1, 2, 3, 4]
        assert [offset for _, offset in calls] == [0, 2, 4]

    def test_default_page_size(self):
        assert PAGE_SIZE == 50
