"""Tests for calculate_metadata."""

import pytest

from hotel_api.lib.pagination import Metadata, calculate_metadata


class TestCalculateMetadata:
    """Tests for calculate_metadata."""

    def test_zero_records_returns_empty_metadata(self) -> None:
        assert calculate_metadata(0, 3, 20) == Metadata()

    def test_empty_metadata_is_all_zero(self) -> None:
        meta = Metadata()
        assert (meta.current_page, meta.page_size, meta.first_page, meta.last_page, meta.total_records) == (
            0,
            0,
            0,
            0,
            0,
        )

    def test_exact_multiple(self) -> None:
        meta = calculate_metadata(40, 1, 20)
        assert meta == Metadata(current_page=1, page_size=20, first_page=1, last_page=2, total_records=40)

    def test_partial_last_page(self) -> None:
        assert calculate_metadata(41, 2, 20).last_page == 3

    def test_single_record(self) -> None:
        meta = calculate_metadata(1, 1, 100)
        assert meta.first_page == 1
        assert meta.last_page == 1

    def test_current_page_is_echoed_even_past_the_end(self) -> None:
        meta = calculate_metadata(5, 9, 2)
        assert meta.current_page == 9
        assert meta.last_page == 3

    @pytest.mark.parametrize(
        ("total", "page_size", "last_page"),
        [(1, 1, 1), (99, 10, 10), (100, 10, 10), (101, 10, 11), (1000, 100, 10), (7, 3, 3)],
    )
    def test_last_page_is_ceiling(self, total: int, page_size: int, last_page: int) -> None:
        assert calculate_metadata(total, 1, page_size).last_page == last_page

    def test_metadata_is_immutable(self) -> None:
        meta = calculate_metadata(10, 1, 5)
        with pytest.raises(AttributeError):
            meta.total_records = 11  # type: ignore[misc]
