"""Tests for query-string and path parameter readers."""

import pytest
from starlette.datastructures import QueryParams

from hotel_api.api.params import query_values, read_csv, read_id_param, read_int, read_string
from hotel_api.core.exceptions import RecordNotFoundError
from hotel_api.core.validator import Validator


class TestQueryValues:
    """Tests for query_values."""

    def test_collects_repeated_keys_in_order(self) -> None:
        values = query_values(QueryParams("sort=name&page=2&sort=-id"))
        assert values == {"sort": ["name", "-id"], "page": ["2"]}

    def test_empty_query(self) -> None:
        assert query_values(QueryParams("")) == {}


class TestReadString:
    """Tests for read_string."""

    def test_first_value_returned(self) -> None:
        assert read_string({"search": ["spa", "pool"]}, "search", "") == "spa"

    def test_missing_key_returns_default(self) -> None:
        assert read_string({}, "sort", "hotel_id") == "hotel_id"

    def test_empty_value_returns_default(self) -> None:
        assert read_string({"sort": [""]}, "sort", "hotel_id") == "hotel_id"

    def test_empty_list_returns_default(self) -> None:
        assert read_string({"sort": []}, "sort", "id") == "id"


class TestReadCsv:
    """Tests for read_csv."""

    def test_splits_on_commas(self) -> None:
        assert read_csv({"fields": ["a,b,c"]}, "fields", []) == ["a", "b", "c"]

    def test_parts_are_not_trimmed(self) -> None:
        assert read_csv({"fields": ["a, b"]}, "fields", []) == ["a", " b"]

    def test_whitespace_is_preserved(self) -> None:
        assert read_csv({"tags": ["hotel, resort , spa"]}, "tags", ["default"]) == ["hotel", " resort ", " spa"]

    def test_missing_returns_default(self) -> None:
        default = ["x"]
        assert read_csv({}, "fields", default) is default


class TestReadInt:
    """Tests for read_int."""

    def test_parses_integer(self) -> None:
        v = Validator()
        assert read_int({"page": ["3"]}, "page", 1, v) == 3
        assert v.valid()

    def test_signed_integers(self) -> None:
        v = Validator()
        assert read_int({"page": ["-2"]}, "page", 1, v) == -2
        assert read_int({"page": ["+5"]}, "page", 1, v) == 5
        assert v.valid()

    def test_missing_returns_default_without_error(self) -> None:
        v = Validator()
        assert read_int({}, "page", 1, v) == 1
        assert v.valid()

    def test_empty_returns_default_without_error(self) -> None:
        v = Validator()
        assert read_int({"page": [""]}, "page", 1, v) == 1
        assert v.valid()

    @pytest.mark.parametrize(
        "raw", ["abc", "1.5", "1e3", " 2", "2 ", "5\n", "0x10", "٣", "9" * 5000, "9223372036854775808"]
    )
    def test_non_integer_records_error(self, raw: str) -> None:
        v = Validator()
        assert read_int({"page_size": [raw]}, "page_size", 20, v) == 20
        assert v.errors == {"page_size": "must be an integer value"}


class TestReadIdParam:
    """Tests for read_id_param."""

    def test_positive_integer(self) -> None:
        assert read_id_param("42") == 42

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "1.0", "9x", "5\n", "9" * 5000, "9223372036854775808"])
    def test_invalid_ids_raise_not_found(self, raw: str) -> None:
        with pytest.raises(RecordNotFoundError):
            read_id_param(raw)

    def test_largest_64_bit_id(self) -> None:
        assert read_id_param("9223372036854775807") == 2**63 - 1


class TestReadIntRange:
    """Tests for the 64-bit bounds applied by read_int."""

    def test_bounds_are_accepted(self) -> None:
        v = Validator()
        assert read_int({"page": ["9223372036854775807"]}, "page", 1, v) == 2**63 - 1
        assert read_int({"page": ["-9223372036854775808"]}, "page", 1, v) == -(2**63)
        assert v.valid()

    def test_leading_zeros_do_not_count_towards_length(self) -> None:
        v = Validator()
        assert read_int({"page": ["0" * 40 + "7"]}, "page", 1, v) == 7
        assert v.valid()

    def test_below_minimum_records_error(self) -> None:
        v = Validator()
        assert read_int({"page": ["-9223372036854775809"]}, "page", 1, v) == 1
        assert v.errors == {"page": "must be an integer value"}
