"""Shared orchestration for paginated list endpoints.

Every list endpoint reads ``search``, ``page``, ``page_size`` and
``sort`` the same way, validates them against the resource's
``SortConfig``, and wraps the rows with pagination metadata.
"""

from dataclasses import dataclass

from hotel_api.api.params import QueryValues, read_int, read_string
from hotel_api.core.exceptions import FailedValidationError
from hotel_api.core.validator import Validator
from hotel_api.lib.pagination import Filters, Metadata, SortConfig, calculate_metadata, validate_filters

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class ListParams:
    """Validated search text and filters for one list request."""

    search: str
    filters: Filters


def parse_list_params(params: QueryValues, sort_config: SortConfig) -> ListParams:
    """Read and validate list parameters.

    Args:
        params: Raw query values.
        sort_config: Default sort and sortable columns for the resource.

    Returns:
        The validated search text and filters.

    Raises:
        FailedValidationError: With every field error found, if any check fails.
    """
    v = Validator()

    search = read_string(params, "search", "")
    filters = Filters(
        page=read_int(params, "page", DEFAULT_PAGE, v),
        page_size=read_int(params, "page_size", DEFAULT_PAGE_SIZE, v),
        sort=read_string(params, "sort", sort_config.default_sort),
        sort_safelist=sort_config.safelist,
    )

    validate_filters(v, filters)
    if not v.valid():
        raise FailedValidationError(v.errors)

    return ListParams(search=search, filters=filters)


def page_metadata(total_records: int, filters: Filters) -> Metadata:
    """Compute metadata for the page described by ``filters``."""
    return calculate_metadata(total_records, filters.page, filters.page_size)
