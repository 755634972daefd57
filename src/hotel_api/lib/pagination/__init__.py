"""Pagination library: filters, safelisted sorting, and page metadata.

Public API:
    - Filters: page/page_size/sort request shape with SQL helpers
    - SortConfig: per-resource default sort and sortable columns
    - validate_filters: record paging/sort errors on a Validator
    - Metadata / calculate_metadata: page bounds from a total count
    - UnsafeSortError: raised when an unsafelisted sort reaches a query
"""

from hotel_api.lib.pagination.filters import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    Filters,
    SortConfig,
    UnsafeSortError,
    validate_filters,
)
from hotel_api.lib.pagination.metadata import Metadata, calculate_metadata

__all__ = [
    "MAX_PAGE",
    "MAX_PAGE_SIZE",
    "Filters",
    "Metadata",
    "SortConfig",
    "UnsafeSortError",
    "calculate_metadata",
    "validate_filters",
]
