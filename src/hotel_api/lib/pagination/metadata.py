"""Pagination metadata derived from a total row count."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Metadata:
    """Summary of where a page sits in the full result set.

    All fields are zero when the result set is empty.
    """

    current_page: int = 0
    page_size: int = 0
    first_page: int = 0
    last_page: int = 0
    total_records: int = 0


def calculate_metadata(total_records: int, page: int, page_size: int) -> Metadata:
    """Build ``Metadata`` for a page of ``page_size`` rows out of ``total_records``.

    Args:
        total_records: Rows matching the query, ignoring pagination.
        page: Requested 1-based page number.
        page_size: Requested rows per page; must be positive.

    Returns:
        The derived metadata, or an all-zero ``Metadata`` when there are no rows.
    """
    if total_records == 0:
        return Metadata()

    return Metadata(
        current_page=page,
        page_size=page_size,
        first_page=1,
        last_page=(total_records + page_size - 1) // page_size,
        total_records=total_records,
    )
