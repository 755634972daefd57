"""Paging, sorting and safelist rules shared by every list endpoint.

``Filters`` turns request values into the primitives an ordered,
paginated query needs.  The sort column is interpolated into
``ORDER BY`` (identifiers cannot be bound as parameters), so it is only
ever taken from the per-resource safelist.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from hotel_api.core.validator import Validator, permitted_value

MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


class UnsafeSortError(RuntimeError):
    """Raised when a sort value that is not in the safelist reaches query building.

    This is a programming error in the caller (``validate_filters`` was
    skipped or ignored), never a user error, and maps to a 500 response.
    """

    def __init__(self, sort: str) -> None:
        self.sort = sort
        super().__init__(f"unsafe sort parameter: {sort!r}")


@dataclass(frozen=True)
class SortConfig:
    """Per-resource sort settings: the default sort and the sortable columns.

    Attributes:
        default_sort: Sort value used when the request does not supply one.
        columns: Bare column names; each is also allowed with a ``-`` prefix.
    """

    default_sort: str
    columns: tuple[str, ...]

    @property
    def safelist(self) -> tuple[str, ...]:
        return self.columns + tuple(f"-{c}" for c in self.columns)


@dataclass(frozen=True)
class Filters:
    """One page of a listing request."""

    page: int
    page_size: int
    sort: str
    sort_safelist: Sequence[str] = field(default_factory=tuple)

    def sort_column(self) -> str:
        """Return the safelisted column name with any leading ``-`` removed.

        Raises:
            UnsafeSortError: If ``sort`` is not in ``sort_safelist``.
        """
        if self.sort not in self.sort_safelist:
            raise UnsafeSortError(self.sort)
        return self.sort.removeprefix("-")

    def sort_direction(self) -> str:
        return "DESC" if self.sort.startswith("-") else "ASC"

    def limit(self) -> int:
        return self.page_size

    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def validate_filters(v: Validator, filters: Filters) -> None:
    """Record every paging/sort problem with ``filters`` on ``v``.

    All checks run so that several invalid fields are reported together.
    """
    v.check(filters.page > 0, "page", "must be greater than zero")
    v.check(filters.page <= MAX_PAGE, "page", "must be a maximum of 10 million")
    v.check(filters.page_size > 0, "page_size", "must be greater than zero")
    v.check(filters.page_size <= MAX_PAGE_SIZE, "page_size", "must be a maximum of 100")
    v.check(permitted_value(filters.sort, *filters.sort_safelist), "sort", "invalid sort value")
