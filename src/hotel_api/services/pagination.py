"""SQLAlchemy helpers that apply ``Filters`` and full-text search to a select."""

from typing import Any

from sqlalchemy import ColumnElement, Select, Table, func

from hotel_api.lib.pagination import Filters


def full_text_match(fts_column: Any, search: str) -> ColumnElement[bool]:
    """Build ``fts @@ plainto_tsquery('simple', search)``."""
    return fts_column.bool_op("@@")(func.plainto_tsquery("simple", search))


def paginate(query: Select[Any], table: Table, filters: Filters, *tiebreak: ColumnElement[Any]) -> Select[Any]:
    """Order by the safelisted sort column then ``tiebreak``, and apply LIMIT/OFFSET.

    Raises:
        UnsafeSortError: If ``filters.sort`` is not safelisted.
    """
    column = table.c[filters.sort_column()]
    ordering = column.desc() if filters.sort_direction() == "DESC" else column.asc()
    return query.order_by(ordering, *tiebreak).limit(filters.limit()).offset(filters.offset())
