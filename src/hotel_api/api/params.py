"""Typed readers for raw query-string and path values.

Query values arrive as a mapping of name to every value supplied for
that name, in order.  Readers take the first value; an absent key and an
empty first value both fall back to the default.
"""

import re
from collections.abc import Mapping, Sequence

from starlette.datastructures import QueryParams

from hotel_api.core.exceptions import RecordNotFoundError
from hotel_api.core.validator import Validator

QueryValues = Mapping[str, Sequence[str]]

_INT_RX = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_INT_MAX_DIGITS = len(str(_INT_MAX))


def _parse_int(value: str) -> int | None:
    """Parse a signed base-10 integer in the 64-bit range, or return None."""
    if not _INT_RX.fullmatch(value):
        return None
    if len(value.lstrip("+-").lstrip("0")) > _INT_MAX_DIGITS:
        return None
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


def query_values(params: QueryParams) -> dict[str, list[str]]:
    """Convert Starlette query params into a name to values mapping."""
    return {key: params.getlist(key) for key in params}


def _first(params: QueryValues, key: str) -> str:
    values = params.get(key)
    if not values:
        return ""
    return values[0]


def read_string(params: QueryValues, key: str, default: str) -> str:
    """Return the first value for ``key``, or ``default`` if absent or empty."""
    value = _first(params, key)
    return value or default


def read_csv(params: QueryValues, key: str, default: list[str]) -> list[str]:
    """Return the first value for ``key`` split on commas.

    Parts are not trimmed.  ``default`` is returned unchanged when the key
    is absent or empty.
    """
    value = _first(params, key)
    if not value:
        return default
    return value.split(",")


def read_int(params: QueryValues, key: str, default: int, v: Validator) -> int:
    """Return the first value for ``key`` parsed as a base-10 integer.

    An absent or empty value returns ``default`` silently.  A value that
    is not a 64-bit integer records ``"must be an integer value"`` under ``key``
    on ``v`` and also returns ``default``.
    """
    value = _first(params, key)
    if not value:
        return default
    number = _parse_int(value)
    if number is None:
        v.add_error(key, "must be an integer value")
        return default
    return number


def read_id_param(raw: str) -> int:
    """Parse a path ID; only positive 64-bit base-10 integers are accepted.

    Raises:
        RecordNotFoundError: If ``raw`` is not a positive integer.
    """
    value = _parse_int(raw)
    if value is None or value < 1:
        raise RecordNotFoundError("resource", raw)
    return value
