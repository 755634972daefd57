"""Field-scoped validation error accumulator.

A ``Validator`` collects one human-readable message per field.  Checks
run unconditionally so a single pass can surface every problem with a
request; callers inspect ``valid()`` once at the end.

The predicates below are the building blocks for ``check`` calls:
``permitted_value`` backs the sort safelist in listing validation, while
``unique``, ``matches`` and ``EMAIL_RX`` are available for request
fields that need them.
"""

import re
from collections.abc import Hashable, Iterable

EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\Z"
)


class Validator:
    """Accumulates validation errors keyed by field name.

    Only the first message recorded for a field is kept; later messages
    for the same field are ignored.
    """

    def __init__(self) -> None:
        self.errors: dict[str, str] = {}

    def valid(self) -> bool:
        """Return True when no errors have been recorded."""
        return not self.errors

    def add_error(self, field: str, message: str) -> None:
        """Record ``message`` for ``field`` unless the field already has one."""
        self.errors.setdefault(field, message)

    def check(self, ok: bool, field: str, message: str) -> None:
        """Record ``message`` for ``field`` when ``ok`` is false."""
        if not ok:
            self.add_error(field, message)


def permitted_value(value: object, *permitted: object) -> bool:
    """Return True if ``value`` is one of ``permitted``."""
    return value in permitted


def unique(values: Iterable[Hashable]) -> bool:
    """Return True if ``values`` contains no duplicates."""
    items = list(values)
    return len(set(items)) == len(items)


def matches(value: str, pattern: re.Pattern[str]) -> bool:
    """Return True if ``pattern`` matches ``value``."""
    return pattern.match(value) is not None
