"""Application-level exceptions shared by services and routers."""


class RecordNotFoundError(Exception):
    """Raised when a requested row does not exist."""

    def __init__(self, entity: str, entity_id: object | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        msg = f"{entity} not found" if entity_id is None else f"{entity} {entity_id!r} not found"
        super().__init__(msg)


class FailedValidationError(Exception):
    """Raised when request input fails validation.

    Args:
        errors: Field name to message mapping, as collected by a ``Validator``.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(f"validation failed: {', '.join(sorted(self.errors))}")
