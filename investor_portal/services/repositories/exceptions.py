"""Errors raised by the repositories.

Lookups that may miss return None (find_*); these cover the cases where a
caller asked for something that must exist, or tried to provision an
account that already does.
"""


class RepositoryError(Exception):
    """Common parent so callers can catch any data access failure."""


class NotFoundError(RepositoryError):
    """A get_* lookup found no row."""

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(f"No {entity_type} with id {identifier}")


class DuplicateError(RepositoryError):
    """A unique login identifier (email, phone, admin membership) is taken."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type}.{field} already registered: {value}")
