"""Error taxonomy raised by the location services.

Transport code maps the three top-level groups to status codes:
NotFoundError -> 404, InvalidArgumentError -> 400, DuplicateEntityError -> 409.
"""
from typing import Iterable, Optional


class LocationError(Exception):
    """Base exception for all location directory errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -------------------------------
# NOT FOUND
# -------------------------------
class NotFoundError(LocationError):
    """Raised when an id or natural key does not resolve."""

    def __init__(self, entity: str, value, key: str = "id"):
        super().__init__(f"The {entity.lower()} ({key}={value}) does not exist.")
        self.entity = entity
        self.key = key
        self.value = value


class ParentNotFoundError(NotFoundError):
    """Raised when a referenced parent id does not resolve."""

    def __init__(self, parent_type: str, parent_id):
        super().__init__(parent_type, parent_id)
        self.parent_type = parent_type
        self.parent_id = parent_id


# -------------------------------
# INVALID ARGUMENTS
# -------------------------------
class InvalidArgumentError(LocationError):
    """Raised when caller supplied input is rejected."""


class InvalidHierarchyError(InvalidArgumentError):
    """Raised when a state does not belong to the country of its city."""

    def __init__(self, state_id, country_id):
        super().__init__(
            f"The state ({state_id}) does not belong to the country ({country_id})."
        )
        self.state_id = state_id
        self.country_id = country_id


class InvalidSortDirectionError(InvalidArgumentError):
    def __init__(self, token: str):
        super().__init__(f'"{token}" is not a valid sort direction, use "asc" or "desc".')
        self.token = token


class UnknownSortFieldError(InvalidArgumentError):
    def __init__(self, entity: str, token: str):
        super().__init__(f'"{token}" is not a sortable field of {entity.lower()}.')
        self.entity = entity
        self.token = token


class AmbiguousOrMissingKeyError(InvalidArgumentError):
    def __init__(self, entity: str, keys: Iterable[str], supplied: Iterable[str]):
        keys = list(keys)
        supplied = list(supplied)
        super().__init__(
            f"Exactly one of {', '.join(keys)} must be specified to find a {entity.lower()}"
            f" (got {', '.join(supplied) if supplied else 'none'})."
        )
        self.entity = entity
        self.keys = keys
        self.supplied = supplied


class InvalidPaginationError(InvalidArgumentError):
    def __init__(self, field: str, value):
        super().__init__(f"Invalid pagination parameter {field}={value}.")
        self.field = field
        self.value = value


# -------------------------------
# CONFLICTS
# -------------------------------
class DuplicateEntityError(LocationError):
    """Raised when a write would break a uniqueness scope."""

    def __init__(self, entity: str, description: str, conflicting_id: Optional[object] = None):
        super().__init__(f"A {entity.lower()} with {description} does already exist.")
        self.entity = entity
        self.description = description
        self.conflicting_id = conflicting_id
