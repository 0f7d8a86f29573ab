"""
Sort expression parsing.

A sort expression looks like ``name,asc;alpha2,desc;alpha3``: segments are
separated by ``;``, field and direction by ``,``, the direction defaults to
ascending and is case-insensitive. Fields are resolved against a fixed
per-entity allow-list.
"""
from typing import Callable, Dict, List, Optional, Tuple, TypeVar

from src.core.exceptions import InvalidSortDirectionError, UnknownSortFieldError

ASC = "asc"
DESC = "desc"

T = TypeVar("T")


def field_resolver(entity: str, fields: Dict[str, T]) -> Callable[[str], T]:
    """
    Build a resolver for ``fields`` keyed by snake_case name.
    Lookups ignore case and also accept the name without underscores
    (``countryId`` and ``country_id`` both resolve).
    """
    lookup: Dict[str, T] = {}
    for name, handle in fields.items():
        lookup[name.lower()] = handle
        lookup[name.lower().replace("_", "")] = handle

    def resolve(token: str) -> T:
        try:
            return lookup[token.lower()]
        except KeyError:
            raise UnknownSortFieldError(entity, token) from None

    return resolve


def parse_direction(token: str) -> str:
    direction = token.strip().lower()
    if direction not in (ASC, DESC):
        raise InvalidSortDirectionError(token.strip())
    return direction


def parse_sort(sort: Optional[str], resolve: Callable[[str], T]) -> List[Tuple[T, str]]:
    """
    Parse ``sort`` into ordered (field, direction) pairs.

    Blank or missing input gives an empty list. Repeated fields are all kept
    in order, as composite SQL ordering would apply them.
    """
    if not sort or not sort.strip():
        return []

    ordering = []
    for segment in sort.split(";"):
        if not segment.strip():
            continue

        parts = segment.split(",")
        field = resolve(parts[0].strip())
        direction = parse_direction(parts[1]) if len(parts) > 1 else ASC
        ordering.append((field, direction))

    return ordering


def order_by_clauses(ordering: List[Tuple[object, str]]) -> list:
    """Turn parsed pairs of SQLAlchemy columns into ORDER BY clauses."""
    return [column.desc() if direction == DESC else column.asc() for column, direction in ordering]
