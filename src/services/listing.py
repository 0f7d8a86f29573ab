from typing import Optional

from sqlalchemy.orm import Query

from src.core.pagination import apply_listing, page_window
from src.core.sorting import field_resolver, parse_sort
from src.models.locations import Country, State, City, PostCode, Street, Address


# -------------------------------
# SORTABLE FIELDS PER ENTITY
# -------------------------------
SORT_FIELDS = {
    Country: field_resolver("Country", {
        "id": Country.id,
        "alpha2": Country.alpha2,
        "alpha3": Country.alpha3,
        "name": Country.name,
        "localized_name": Country.localized_name,
    }),
    State: field_resolver("State", {
        "id": State.id,
        "country_id": State.country_id,
        "name": State.name,
    }),
    City: field_resolver("City", {
        "id": City.id,
        "country_id": City.country_id,
        "state_id": City.state_id,
        "name": City.name,
    }),
    PostCode: field_resolver("PostCode", {
        "id": PostCode.id,
        "city_id": PostCode.city_id,
        "code": PostCode.code,
    }),
    Street: field_resolver("Street", {
        "id": Street.id,
        "post_code_id": Street.post_code_id,
        "name": Street.name,
    }),
    Address: field_resolver("Address", {
        "id": Address.id,
        "street_id": Address.street_id,
        "house_number": Address.house_number,
        "extra": Address.extra,
    }),
}


def list_rows(
    query: Query,
    model,
    page: Optional[int] = None,
    size: Optional[int] = None,
    sort: Optional[str] = None,
) -> list:
    """
    Materialize one page of ``query``.
    Sort and window are validated before anything is sent to the store.
    """
    ordering = parse_sort(sort, SORT_FIELDS[model])
    window = page_window(page, size)
    return apply_listing(query, model.id, ordering, window).all()
