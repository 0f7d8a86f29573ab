"""
Cross-entity rules of the location hierarchy.

Country -> State (optional) -> City -> PostCode -> Street -> Address.
Deletes cascade down this chain at the storage level (``ON DELETE CASCADE``
on every parent reference), so removing a country also removes its states
and cities, and removing a state removes the cities placed in it.
"""
from src.core.exceptions import InvalidHierarchyError


def validate_city_state(country, state) -> None:
    """
    A city's optional state must belong to the city's country.
    Raises InvalidHierarchyError otherwise.
    """
    if state is None:
        return

    if state.country_id != country.id:
        raise InvalidHierarchyError(state_id=state.id, country_id=country.id)


def validate_state_move(state, country, cities) -> None:
    """
    A state may only move to ``country`` when none of its cities would be
    left pointing at another country.
    """
    if state.country_id == country.id:
        return

    for city in cities:
        if city.country_id != country.id:
            raise InvalidHierarchyError(state_id=state.id, country_id=city.country_id)
