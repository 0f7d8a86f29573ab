"""Tests for the cross-entity hierarchy rules."""

import uuid
from types import SimpleNamespace

import pytest

from src.core.exceptions import InvalidHierarchyError
from src.core.hierarchy import validate_city_state, validate_state_move


def _country():
    return SimpleNamespace(id=uuid.uuid4())


def _state(country):
    return SimpleNamespace(id=uuid.uuid4(), country_id=country.id)


class TestValidateCityState:

    def test_missing_state_passes(self) -> None:
        assert validate_city_state(_country(), None) is None

    def test_state_of_same_country_passes(self) -> None:
        country = _country()
        assert validate_city_state(country, _state(country)) is None

    def test_state_of_other_country_fails(self) -> None:
        country, other = _country(), _country()
        state = _state(other)

        with pytest.raises(InvalidHierarchyError) as exc_info:
            validate_city_state(country, state)

        assert exc_info.value.state_id == state.id
        assert exc_info.value.country_id == country.id


class TestValidateStateMove:

    def test_same_country_passes(self) -> None:
        country = _country()
        state = _state(country)
        cities = [SimpleNamespace(country_id=country.id)]

        assert validate_state_move(state, country, cities) is None

    def test_move_without_cities_passes(self) -> None:
        state = _state(_country())
        assert validate_state_move(state, _country(), []) is None

    def test_move_with_cities_fails(self) -> None:
        old = _country()
        state = _state(old)

        with pytest.raises(InvalidHierarchyError):
            validate_state_move(state, _country(), [SimpleNamespace(country_id=old.id)])
