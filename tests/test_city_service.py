"""Tests for CityService."""

import uuid

import pytest

from src.core.exceptions import (
    DuplicateEntityError,
    InvalidHierarchyError,
    NotFoundError,
    ParentNotFoundError,
)
from src.schemas.location import CityCreate, CityUpdate, CountryCreate, StateCreate
from src.services.city_service import CityService
from src.services.country_service import CountryService
from src.services.state_service import StateService


class TestCreate:

    def test_create_with_state(self, db, seeded) -> None:
        city = CityService.create(db, CityCreate(
            name="Stuttgart",
            country_id=seeded.countries["DE"].id,
            state_id=seeded.states["Baden-Württemberg"].id,
        ))

        assert city.state_id == seeded.states["Baden-Württemberg"].id

    def test_create_without_state(self, db, seeded) -> None:
        city = CityService.create(db, CityCreate(name="London", country_id=seeded.countries["GB"].id))
        assert city.state_id is None

    def test_state_of_other_country(self, db, seeded) -> None:
        with pytest.raises(InvalidHierarchyError):
            CityService.create(db, CityCreate(
                name="Lyon",
                country_id=seeded.countries["FR"].id,
                state_id=seeded.states["Berlin"].id,
            ))

        assert CityService.count(db) == 5

    def test_unknown_country(self, db) -> None:
        with pytest.raises(ParentNotFoundError) as exc_info:
            CityService.create(db, CityCreate(name="Nowhere", country_id=uuid.uuid4()))

        assert exc_info.value.parent_type == "Country"

    def test_unknown_state(self, db, seeded) -> None:
        with pytest.raises(ParentNotFoundError) as exc_info:
            CityService.create(db, CityCreate(
                name="Nowhere", country_id=seeded.countries["DE"].id, state_id=uuid.uuid4()
            ))

        assert exc_info.value.parent_type == "State"

    def test_duplicate_within_state(self, db, seeded) -> None:
        with pytest.raises(DuplicateEntityError):
            CityService.create(db, CityCreate(
                name="Berlin",
                country_id=seeded.countries["DE"].id,
                state_id=seeded.states["Berlin"].id,
            ))

    def test_duplicate_without_state(self, db, seeded) -> None:
        with pytest.raises(DuplicateEntityError):
            CityService.create(db, CityCreate(name="Birmingham", country_id=seeded.countries["GB"].id))

    def test_same_name_in_other_state(self, db, seeded) -> None:
        city = CityService.create(db, CityCreate(
            name="Berlin",
            country_id=seeded.countries["DE"].id,
            state_id=seeded.states["Baden-Württemberg"].id,
        ))
        assert city.name == "Berlin"


class TestUpdate:

    def test_rename(self, db, seeded) -> None:
        city = CityService.update(db, seeded.cities["Berlin-Spandau"].id, CityUpdate(name="Spandau"))
        assert city.name == "Spandau"
        assert city.state_id == seeded.states["Berlin"].id

    def test_update_to_own_values(self, db, seeded) -> None:
        city = seeded.cities["Paris"]
        updated = CityService.update(db, city.id, CityUpdate(
            name="Paris", country_id=city.country_id, state_id=city.state_id,
        ))
        assert updated.name == "Paris"

    def test_remove_state(self, db, seeded) -> None:
        city = CityService.update(db, seeded.cities["Karlsruhe"].id, CityUpdate(state_id=None))
        assert city.state_id is None

    def test_remove_state_into_conflict(self, db, seeded) -> None:
        germany_id = seeded.countries["DE"].id
        CityService.create(db, CityCreate(name="Karlsruhe", country_id=germany_id))

        with pytest.raises(DuplicateEntityError):
            CityService.update(db, seeded.cities["Karlsruhe"].id, CityUpdate(state_id=None))

    def test_move_country_keeping_foreign_state(self, db, seeded) -> None:
        with pytest.raises(InvalidHierarchyError):
            CityService.update(db, seeded.cities["Paris"].id, CityUpdate(country_id=seeded.countries["DE"].id))

    def test_move_country_and_state(self, db, seeded) -> None:
        city = CityService.update(db, seeded.cities["Paris"].id, CityUpdate(
            country_id=seeded.countries["DE"].id,
            state_id=seeded.states["Berlin"].id,
        ))

        assert city.country_id == seeded.countries["DE"].id

    def test_set_state_of_other_country(self, db, seeded) -> None:
        with pytest.raises(InvalidHierarchyError):
            CityService.update(db, seeded.cities["Birmingham"].id, CityUpdate(state_id=seeded.states["Berlin"].id))

    def test_unknown_city(self, db) -> None:
        with pytest.raises(NotFoundError):
            CityService.update(db, uuid.uuid4(), CityUpdate(name="Nowhere"))


class TestPagination:

    def test_pages_partition_rows_with_equal_sort_keys(self, db) -> None:
        country = CountryService.create(db, CountryCreate(
            alpha2="US", alpha3="USA", name="United States", localized_name="Vereinigte Staaten",
        ))
        for index in range(7):
            state = StateService.create(db, StateCreate(name=f"State {index}", country_id=country.id))
            CityService.create(db, CityCreate(name="Springfield", country_id=country.id, state_id=state.id))

        everything = [c.id for c in CityService.list(db, sort="name")]
        pages = []
        for page in range(3):
            pages.extend(c.id for c in CityService.list(db, page=page, size=3, sort="name"))

        assert pages == everything
        assert len(set(pages)) == 7

    def test_repeated_calls_return_same_page(self, db, seeded) -> None:
        first = [c.id for c in CityService.list(db, page=1, size=2, sort="country_id")]
        second = [c.id for c in CityService.list(db, page=1, size=2, sort="country_id")]
        assert first == second

    def test_post_codes_of_city(self, db, seeded) -> None:
        post_codes = CityService.list_post_codes(db, seeded.cities["Berlin"].id, sort="code,desc")
        assert [p.code for p in post_codes] == ["10557", "10117"]
