"""Tests for CountryService."""

import uuid

import pytest

from src.core.exceptions import (
    AmbiguousOrMissingKeyError,
    DuplicateEntityError,
    NotFoundError,
    UnknownSortFieldError,
)
from src.schemas.location import CountryCreate, CountryUpdate
from src.services.country_service import CountryService


def _germany() -> CountryCreate:
    return CountryCreate(alpha2="DE", alpha3="DEU", name="Germany", localized_name="Deutschland")


class TestCreate:

    def test_create(self, db) -> None:
        country = CountryService.create(db, _germany())

        assert isinstance(country.id, uuid.UUID)
        assert country.alpha2 == "DE"
        assert CountryService.count(db) == 1

    @pytest.mark.parametrize("alpha2, alpha3, name", [
        ("DE", "XXX", "Other"),
        ("XX", "DEU", "Other"),
        ("XX", "XXX", "Germany"),
    ])
    def test_each_natural_key_is_unique(self, db, alpha2, alpha3, name) -> None:
        CountryService.create(db, _germany())

        with pytest.raises(DuplicateEntityError):
            CountryService.create(
                db, CountryCreate(alpha2=alpha2, alpha3=alpha3, name=name, localized_name="Other")
            )
        assert CountryService.count(db) == 1


class TestGet:

    def test_by_each_key(self, db, seeded) -> None:
        germany_id = seeded.countries["DE"].id

        assert CountryService.get(db, germany_id).name == "Germany"
        assert CountryService.get(db, alpha2="DE").id == germany_id
        assert CountryService.get(db, alpha3="DEU").id == germany_id

    def test_unknown_key(self, db, seeded) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            CountryService.get(db, alpha3="ZZZ")

        assert exc_info.value.key == "alpha3"
        assert exc_info.value.value == "ZZZ"

    def test_unknown_id(self, db) -> None:
        with pytest.raises(NotFoundError):
            CountryService.get(db, uuid.uuid4())

    def test_no_key(self, db) -> None:
        with pytest.raises(AmbiguousOrMissingKeyError):
            CountryService.get(db)

    def test_more_than_one_key(self, db, seeded) -> None:
        with pytest.raises(AmbiguousOrMissingKeyError) as exc_info:
            CountryService.get(db, alpha2="DE", alpha3="DEU")

        assert exc_info.value.supplied == ["alpha2", "alpha3"]


class TestList:

    def test_default_order_is_by_id(self, db, seeded) -> None:
        countries = CountryService.list(db)
        assert [c.id for c in countries] == sorted(c.id for c in countries)

    def test_sort_by_name_descending(self, db, seeded) -> None:
        countries = CountryService.list(db, sort="name,desc")
        assert [c.alpha2 for c in countries] == ["GB", "DE", "FR"]

    def test_page(self, db, seeded) -> None:
        countries = CountryService.list(db, page=1, size=2, sort="alpha2")
        assert [c.alpha2 for c in countries] == ["GB"]

    def test_unknown_sort_field(self, db) -> None:
        with pytest.raises(UnknownSortFieldError):
            CountryService.list(db, sort="population")

    def test_states_of_country(self, db, seeded) -> None:
        states = CountryService.list_states(db, seeded.countries["DE"].id, sort="name")

        assert [s.name for s in states] == ["Baden-Württemberg", "Berlin"]
        assert CountryService.count_states(db, seeded.countries["GB"].id) == 0

    def test_cities_of_country(self, db, seeded) -> None:
        cities = CountryService.list_cities(db, seeded.countries["DE"].id, sort="name,desc")
        assert [c.name for c in cities] == ["Karlsruhe", "Berlin-Spandau", "Berlin"]

    def test_navigation_from_unknown_country(self, db) -> None:
        with pytest.raises(NotFoundError):
            CountryService.list_states(db, uuid.uuid4())


class TestUpdate:

    def test_update_fields(self, db, seeded) -> None:
        country = CountryService.update(
            db, seeded.countries["GB"].id, CountryUpdate(name="United Kingdom")
        )

        assert country.name == "United Kingdom"
        assert country.alpha2 == "GB"

    def test_update_to_own_values(self, db, seeded) -> None:
        country_id = seeded.countries["DE"].id
        country = CountryService.update(db, country_id, CountryUpdate(
            alpha2="DE", alpha3="DEU", name="Germany", localized_name="Deutschland",
        ))

        assert country.id == country_id

    def test_update_to_other_countrys_code(self, db, seeded) -> None:
        with pytest.raises(DuplicateEntityError):
            CountryService.update(db, seeded.countries["DE"].id, CountryUpdate(alpha2="FR"))

        assert CountryService.get(db, alpha2="DE") is not None

    def test_update_unknown(self, db) -> None:
        with pytest.raises(NotFoundError):
            CountryService.update(db, uuid.uuid4(), CountryUpdate(name="Nowhere"))


class TestDelete:

    def test_delete(self, db, seeded) -> None:
        country_id = seeded.countries["FR"].id
        CountryService.delete(db, country_id)

        with pytest.raises(NotFoundError):
            CountryService.get(db, country_id)
        assert CountryService.count(db) == 2

    def test_delete_unknown(self, db) -> None:
        with pytest.raises(NotFoundError):
            CountryService.delete(db, uuid.uuid4())
