"""Tests for write_transaction rollback behaviour."""

import pytest
from sqlalchemy.exc import OperationalError

from src.core.exceptions import ParentNotFoundError
from src.core.integrity import write_transaction
from src.models.locations import Country
from src.schemas.location import CountryCreate
from src.services.country_service import CountryService


def _country_names(db) -> list:
    return sorted(country.name for country in CountryService.list(db))


class TestWriteTransaction:

    def test_commits_on_success(self, db) -> None:
        with write_transaction(db, "Country"):
            db.add(Country(alpha2="XX", alpha3="XXX", name="Kept", localized_name="Kept"))

        assert _country_names(db) == ["Kept"]

    def test_store_error_is_rolled_back(self, db) -> None:
        with pytest.raises(OperationalError):
            with write_transaction(db, "Country"):
                db.add(Country(alpha2="XX", alpha3="XXX", name="Aborted", localized_name="Aborted"))
                db.flush()
                raise OperationalError("UPDATE countries", {}, Exception("lock timeout"))

        CountryService.create(db, CountryCreate(alpha2="YY", alpha3="YYY", name="Other", localized_name="Other"))

        assert _country_names(db) == ["Other"]

    def test_unexpected_error_is_rolled_back(self, db) -> None:
        with pytest.raises(RuntimeError):
            with write_transaction(db, "Country"):
                db.add(Country(alpha2="XX", alpha3="XXX", name="Aborted", localized_name="Aborted"))
                raise RuntimeError("cancelled")

        db.commit()

        assert _country_names(db) == []

    def test_location_error_is_rolled_back(self, db) -> None:
        with pytest.raises(ParentNotFoundError):
            with write_transaction(db, "Country"):
                db.add(Country(alpha2="XX", alpha3="XXX", name="Aborted", localized_name="Aborted"))
                raise ParentNotFoundError("Country", "missing")

        db.commit()

        assert _country_names(db) == []
