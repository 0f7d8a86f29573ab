from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from src.core.exceptions import AmbiguousOrMissingKeyError, NotFoundError
from src.core.integrity import ensure_unique, write_transaction
from src.models.locations import Country, State, City
from src.schemas.location import CountryCreate, CountryUpdate
from src.services.listing import list_rows

logger = logging.getLogger(__name__)


class CountryService:

    # ===== READS =====

    @staticmethod
    def count(db: Session) -> int:
        return db.query(Country).count()

    @staticmethod
    def list(
        db: Session,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Country]:
        return list_rows(db.query(Country), Country, page, size, sort)

    @staticmethod
    def get(
        db: Session,
        country_id: Optional[UUID] = None,
        alpha2: Optional[str] = None,
        alpha3: Optional[str] = None,
    ) -> Country:
        """
        Find a country by exactly one of id, alpha2 or alpha3.
        """
        keys = {"id": country_id, "alpha2": alpha2, "alpha3": alpha3}
        supplied = {key: value for key, value in keys.items() if value is not None}
        if len(supplied) != 1:
            raise AmbiguousOrMissingKeyError("Country", keys.keys(), supplied.keys())

        key, value = next(iter(supplied.items()))
        country = db.query(Country).filter(getattr(Country, key) == value).first()
        if not country:
            raise NotFoundError("Country", value, key=key)
        return country

    # ===== NAVIGATION =====

    @staticmethod
    def count_states(db: Session, country_id: UUID) -> int:
        CountryService.get(db, country_id)
        return db.query(State).filter(State.country_id == country_id).count()

    @staticmethod
    def list_states(
        db: Session,
        country_id: UUID,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[State]:
        CountryService.get(db, country_id)
        query = db.query(State).filter(State.country_id == country_id)
        return list_rows(query, State, page, size, sort)

    @staticmethod
    def count_cities(db: Session, country_id: UUID) -> int:
        CountryService.get(db, country_id)
        return db.query(City).filter(City.country_id == country_id).count()

    @staticmethod
    def list_cities(
        db: Session,
        country_id: UUID,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[City]:
        CountryService.get(db, country_id)
        query = db.query(City).filter(City.country_id == country_id)
        return list_rows(query, City, page, size, sort)

    # ===== WRITES =====

    @staticmethod
    def create(db: Session, data: CountryCreate) -> Country:
        description = f"the codes ({data.alpha2}, {data.alpha3}) or name ({data.name})"

        with write_transaction(db, "Country", description):
            ensure_unique(db, Country, {"alpha2": data.alpha2}, f"the country code ({data.alpha2})")
            ensure_unique(db, Country, {"alpha3": data.alpha3}, f"the country code ({data.alpha3})")
            ensure_unique(db, Country, {"name": data.name}, f"the name ({data.name})")

            country = Country(**data.model_dump())
            db.add(country)

        db.refresh(country)
        logger.info(f"Country created: {country.alpha2} - {country.name} (ID: {country.id})")
        return country

    @staticmethod
    def update(db: Session, country_id: UUID, data: CountryUpdate) -> Country:
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        description = ", ".join(f"{field} ({value})" for field, value in update_data.items())

        with write_transaction(db, "Country", description):
            country = (
                db.query(Country)
                .filter(Country.id == country_id)
                .with_for_update()
                .first()
            )
            if not country:
                raise NotFoundError("Country", country_id)

            for field in ("alpha2", "alpha3", "name"):
                if field in update_data:
                    ensure_unique(
                        db, Country, {field: update_data[field]},
                        f"the {field} ({update_data[field]})",
                        exclude_id=country.id,
                    )

            for field, value in update_data.items():
                setattr(country, field, value)

        db.refresh(country)
        logger.info(f"Country updated: {country_id}")
        return country

    @staticmethod
    def delete(db: Session, country_id: UUID) -> None:
        """
        Delete a country together with its states, cities and everything below them.
        """
        with write_transaction(db, "Country"):
            country = (
                db.query(Country)
                .filter(Country.id == country_id)
                .with_for_update()
                .first()
            )
            if not country:
                raise NotFoundError("Country", country_id)

            db.delete(country)

        logger.info(f"Country deleted: {country_id}")
