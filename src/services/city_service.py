from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from src.core.exceptions import NotFoundError, ParentNotFoundError
from src.core.hierarchy import validate_city_state
from src.core.integrity import ensure_unique, write_transaction
from src.models.locations import Country, State, City, PostCode
from src.schemas.location import CityCreate, CityUpdate
from src.services.listing import list_rows

logger = logging.getLogger(__name__)


def _describe(name, country_id, state_id) -> str:
    if state_id is None:
        return f"the name ({name}) in country ({country_id}) without state"
    return f"the name ({name}) in country ({country_id}) and state ({state_id})"


def _find_country(db: Session, country_id: UUID) -> Country:
    country = db.query(Country).filter(Country.id == country_id).first()
    if not country:
        raise ParentNotFoundError("Country", country_id)
    return country


def _find_state(db: Session, state_id: Optional[UUID]) -> Optional[State]:
    if state_id is None:
        return None
    state = db.query(State).filter(State.id == state_id).first()
    if not state:
        raise ParentNotFoundError("State", state_id)
    return state


class CityService:

    @staticmethod
    def count(db: Session) -> int:
        return db.query(City).count()

    @staticmethod
    def list(
        db: Session,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[City]:
        return list_rows(db.query(City), City, page, size, sort)

    @staticmethod
    def get(db: Session, city_id: UUID) -> City:
        city = db.query(City).filter(City.id == city_id).first()
        if not city:
            raise NotFoundError("City", city_id)
        return city

    @staticmethod
    def count_post_codes(db: Session, city_id: UUID) -> int:
        CityService.get(db, city_id)
        return db.query(PostCode).filter(PostCode.city_id == city_id).count()

    @staticmethod
    def list_post_codes(
        db: Session,
        city_id: UUID,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[PostCode]:
        CityService.get(db, city_id)
        query = db.query(PostCode).filter(PostCode.city_id == city_id)
        return list_rows(query, PostCode, page, size, sort)

    @staticmethod
    def create(db: Session, data: CityCreate) -> City:
        description = _describe(data.name, data.country_id, data.state_id)

        with write_transaction(db, "City", description):
            # 1. Parents
            country = _find_country(db, data.country_id)
            state = _find_state(db, data.state_id)

            # 2. State must sit in the same country
            validate_city_state(country, state)

            # 3. Uniqueness within (country, state)
            ensure_unique(
                db, City,
                {"country_id": country.id, "state_id": data.state_id, "name": data.name},
                description,
            )

            city = City(name=data.name, country_id=country.id, state_id=data.state_id)
            db.add(city)

        db.refresh(city)
        logger.info(f"City created: {city.name} (ID: {city.id})")
        return city

    @staticmethod
    def update(db: Session, city_id: UUID, data: CityUpdate) -> City:
        """
        Update a city. An explicit ``state_id`` of None removes the state;
        the hierarchy rule is checked against the resulting country and state.
        """
        update_data = data.model_dump(exclude_unset=True)

        with write_transaction(db, "City"):
            city = (
                db.query(City)
                .filter(City.id == city_id)
                .with_for_update()
                .first()
            )
            if not city:
                raise NotFoundError("City", city_id)

            name = update_data.get("name") or city.name
            country_id = update_data.get("country_id") or city.country_id
            state_id = update_data["state_id"] if "state_id" in update_data else city.state_id

            country = _find_country(db, country_id)
            state = _find_state(db, state_id)
            validate_city_state(country, state)

            ensure_unique(
                db, City,
                {"country_id": country_id, "state_id": state_id, "name": name},
                _describe(name, country_id, state_id),
                exclude_id=city.id,
            )

            city.name = name
            city.country_id = country_id
            city.state_id = state_id

        db.refresh(city)
        logger.info(f"City updated: {city_id}")
        return city

    @staticmethod
    def delete(db: Session, city_id: UUID) -> None:
        with write_transaction(db, "City"):
            city = (
                db.query(City)
                .filter(City.id == city_id)
                .with_for_update()
                .first()
            )
            if not city:
                raise NotFoundError("City", city_id)

            db.delete(city)

        logger.info(f"City deleted: {city_id}")
