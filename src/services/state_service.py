from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from src.core.exceptions import NotFoundError, ParentNotFoundError
from src.core.hierarchy import validate_state_move
from src.core.integrity import ensure_unique, write_transaction
from src.models.locations import Country, State, City
from src.schemas.location import StateCreate, StateUpdate
from src.services.listing import list_rows

logger = logging.getLogger(__name__)


class StateService:

    @staticmethod
    def count(db: Session) -> int:
        return db.query(State).count()

    @staticmethod
    def list(
        db: Session,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[State]:
        return list_rows(db.query(State), State, page, size, sort)

    @staticmethod
    def get(db: Session, state_id: UUID) -> State:
        state = db.query(State).filter(State.id == state_id).first()
        if not state:
            raise NotFoundError("State", state_id)
        return state

    @staticmethod
    def count_cities(db: Session, state_id: UUID) -> int:
        StateService.get(db, state_id)
        return db.query(City).filter(City.state_id == state_id).count()

    @staticmethod
    def list_cities(
        db: Session,
        state_id: UUID,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[City]:
        StateService.get(db, state_id)
        query = db.query(City).filter(City.state_id == state_id)
        return list_rows(query, City, page, size, sort)

    @staticmethod
    def create(db: Session, data: StateCreate) -> State:
        description = f"the name ({data.name}) in country ({data.country_id})"

        with write_transaction(db, "State", description):
            country = db.query(Country).filter(Country.id == data.country_id).first()
            if not country:
                raise ParentNotFoundError("Country", data.country_id)

            ensure_unique(db, State, {"country_id": country.id, "name": data.name}, description)

            state = State(name=data.name, country_id=country.id)
            db.add(state)

        db.refresh(state)
        logger.info(f"State created: {state.name} (ID: {state.id})")
        return state

    @staticmethod
    def update(db: Session, state_id: UUID, data: StateUpdate) -> State:
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        with write_transaction(db, "State"):
            state = (
                db.query(State)
                .filter(State.id == state_id)
                .with_for_update()
                .first()
            )
            if not state:
                raise NotFoundError("State", state_id)

            country_id = update_data.get("country_id", state.country_id)
            name = update_data.get("name", state.name)

            if "country_id" in update_data:
                country = db.query(Country).filter(Country.id == country_id).first()
                if not country:
                    raise ParentNotFoundError("Country", country_id)

                cities = db.query(City).filter(City.state_id == state.id).all()
                validate_state_move(state, country, cities)

            ensure_unique(
                db, State, {"country_id": country_id, "name": name},
                f"the name ({name}) in country ({country_id})",
                exclude_id=state.id,
            )

            state.name = name
            state.country_id = country_id

        db.refresh(state)
        logger.info(f"State updated: {state_id}")
        return state

    @staticmethod
    def delete(db: Session, state_id: UUID) -> None:
        """
        Delete a state and the cities placed in it, with their post codes, streets and addresses.
        """
        with write_transaction(db, "State"):
            state = (
                db.query(State)
                .filter(State.id == state_id)
                .with_for_update()
                .first()
            )
            if not state:
                raise NotFoundError("State", state_id)

            db.delete(state)

        logger.info(f"State deleted: {state_id}")
