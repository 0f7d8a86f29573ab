from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from src.core.exceptions import NotFoundError, ParentNotFoundError
from src.core.integrity import ensure_unique, write_transaction
from src.models.locations import PostCode, Street, Address
from src.schemas.location import StreetCreate, StreetUpdate
from src.services.listing import list_rows

logger = logging.getLogger(__name__)


class StreetService:

    @staticmethod
    def count(db: Session) -> int:
        return db.query(Street).count()

    @staticmethod
    def list(
        db: Session,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Street]:
        return list_rows(db.query(Street), Street, page, size, sort)

    @staticmethod
    def get(db: Session, street_id: UUID) -> Street:
        street = db.query(Street).filter(Street.id == street_id).first()
        if not street:
            raise NotFoundError("Street", street_id)
        return street

    @staticmethod
    def count_addresses(db: Session, street_id: UUID) -> int:
        StreetService.get(db, street_id)
        return db.query(Address).filter(Address.street_id == street_id).count()

    @staticmethod
    def list_addresses(
        db: Session,
        street_id: UUID,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Address]:
        StreetService.get(db, street_id)
        query = db.query(Address).filter(Address.street_id == street_id)
        return list_rows(query, Address, page, size, sort)

    @staticmethod
    def create(db: Session, data: StreetCreate) -> Street:
        description = f"the name ({data.name}) in post code ({data.post_code_id})"

        with write_transaction(db, "Street", description):
            post_code = db.query(PostCode).filter(PostCode.id == data.post_code_id).first()
            if not post_code:
                raise ParentNotFoundError("PostCode", data.post_code_id)

            ensure_unique(db, Street, {"post_code_id": post_code.id, "name": data.name}, description)

            street = Street(name=data.name, post_code_id=post_code.id)
            db.add(street)

        db.refresh(street)
        logger.info(f"Street created: {street.name} (ID: {street.id})")
        return street

    @staticmethod
    def update(db: Session, street_id: UUID, data: StreetUpdate) -> Street:
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        with write_transaction(db, "Street"):
            street = (
                db.query(Street)
                .filter(Street.id == street_id)
                .with_for_update()
                .first()
            )
            if not street:
                raise NotFoundError("Street", street_id)

            post_code_id = update_data.get("post_code_id", street.post_code_id)
            name = update_data.get("name", street.name)

            if "post_code_id" in update_data:
                post_code = db.query(PostCode).filter(PostCode.id == post_code_id).first()
                if not post_code:
                    raise ParentNotFoundError("PostCode", post_code_id)

            ensure_unique(
                db, Street, {"post_code_id": post_code_id, "name": name},
                f"the name ({name}) in post code ({post_code_id})",
                exclude_id=street.id,
            )

            street.name = name
            street.post_code_id = post_code_id

        db.refresh(street)
        logger.info(f"Street updated: {street_id}")
        return street

    @staticmethod
    def delete(db: Session, street_id: UUID) -> None:
        with write_transaction(db, "Street"):
            street = (
                db.query(Street)
                .filter(Street.id == street_id)
                .with_for_update()
                .first()
            )
            if not street:
                raise NotFoundError("Street", street_id)

            db.delete(street)

        logger.info(f"Street deleted: {street_id}")
