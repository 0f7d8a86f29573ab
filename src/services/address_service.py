from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from src.core.exceptions import NotFoundError, ParentNotFoundError
from src.core.integrity import ensure_unique, write_transaction
from src.models.locations import Street, Address
from src.schemas.location import AddressCreate, AddressUpdate
from src.services.listing import list_rows

logger = logging.getLogger(__name__)


def _describe(house_number, extra, street_id) -> str:
    if extra is None:
        return f"the house number ({house_number}) in street ({street_id})"
    return f"the house number ({house_number}, {extra}) in street ({street_id})"


# -------------------------------
# ADDRESS SERVICES
# -------------------------------
class AddressService:

    @staticmethod
    def count(db: Session) -> int:
        return db.query(Address).count()

    @staticmethod
    def list(
        db: Session,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Address]:
        return list_rows(db.query(Address), Address, page, size, sort)

    @staticmethod
    def get(db: Session, address_id: UUID) -> Address:
        address = db.query(Address).filter(Address.id == address_id).first()
        if not address:
            raise NotFoundError("Address", address_id)
        return address

    @staticmethod
    def create(
        db: Session,
        data: AddressCreate
    ) -> Address:
        description = _describe(data.house_number, data.extra, data.street_id)

        with write_transaction(db, "Address", description):
            street = db.query(Street).filter(Street.id == data.street_id).first()
            if not street:
                raise ParentNotFoundError("Street", data.street_id)

            ensure_unique(
                db, Address,
                {"street_id": street.id, "house_number": data.house_number, "extra": data.extra},
                description,
            )

            address = Address(**data.model_dump())
            db.add(address)

        db.refresh(address)
        logger.info(f"Address created: {address.house_number} (ID: {address.id})")
        return address

    @staticmethod
    def update(
        db: Session,
        address_id: UUID,
        data: AddressUpdate
    ) -> Address:
        """
        Update an address. An explicit ``extra`` of None clears it.
        """
        update_data = data.model_dump(exclude_unset=True)

        with write_transaction(db, "Address"):
            address = (
                db.query(Address)
                .filter(Address.id == address_id)
                .with_for_update()
                .first()
            )
            if not address:
                raise NotFoundError("Address", address_id)

            house_number = update_data.get("house_number") or address.house_number
            street_id = update_data.get("street_id") or address.street_id
            extra = update_data["extra"] if "extra" in update_data else address.extra

            if street_id != address.street_id:
                street = db.query(Street).filter(Street.id == street_id).first()
                if not street:
                    raise ParentNotFoundError("Street", street_id)

            ensure_unique(
                db, Address,
                {"street_id": street_id, "house_number": house_number, "extra": extra},
                _describe(house_number, extra, street_id),
                exclude_id=address.id,
            )

            address.house_number = house_number
            address.extra = extra
            address.street_id = street_id

        db.refresh(address)
        logger.info(f"Address updated: {address_id}")
        return address

    @staticmethod
    def delete(db: Session, address_id: UUID) -> None:
        with write_transaction(db, "Address"):
            address = (
                db.query(Address)
                .filter(Address.id == address_id)
                .with_for_update()
                .first()
            )
            if not address:
                raise NotFoundError("Address", address_id)

            db.delete(address)

        logger.info(f"Address deleted: {address_id}")
