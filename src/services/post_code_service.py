from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from src.core.exceptions import NotFoundError, ParentNotFoundError
from src.core.integrity import ensure_unique, write_transaction
from src.models.locations import City, PostCode, Street
from src.schemas.location import PostCodeCreate, PostCodeUpdate
from src.services.listing import list_rows

logger = logging.getLogger(__name__)


class PostCodeService:

    @staticmethod
    def count(db: Session) -> int:
        return db.query(PostCode).count()

    @staticmethod
    def list(
        db: Session,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[PostCode]:
        return list_rows(db.query(PostCode), PostCode, page, size, sort)

    @staticmethod
    def get(db: Session, post_code_id: UUID) -> PostCode:
        post_code = db.query(PostCode).filter(PostCode.id == post_code_id).first()
        if not post_code:
            raise NotFoundError("PostCode", post_code_id)
        return post_code

    @staticmethod
    def count_streets(db: Session, post_code_id: UUID) -> int:
        PostCodeService.get(db, post_code_id)
        return db.query(Street).filter(Street.post_code_id == post_code_id).count()

    @staticmethod
    def list_streets(
        db: Session,
        post_code_id: UUID,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Street]:
        PostCodeService.get(db, post_code_id)
        query = db.query(Street).filter(Street.post_code_id == post_code_id)
        return list_rows(query, Street, page, size, sort)

    @staticmethod
    def create(db: Session, data: PostCodeCreate) -> PostCode:
        description = f"the code ({data.code}) in city ({data.city_id})"

        with write_transaction(db, "PostCode", description):
            city = db.query(City).filter(City.id == data.city_id).first()
            if not city:
                raise ParentNotFoundError("City", data.city_id)

            ensure_unique(db, PostCode, {"city_id": city.id, "code": data.code}, description)

            post_code = PostCode(code=data.code, city_id=city.id)
            db.add(post_code)

        db.refresh(post_code)
        logger.info(f"PostCode created: {post_code.code} (ID: {post_code.id})")
        return post_code

    @staticmethod
    def update(db: Session, post_code_id: UUID, data: PostCodeUpdate) -> PostCode:
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        with write_transaction(db, "PostCode"):
            post_code = (
                db.query(PostCode)
                .filter(PostCode.id == post_code_id)
                .with_for_update()
                .first()
            )
            if not post_code:
                raise NotFoundError("PostCode", post_code_id)

            city_id = update_data.get("city_id", post_code.city_id)
            code = update_data.get("code", post_code.code)

            if "city_id" in update_data:
                city = db.query(City).filter(City.id == city_id).first()
                if not city:
                    raise ParentNotFoundError("City", city_id)

            ensure_unique(
                db, PostCode, {"city_id": city_id, "code": code},
                f"the code ({code}) in city ({city_id})",
                exclude_id=post_code.id,
            )

            post_code.code = code
            post_code.city_id = city_id

        db.refresh(post_code)
        logger.info(f"PostCode updated: {post_code_id}")
        return post_code

    @staticmethod
    def delete(db: Session, post_code_id: UUID) -> None:
        with write_transaction(db, "PostCode"):
            post_code = (
                db.query(PostCode)
                .filter(PostCode.id == post_code_id)
                .with_for_update()
                .first()
            )
            if not post_code:
                raise NotFoundError("PostCode", post_code_id)

            db.delete(post_code)

        logger.info(f"PostCode deleted: {post_code_id}")
