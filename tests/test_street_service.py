"""Tests for StreetService."""

import uuid

import pytest

from src.core.exceptions import DuplicateEntityError, NotFoundError, ParentNotFoundError
from src.schemas.location import StreetCreate, StreetUpdate
from src.services.street_service import StreetService


def test_create(db, seeded) -> None:
    street = StreetService.create(db, StreetCreate(name="Unter den Linden", post_code_id=seeded.post_codes["10117"].id))
    assert StreetService.get(db, street.id).name == "Unter den Linden"


def test_same_name_same_post_code(db, seeded) -> None:
    with pytest.raises(DuplicateEntityError):
        StreetService.create(db, StreetCreate(name="Platz der Republik", post_code_id=seeded.post_codes["10557"].id))


def test_same_name_other_post_code(db, seeded) -> None:
    street = StreetService.create(db, StreetCreate(name="Platz der Republik", post_code_id=seeded.post_codes["10117"].id))
    assert street.post_code_id == seeded.post_codes["10117"].id


def test_unknown_post_code(db) -> None:
    with pytest.raises(ParentNotFoundError) as exc_info:
        StreetService.create(db, StreetCreate(name="Nowhere", post_code_id=uuid.uuid4()))

    assert exc_info.value.parent_type == "PostCode"


def test_update_to_own_values(db, seeded) -> None:
    street = seeded.streets["Coventry Rd"]
    updated = StreetService.update(db, street.id, StreetUpdate(name="Coventry Rd", post_code_id=street.post_code_id))
    assert updated.name == "Coventry Rd"


def test_move_into_conflict(db, seeded) -> None:
    StreetService.create(db, StreetCreate(name="Breite Str.", post_code_id=seeded.post_codes["10557"].id))

    with pytest.raises(DuplicateEntityError):
        StreetService.update(db, seeded.streets["Breite Str."].id, StreetUpdate(post_code_id=seeded.post_codes["10557"].id))


def test_addresses_of_street(db, seeded) -> None:
    addresses = StreetService.list_addresses(db, seeded.streets["Platz der Republik"].id, sort="house_number,desc")
    assert [a.house_number for a in addresses] == ["2a", "1"]


def test_delete_unknown(db) -> None:
    with pytest.raises(NotFoundError):
        StreetService.delete(db, uuid.uuid4())
