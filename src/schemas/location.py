# src/schemas/location.py
from typing import Dict, Generic, List, Optional, TypeVar
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict


# -------------------------------
# COUNTRY SCHEMAS
# -------------------------------
class CountryBase(BaseModel):
    alpha2: str = Field(..., min_length=2, max_length=2)
    alpha3: str = Field(..., min_length=3, max_length=3)
    name: str = Field(..., min_length=1, max_length=255)
    localized_name: str = Field(..., min_length=1, max_length=255)


class CountryCreate(CountryBase):
    pass


class CountryUpdate(BaseModel):
    alpha2: Optional[str] = Field(None, min_length=2, max_length=2)
    alpha3: Optional[str] = Field(None, min_length=3, max_length=3)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    localized_name: Optional[str] = Field(None, min_length=1, max_length=255)


class CountryOut(CountryBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


# -------------------------------
# STATE SCHEMAS
# -------------------------------
class StateBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    country_id: UUID


class StateCreate(StateBase):
    pass


class StateUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    country_id: Optional[UUID] = None


class StateOut(StateBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


# -------------------------------
# CITY SCHEMAS
# -------------------------------
class CityBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    country_id: UUID
    state_id: Optional[UUID] = None


class CityCreate(CityBase):
    pass


class CityUpdate(BaseModel):
    """Sending ``state_id: null`` removes the city from its state."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    country_id: Optional[UUID] = None
    state_id: Optional[UUID] = None


class CityOut(CityBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


# -------------------------------
# POST CODE SCHEMAS
# -------------------------------
class PostCodeBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=255)
    city_id: UUID


class PostCodeCreate(PostCodeBase):
    pass


class PostCodeUpdate(BaseModel):
    code: Optional[str] = Field(None, min_length=1, max_length=255)
    city_id: Optional[UUID] = None


class PostCodeOut(PostCodeBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


# -------------------------------
# STREET SCHEMAS
# -------------------------------
class StreetBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    post_code_id: UUID


class StreetCreate(StreetBase):
    pass


class StreetUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    post_code_id: Optional[UUID] = None


class StreetOut(StreetBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


# -------------------------------
# ADDRESS SCHEMAS
# -------------------------------
class AddressBase(BaseModel):
    house_number: str = Field(..., min_length=1, max_length=255)
    extra: Optional[str] = Field(None, max_length=255)
    street_id: UUID


class AddressCreate(AddressBase):
    pass


class AddressUpdate(BaseModel):
    """Sending ``extra: null`` clears the extra."""
    house_number: Optional[str] = Field(None, min_length=1, max_length=255)
    extra: Optional[str] = Field(None, max_length=255)
    street_id: Optional[UUID] = None


class AddressOut(AddressBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


# -------------------------------
# PAGINATION
# -------------------------------
T = TypeVar("T")


class PageOut(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    size: Optional[int] = None
    total_pages: int
    links: Dict[str, str] = {}
