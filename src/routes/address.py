from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
from src.core.config import settings
from src.core.database import get_db
from src.core.pagination import page_links, total_pages
from src.schemas.location import (
    CountryCreate, CountryUpdate, CountryOut,
    StateCreate, StateUpdate, StateOut,
    CityCreate, CityUpdate, CityOut,
    PostCodeCreate, PostCodeUpdate, PostCodeOut,
    StreetCreate, StreetUpdate, StreetOut,
    AddressCreate, AddressUpdate, AddressOut,
    PageOut,
)
from src.services.address_service import AddressService
from src.services.city_service import CityService
from src.services.country_service import CountryService
from src.services.post_code_service import PostCodeService
from src.services.state_service import StateService
from src.services.street_service import StreetService

address_router = APIRouter()


class ListParams:
    """Raw paging and sort parameters, passed through to the services."""

    def __init__(
        self,
        page: Optional[int] = Query(None, ge=0),
        size: Optional[int] = Query(
            None,
            ge=1,
            le=settings.MAX_PAGE_SIZE,
            description=f"Page size, at most {settings.MAX_PAGE_SIZE}; larger values are rejected with 422. Omit for all rows.",
        ),
        sort: Optional[str] = Query(None, description="field[,asc|desc](;field[,asc|desc])*"),
    ):
        self.page = page
        self.size = size
        self.sort = sort


def to_page(request: Request, params: ListParams, schema, items, total: int) -> PageOut:
    pages = total_pages(total, params.size)
    return PageOut[schema](
        items=[schema.model_validate(item) for item in items],
        total=total,
        page=params.page or 0,
        size=params.size,
        total_pages=pages,
        links=page_links(request.url.path, params.page, params.size, pages, params.sort),
    )


# -------------------------------
# COUNTRIES
# -------------------------------
@address_router.get("/countries", response_model=PageOut[CountryOut], tags=["Countries"])
def list_countries(request: Request, params: ListParams = Depends(), db: Session = Depends(get_db)):
    items = CountryService.list(db, params.page, params.size, params.sort)
    return to_page(request, params, CountryOut, items, CountryService.count(db))


@address_router.get("/countries/lookup", response_model=CountryOut, tags=["Countries"])
def lookup_country(
    alpha2: Optional[str] = None,
    alpha3: Optional[str] = None,
    db: Session = Depends(get_db)
):
    return CountryService.get(db, alpha2=alpha2, alpha3=alpha3)


@address_router.get("/countries/{country_id}", response_model=CountryOut, tags=["Countries"])
def get_country(country_id: UUID, db: Session = Depends(get_db)):
    return CountryService.get(db, country_id)


@address_router.get("/countries/{country_id}/states", response_model=PageOut[StateOut], tags=["Countries"])
def list_country_states(
    country_id: UUID,
    request: Request,
    params: ListParams = Depends(),
    db: Session = Depends(get_db)
):
    items = CountryService.list_states(db, country_id, params.page, params.size, params.sort)
    return to_page(request, params, StateOut, items, CountryService.count_states(db, country_id))


@address_router.get("/countries/{country_id}/cities", response_model=PageOut[CityOut], tags=["Countries"])
def list_country_cities(
    country_id: UUID,
    request: Request,
    params: ListParams = Depends(),
    db: Session = Depends(get_db)
):
    items = CountryService.list_cities(db, country_id, params.page, params.size, params.sort)
    return to_page(request, params, CityOut, items, CountryService.count_cities(db, country_id))


@address_router.post("/countries", response_model=CountryOut, status_code=status.HTTP_201_CREATED, tags=["Countries"])
def create_country(payload: CountryCreate, db: Session = Depends(get_db)):
    return CountryService.create(db, payload)


@address_router.patch("/countries/{country_id}", response_model=CountryOut, tags=["Countries"])
def update_country(
    country_id: UUID,
    payload: CountryUpdate,
    db: Session = Depends(get_db)
):
    return CountryService.update(db, country_id, payload)


@address_router.delete("/countries/{country_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Countries"])
def delete_country(country_id: UUID, db: Session = Depends(get_db)):
    CountryService.delete(db, country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# STATES
# -------------------------------
@address_router.get("/states", response_model=PageOut[StateOut], tags=["States"])
def list_states(request: Request, params: ListParams = Depends(), db: Session = Depends(get_db)):
    items = StateService.list(db, params.page, params.size, params.sort)
    return to_page(request, params, StateOut, items, StateService.count(db))


@address_router.get("/states/{state_id}", response_model=StateOut, tags=["States"])
def get_state(state_id: UUID, db: Session = Depends(get_db)):
    return StateService.get(db, state_id)


@address_router.get("/states/{state_id}/cities", response_model=PageOut[CityOut], tags=["States"])
def list_state_cities(
    state_id: UUID,
    request: Request,
    params: ListParams = Depends(),
    db: Session = Depends(get_db)
):
    items = StateService.list_cities(db, state_id, params.page, params.size, params.sort)
    return to_page(request, params, CityOut, items, StateService.count_cities(db, state_id))


@address_router.post("/states", response_model=StateOut, status_code=status.HTTP_201_CREATED, tags=["States"])
def create_state(payload: StateCreate, db: Session = Depends(get_db)):
    return StateService.create(db, payload)


@address_router.patch("/states/{state_id}", response_model=StateOut, tags=["States"])
def update_state(
    state_id: UUID,
    payload: StateUpdate,
    db: Session = Depends(get_db)
):
    return StateService.update(db, state_id, payload)


@address_router.delete("/states/{state_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["States"])
def delete_state(state_id: UUID, db: Session = Depends(get_db)):
    StateService.delete(db, state_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# CITIES
# -------------------------------
@address_router.get("/cities", response_model=PageOut[CityOut], tags=["Cities"])
def list_cities(request: Request, params: ListParams = Depends(), db: Session = Depends(get_db)):
    items = CityService.list(db, params.page, params.size, params.sort)
    return to_page(request, params, CityOut, items, CityService.count(db))


@address_router.get("/cities/{city_id}", response_model=CityOut, tags=["Cities"])
def get_city(city_id: UUID, db: Session = Depends(get_db)):
    return CityService.get(db, city_id)


@address_router.get("/cities/{city_id}/post-codes", response_model=PageOut[PostCodeOut], tags=["Cities"])
def list_city_post_codes(
    city_id: UUID,
    request: Request,
    params: ListParams = Depends(),
    db: Session = Depends(get_db)
):
    items = CityService.list_post_codes(db, city_id, params.page, params.size, params.sort)
    return to_page(request, params, PostCodeOut, items, CityService.count_post_codes(db, city_id))


@address_router.post("/cities", response_model=CityOut, status_code=status.HTTP_201_CREATED, tags=["Cities"])
def create_city(payload: CityCreate, db: Session = Depends(get_db)):
    return CityService.create(db, payload)


@address_router.patch("/cities/{city_id}", response_model=CityOut, tags=["Cities"])
def update_city(
    city_id: UUID,
    payload: CityUpdate,
    db: Session = Depends(get_db)
):
    return CityService.update(db, city_id, payload)


@address_router.delete("/cities/{city_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Cities"])
def delete_city(city_id: UUID, db: Session = Depends(get_db)):
    CityService.delete(db, city_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# POST CODES
# -------------------------------
@address_router.get("/post-codes", response_model=PageOut[PostCodeOut], tags=["Post Codes"])
def list_post_codes(request: Request, params: ListParams = Depends(), db: Session = Depends(get_db)):
    items = PostCodeService.list(db, params.page, params.size, params.sort)
    return to_page(request, params, PostCodeOut, items, PostCodeService.count(db))


@address_router.get("/post-codes/{post_code_id}", response_model=PostCodeOut, tags=["Post Codes"])
def get_post_code(post_code_id: UUID, db: Session = Depends(get_db)):
    return PostCodeService.get(db, post_code_id)


@address_router.get("/post-codes/{post_code_id}/streets", response_model=PageOut[StreetOut], tags=["Post Codes"])
def list_post_code_streets(
    post_code_id: UUID,
    request: Request,
    params: ListParams = Depends(),
    db: Session = Depends(get_db)
):
    items = PostCodeService.list_streets(db, post_code_id, params.page, params.size, params.sort)
    return to_page(request, params, StreetOut, items, PostCodeService.count_streets(db, post_code_id))


@address_router.post("/post-codes", response_model=PostCodeOut, status_code=status.HTTP_201_CREATED, tags=["Post Codes"])
def create_post_code(payload: PostCodeCreate, db: Session = Depends(get_db)):
    return PostCodeService.create(db, payload)


@address_router.patch("/post-codes/{post_code_id}", response_model=PostCodeOut, tags=["Post Codes"])
def update_post_code(
    post_code_id: UUID,
    payload: PostCodeUpdate,
    db: Session = Depends(get_db)
):
    return PostCodeService.update(db, post_code_id, payload)


@address_router.delete("/post-codes/{post_code_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Post Codes"])
def delete_post_code(post_code_id: UUID, db: Session = Depends(get_db)):
    PostCodeService.delete(db, post_code_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# STREETS
# -------------------------------
@address_router.get("/streets", response_model=PageOut[StreetOut], tags=["Streets"])
def list_streets(request: Request, params: ListParams = Depends(), db: Session = Depends(get_db)):
    items = StreetService.list(db, params.page, params.size, params.sort)
    return to_page(request, params, StreetOut, items, StreetService.count(db))


@address_router.get("/streets/{street_id}", response_model=StreetOut, tags=["Streets"])
def get_street(street_id: UUID, db: Session = Depends(get_db)):
    return StreetService.get(db, street_id)


@address_router.get("/streets/{street_id}/addresses", response_model=PageOut[AddressOut], tags=["Streets"])
def list_street_addresses(
    street_id: UUID,
    request: Request,
    params: ListParams = Depends(),
    db: Session = Depends(get_db)
):
    items = StreetService.list_addresses(db, street_id, params.page, params.size, params.sort)
    return to_page(request, params, AddressOut, items, StreetService.count_addresses(db, street_id))


@address_router.post("/streets", response_model=StreetOut, status_code=status.HTTP_201_CREATED, tags=["Streets"])
def create_street(payload: StreetCreate, db: Session = Depends(get_db)):
    return StreetService.create(db, payload)


@address_router.patch("/streets/{street_id}", response_model=StreetOut, tags=["Streets"])
def update_street(
    street_id: UUID,
    payload: StreetUpdate,
    db: Session = Depends(get_db)
):
    return StreetService.update(db, street_id, payload)


@address_router.delete("/streets/{street_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Streets"])
def delete_street(street_id: UUID, db: Session = Depends(get_db)):
    StreetService.delete(db, street_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# ADDRESS ENDPOINTS
# -------------------------------
@address_router.get("/addresses", response_model=PageOut[AddressOut], tags=["Addresses"])
def list_addresses(request: Request, params: ListParams = Depends(), db: Session = Depends(get_db)):
    items = AddressService.list(db, params.page, params.size, params.sort)
    return to_page(request, params, AddressOut, items, AddressService.count(db))


@address_router.get("/addresses/{address_id}", response_model=AddressOut, tags=["Addresses"])
def get_address(address_id: UUID, db: Session = Depends(get_db)):
    return AddressService.get(db, address_id)


@address_router.post("/addresses", response_model=AddressOut, status_code=status.HTTP_201_CREATED, tags=["Addresses"])
def create_address(
    payload: AddressCreate,
    db: Session = Depends(get_db)
):
    return AddressService.create(db, payload)


@address_router.patch("/addresses/{address_id}", response_model=AddressOut, tags=["Addresses"])
def update_address(
    address_id: UUID,
    payload: AddressUpdate,
    db: Session = Depends(get_db)
):
    """
    Partial update. Send ``"extra": null`` to clear the extra.
    """
    return AddressService.update(db, address_id, payload)


@address_router.delete("/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Addresses"])
def delete_address(address_id: UUID, db: Session = Depends(get_db)):
    AddressService.delete(db, address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
