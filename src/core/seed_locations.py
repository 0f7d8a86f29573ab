import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from src.models.locations import Country, State, City, PostCode, Street, Address
from src.schemas.location import (
    CountryCreate, StateCreate, CityCreate,
    PostCodeCreate, StreetCreate, AddressCreate,
)
from src.services.address_service import AddressService
from src.services.city_service import CityService
from src.services.country_service import CountryService
from src.services.post_code_service import PostCodeService
from src.services.state_service import StateService
from src.services.street_service import StreetService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleData:
    """
    Sample hierarchy described by natural keys.

    countries: (alpha2, alpha3, name, localized_name)
    states: (country alpha2, name)
    cities: (country alpha2, state name or None, name)
    post_codes: (city name, code)
    streets: (post code, name)
    addresses: (street name, house number, extra)
    """
    countries: Tuple[Tuple[str, str, str, str], ...]
    states: Tuple[Tuple[str, str], ...]
    cities: Tuple[Tuple[str, Optional[str], str], ...]
    post_codes: Tuple[Tuple[str, str], ...]
    streets: Tuple[Tuple[str, str], ...]
    addresses: Tuple[Tuple[str, str, Optional[str]], ...]


@dataclass
class SeededLocations:
    countries: Dict[str, Country] = field(default_factory=dict)
    states: Dict[str, State] = field(default_factory=dict)
    cities: Dict[str, City] = field(default_factory=dict)
    post_codes: Dict[str, PostCode] = field(default_factory=dict)
    streets: Dict[str, Street] = field(default_factory=dict)
    addresses: List[Address] = field(default_factory=list)


def build_sample_data() -> SampleData:
    return SampleData(
        countries=(
            ("DE", "DEU", "Germany", "Deutschland"),
            ("FR", "FRA", "France", "Frankreich"),
            ("GB", "GBR", "United Kingdom of Great Britain and Northern Ireland", "Großbritannien und Nordirland"),
        ),
        states=(
            ("DE", "Berlin"),
            ("DE", "Baden-Württemberg"),
            ("FR", "Ile-de-France"),
        ),
        cities=(
            ("DE", "Berlin", "Berlin"),
            ("DE", "Berlin", "Berlin-Spandau"),
            ("DE", "Baden-Württemberg", "Karlsruhe"),
            ("FR", "Ile-de-France", "Paris"),
            ("GB", None, "Birmingham"),
        ),
        post_codes=(
            ("Berlin", "10557"),
            ("Berlin", "10117"),
            ("Berlin-Spandau", "13597"),
            ("Karlsruhe", "76131"),
            ("Paris", "75007"),
            ("Birmingham", "B10 0RJ"),
        ),
        streets=(
            ("10557", "Platz der Republik"),
            ("10557", "Willy-Brandt-Straße"),
            ("10117", "Friedrich-Ebert-Platz"),
            ("13597", "Breite Str."),
            ("76131", "Am Fasanengarten"),
            ("75007", "Anatole France"),
            ("B10 0RJ", "Coventry Rd"),
        ),
        addresses=(
            ("Platz der Republik", "1", None),
            ("Platz der Republik", "2a", None),
            ("Willy-Brandt-Straße", "1", None),
            ("Friedrich-Ebert-Platz", "2", None),
            ("Breite Str.", "25", None),
            ("Am Fasanengarten", "5", None),
            ("Anatole France", "5", "Av."),
            ("Coventry Rd", "109", None),
        ),
    )


def seed_locations(db: Session, data: Optional[SampleData] = None) -> SeededLocations:
    """
    Create the sample hierarchy through the services.
    Not idempotent: a second run raises DuplicateEntityError on the first country.
    """
    data = data or build_sample_data()
    seeded = SeededLocations()

    for alpha2, alpha3, name, localized_name in data.countries:
        seeded.countries[alpha2] = CountryService.create(
            db, CountryCreate(alpha2=alpha2, alpha3=alpha3, name=name, localized_name=localized_name)
        )

    for alpha2, name in data.states:
        seeded.states[name] = StateService.create(
            db, StateCreate(name=name, country_id=seeded.countries[alpha2].id)
        )

    for alpha2, state_name, name in data.cities:
        state_id = seeded.states[state_name].id if state_name else None
        seeded.cities[name] = CityService.create(
            db, CityCreate(name=name, country_id=seeded.countries[alpha2].id, state_id=state_id)
        )

    for city_name, code in data.post_codes:
        seeded.post_codes[code] = PostCodeService.create(
            db, PostCodeCreate(code=code, city_id=seeded.cities[city_name].id)
        )

    for code, name in data.streets:
        seeded.streets[name] = StreetService.create(
            db, StreetCreate(name=name, post_code_id=seeded.post_codes[code].id)
        )

    for street_name, house_number, extra in data.addresses:
        seeded.addresses.append(AddressService.create(
            db, AddressCreate(house_number=house_number, extra=extra, street_id=seeded.streets[street_name].id)
        ))

    logger.info(
        f"Seeded {len(seeded.countries)} countries, {len(seeded.states)} states, "
        f"{len(seeded.cities)} cities, {len(seeded.post_codes)} post codes, "
        f"{len(seeded.streets)} streets and {len(seeded.addresses)} addresses"
    )
    return seeded


def reset_locations(db: Session, data: Optional[SampleData] = None) -> SeededLocations:
    """
    Remove every country, and through the cascade everything below, then seed again.
    """
    for country in CountryService.list(db):
        CountryService.delete(db, country.id)

    return seed_locations(db, data)
