import uuid

from sqlalchemy import Column, String, ForeignKey, Index, UniqueConstraint, Uuid, text
from sqlalchemy.orm import relationship
from src.core.database import Base


class Country(Base):
    __tablename__ = "countries"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    alpha2 = Column(String(2), unique=True, nullable=False)
    alpha3 = Column(String(3), unique=True, nullable=False)
    name = Column(String(255), unique=True, nullable=False)
    localized_name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"Country(id='{self.id}', alpha2='{self.alpha2}', alpha3='{self.alpha3}', name='{self.name}')"


class State(Base):
    __tablename__ = "states"
    __table_args__ = (
        UniqueConstraint("country_id", "name", name="uq_states_country_name"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    country_id = Column(Uuid, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    country = relationship("Country")

    def __repr__(self):
        return f"State(id='{self.id}', country='{self.country_id}', name='{self.name}')"


class City(Base):
    __tablename__ = "cities"
    __table_args__ = (
        UniqueConstraint("country_id", "state_id", "name", name="uq_cities_country_state_name"),
        # NULL state_id never collides in the constraint above
        Index(
            "uq_cities_country_name_without_state",
            "country_id", "name",
            unique=True,
            sqlite_where=text("state_id IS NULL"),
            postgresql_where=text("state_id IS NULL"),
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    country_id = Column(Uuid, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True)
    state_id = Column(Uuid, ForeignKey("states.id", ondelete="CASCADE"), nullable=True, index=True)
    name = Column(String(255), nullable=False)

    country = relationship("Country")
    state = relationship("State")

    def __repr__(self):
        return f"City(id='{self.id}', country='{self.country_id}', state='{self.state_id}', name='{self.name}')"


class PostCode(Base):
    __tablename__ = "post_codes"
    __table_args__ = (
        UniqueConstraint("city_id", "code", name="uq_post_codes_city_code"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    city_id = Column(Uuid, ForeignKey("cities.id", ondelete="CASCADE"), nullable=False, index=True)
    code = Column(String(255), nullable=False)

    city = relationship("City")

    def __repr__(self):
        return f"PostCode(id='{self.id}', city='{self.city_id}', code='{self.code}')"


class Street(Base):
    __tablename__ = "streets"
    __table_args__ = (
        UniqueConstraint("post_code_id", "name", name="uq_streets_post_code_name"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    post_code_id = Column(Uuid, ForeignKey("post_codes.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    post_code = relationship("PostCode")

    def __repr__(self):
        return f"Street(id='{self.id}', post_code='{self.post_code_id}', name='{self.name}')"


class Address(Base):
    __tablename__ = "addresses"
    __table_args__ = (
        UniqueConstraint("street_id", "house_number", "extra", name="uq_addresses_street_house_number_extra"),
        Index(
            "uq_addresses_street_house_number_without_extra",
            "street_id", "house_number",
            unique=True,
            sqlite_where=text("extra IS NULL"),
            postgresql_where=text("extra IS NULL"),
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    street_id = Column(Uuid, ForeignKey("streets.id", ondelete="CASCADE"), nullable=False, index=True)
    house_number = Column(String(255), nullable=False)
    extra = Column(String(255), nullable=True)

    street = relationship("Street")

    def __repr__(self):
        return (
            f"Address(id='{self.id}', street='{self.street_id}', "
            f"house_number='{self.house_number}', extra='{self.extra}')"
        )
