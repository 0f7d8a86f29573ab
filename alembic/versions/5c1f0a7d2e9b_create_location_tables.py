"""create location tables

Revision ID: 5c1f0a7d2e9b
Revises:
Create Date: 2026-10-17 09:12:44.318201

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1f0a7d2e9b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "countries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("alpha2", sa.String(2), nullable=False, unique=True),
        sa.Column("alpha3", sa.String(3), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("localized_name", sa.String(255), nullable=False),
    )

    op.create_table(
        "states",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("country_id", sa.Uuid(), sa.ForeignKey("countries.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.UniqueConstraint("country_id", "name", name="uq_states_country_name"),
    )
    op.create_index("ix_states_country_id", "states", ["country_id"])

    op.create_table(
        "cities",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("country_id", sa.Uuid(), sa.ForeignKey("countries.id", ondelete="CASCADE"), nullable=False),
        sa.Column("state_id", sa.Uuid(), sa.ForeignKey("states.id", ondelete="CASCADE"), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.UniqueConstraint("country_id", "state_id", "name", name="uq_cities_country_state_name"),
    )
    op.create_index("ix_cities_country_id", "cities", ["country_id"])
    op.create_index("ix_cities_state_id", "cities", ["state_id"])
    op.create_index(
        "uq_cities_country_name_without_state",
        "cities",
        ["country_id", "name"],
        unique=True,
        sqlite_where=sa.text("state_id IS NULL"),
        postgresql_where=sa.text("state_id IS NULL"),
    )

    op.create_table(
        "post_codes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("city_id", sa.Uuid(), sa.ForeignKey("cities.id", ondelete="CASCADE"), nullable=False),
        sa.Column("code", sa.String(255), nullable=False),
        sa.UniqueConstraint("city_id", "code", name="uq_post_codes_city_code"),
    )
    op.create_index("ix_post_codes_city_id", "post_codes", ["city_id"])

    op.create_table(
        "streets",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("post_code_id", sa.Uuid(), sa.ForeignKey("post_codes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.UniqueConstraint("post_code_id", "name", name="uq_streets_post_code_name"),
    )
    op.create_index("ix_streets_post_code_id", "streets", ["post_code_id"])

    op.create_table(
        "addresses",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("street_id", sa.Uuid(), sa.ForeignKey("streets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("house_number", sa.String(255), nullable=False),
        sa.Column("extra", sa.String(255), nullable=True),
        sa.UniqueConstraint("street_id", "house_number", "extra", name="uq_addresses_street_house_number_extra"),
    )
    op.create_index("ix_addresses_street_id", "addresses", ["street_id"])
    op.create_index(
        "uq_addresses_street_house_number_without_extra",
        "addresses",
        ["street_id", "house_number"],
        unique=True,
        sqlite_where=sa.text("extra IS NULL"),
        postgresql_where=sa.text("extra IS NULL"),
    )


def downgrade():
    op.drop_table("addresses")
    op.drop_table("streets")
    op.drop_table("post_codes")
    op.drop_table("cities")
    op.drop_table("states")
    op.drop_table("countries")
