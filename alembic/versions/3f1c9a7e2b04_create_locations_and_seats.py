"""Create locations and location_seats

Revision ID: 3f1c9a7e2b04
Revises:
Create Date: 2026-10-19 09:12:40.118342

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "locations",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=450), nullable=False),
        sa.Column("street_name", sa.Text(), nullable=False),
        sa.Column("postal_code", sa.Text(), nullable=False),
        sa.Column("city", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Name uniqueness is enforced here, not only by the pre-flight check
    op.create_index("ix_locations_name", "locations", ["name"], unique=True)

    op.create_table(
        "location_seats",
        sa.Column("seat_id", sa.String(length=36), nullable=False),
        sa.Column("seat_number", sa.Text(), nullable=False),
        sa.Column("row", sa.Text(), nullable=False),
        sa.Column("gate", sa.Text(), nullable=False),
        sa.Column("location_id", sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("seat_id"),
    )
    op.create_index("ix_location_seats_location_id", "location_seats", ["location_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_location_seats_location_id", table_name="location_seats")
    op.drop_table("location_seats")
    op.drop_index("ix_locations_name", table_name="locations")
    op.drop_table("locations")
