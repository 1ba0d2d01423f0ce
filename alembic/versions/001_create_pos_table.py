"""create pos table

Revision ID: 001
Revises:
Create Date: 2026-10-12 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

POS_TYPES = ("CAFE", "VENDING_MACHINE", "BAKERY", "CAFETERIA")
CAMPUS_TYPES = ("MAIN", "ZAPF", "WITTELSBACHERRING")


def upgrade() -> None:
    # sqlite_autoincrement keeps SQLite from reusing ids after all rows are deleted;
    # PostgreSQL sequences never rewind on DELETE.
    op.create_table(
        "pos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                *POS_TYPES,
                name="pos_type",
                native_enum=False,
                length=32,
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column(
            "campus",
            sa.Enum(
                *CAMPUS_TYPES,
                name="campus_type",
                native_enum=False,
                length=32,
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("house_number", sa.String(16), nullable=False),
        sa.Column("postal_code", sa.Integer(), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_pos_id", "pos", ["id"], unique=False)
    op.create_index("ix_pos_name", "pos", ["name"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_pos_name", table_name="pos")
    op.drop_index("ix_pos_id", table_name="pos")
    op.drop_table("pos")
