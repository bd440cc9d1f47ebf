"""create horses table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 10:05:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "horses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("breed", sa.String(length=255), nullable=False),
        sa.Column("health_status", sa.String(length=20), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        # Deleting an owner deletes its horses in the same statement
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"], ondelete="CASCADE"),
        sa.CheckConstraint("age >= 1 AND age <= 30", name="ck_horses_age_range"),
        sa.CheckConstraint(
            "health_status IN ('HEALTHY', 'INJURED', 'RECOVERING')",
            name="ck_horses_health_status",
        ),
    )
    op.create_index("ix_horses_id", "horses", ["id"], unique=False)
    op.create_index("ix_horses_breed", "horses", ["breed"], unique=False)
    op.create_index("ix_horses_owner_id", "horses", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_horses_owner_id", table_name="horses")
    op.drop_index("ix_horses_breed", table_name="horses")
    op.drop_index("ix_horses_id", table_name="horses")
    op.drop_table("horses")
