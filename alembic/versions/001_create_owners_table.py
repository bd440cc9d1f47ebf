"""create owners table

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_owners_id", "owners", ["id"], unique=False)
    # Unique index: the storage-level guarantee that no two owners share an email
    op.create_index("ix_owners_email", "owners", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_owners_email", table_name="owners")
    op.drop_index("ix_owners_id", table_name="owners")
    op.drop_table("owners")
