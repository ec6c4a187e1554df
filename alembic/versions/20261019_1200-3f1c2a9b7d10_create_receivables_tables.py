"""create users, assignors and payables tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create users, assignors and payables tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("login", sa.String(length=140), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_login", "users", ["login"], unique=True)

    op.create_table(
        "assignors",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("document", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=140), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=140), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_assignors_document", "assignors", ["document"], unique=True)

    op.create_table(
        "payables",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("assignor_id", sa.Uuid(), nullable=False),
        sa.Column("emission_date", sa.Date(), nullable=False),
        sa.Column("value", sa.Numeric(), nullable=False),
        sa.ForeignKeyConstraint(
            ["assignor_id"], ["assignors.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_payables_assignor_id", "payables", ["assignor_id"])


def downgrade() -> None:
    """Drop payables, assignors and users tables."""
    op.drop_index("ix_payables_assignor_id", table_name="payables")
    op.drop_table("payables")
    op.drop_index("ix_assignors_document", table_name="assignors")
    op.drop_table("assignors")
    op.drop_index("ix_users_login", table_name="users")
    op.drop_table("users")
