"""create_departments_and_roles

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:44.201318

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _named_entity_columns(label: str) -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(length=36), nullable=False, comment=f"{label} ID (UUID)"),
        sa.Column("name", sa.String(length=100), nullable=False, comment=f"{label} name"),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "departments",
        *_named_entity_columns("Department"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_departments_name"),
    )
    op.create_table(
        "roles",
        *_named_entity_columns("Role"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_roles_name"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("roles")
    op.drop_table("departments")
