"""create_users_and_characters

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-17 10:12:03.518204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and characters tables."""
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("firebase_uid", sa.String(128), unique=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
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
    )
    op.create_index("idx_users_firebase_uid", "users", ["firebase_uid"])

    op.create_table(
        "characters",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("race", sa.String(100), nullable=False),
        sa.Column("class", sa.String(100), nullable=False),
        sa.Column("level", sa.Integer(), server_default="1", nullable=False),
        sa.Column("background", sa.String(100), nullable=False),
        # Ability scores
        sa.Column("strength", sa.Integer(), server_default="10", nullable=False),
        sa.Column("dexterity", sa.Integer(), server_default="10", nullable=False),
        sa.Column("constitution", sa.Integer(), server_default="10", nullable=False),
        sa.Column("intelligence", sa.Integer(), server_default="10", nullable=False),
        sa.Column("wisdom", sa.Integer(), server_default="10", nullable=False),
        sa.Column("charisma", sa.Integer(), server_default="10", nullable=False),
        # Combat stats
        sa.Column("max_hp", sa.Integer(), nullable=True),
        sa.Column("current_hp", sa.Integer(), nullable=True),
        sa.Column("armor_class", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
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
    )
    op.create_index("idx_characters_user_id", "characters", ["user_id"])
    op.create_index(
        "idx_characters_user_id_created_at", "characters", ["user_id", "created_at"]
    )


def downgrade() -> None:
    """Drop characters and users tables."""
    op.drop_index("idx_characters_user_id_created_at", table_name="characters")
    op.drop_index("idx_characters_user_id", table_name="characters")
    op.drop_table("characters")
    op.drop_index("idx_users_firebase_uid", table_name="users")
    op.drop_table("users")
