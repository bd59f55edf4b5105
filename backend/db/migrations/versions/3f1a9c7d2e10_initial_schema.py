"""initial schema: users, catalog and favourites

Revision ID: 3f1a9c7d2e10
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from typing import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "3f1a9c7d2e10"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "pokemon_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False, unique=True),
        sa.Column("color", sa.String(length=10), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("image_url_outline", sa.String(), nullable=True),
    )

    op.create_table(
        "pokemon",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
    )
    op.create_index("ix_pokemon_name", "pokemon", ["name"], unique=True)

    op.create_table(
        "pokemon_type_links",
        sa.Column(
            "pokemon_id",
            sa.Integer(),
            sa.ForeignKey("pokemon.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "type_id",
            sa.Integer(),
            sa.ForeignKey("pokemon_types.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("slot", sa.Integer(), nullable=False, server_default=sa.text("0")),
    )

    op.create_table(
        "favourites",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "pokemon_id",
            sa.Integer(),
            sa.ForeignKey("pokemon.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint(
            "user_id",
            "pokemon_id",
            name="uq_favourites_user_pokemon",
        ),
    )
    op.create_index("ix_favourites_user_id", "favourites", ["user_id"])
    op.create_index("ix_favourites_pokemon_id", "favourites", ["pokemon_id"])


def downgrade() -> None:
    op.drop_index("ix_favourites_pokemon_id", table_name="favourites")
    op.drop_index("ix_favourites_user_id", table_name="favourites")
    op.drop_table("favourites")
    op.drop_table("pokemon_type_links")
    op.drop_index("ix_pokemon_name", table_name="pokemon")
    op.drop_table("pokemon")
    op.drop_table("pokemon_types")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
