"""init

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19

"""
from __future__ import annotations

import uuid

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _soft_delete_columns() -> list[sa.Column]:
    return [
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    roles = op.create_table(
        "roles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False, unique=True),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("login", sa.String(length=50), nullable=True, unique=True),
        sa.Column("phone", sa.String(length=15), nullable=True, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("role_id", sa.Uuid(), sa.ForeignKey("roles.id", ondelete="SET NULL"), nullable=True),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_role_id", "users", ["role_id"])

    op.create_table(
        "coffee_shops",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("creator_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("contacts", sa.String(length=255), nullable=True),
        sa.Column("welcome_message", sa.Text(), nullable=True),
        sa.Column("rules", sa.Text(), nullable=True),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_coffee_shops_creator_id", "coffee_shops", ["creator_id"])

    op.create_table(
        "worker_coffee_shops",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("worker_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("coffee_shop_id", sa.Uuid(), sa.ForeignKey("coffee_shops.id", ondelete="CASCADE"), nullable=False),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_worker_coffee_shops_coffee_shop_id", "worker_coffee_shops", ["coffee_shop_id"])
    op.create_index("ix_worker_coffee_shops_worker_id", "worker_coffee_shops", ["worker_id"])
    op.create_index(
        "uq_worker_coffee_shops_active",
        "worker_coffee_shops",
        ["worker_id", "coffee_shop_id"],
        unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("coffee_shop_id", sa.Uuid(), sa.ForeignKey("coffee_shops.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_categories_coffee_shop_id", "categories", ["coffee_shop_id"])

    op.create_table(
        "reward_types",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("coffee_shop_id", sa.Uuid(), sa.ForeignKey("coffee_shops.id", ondelete="CASCADE"), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_reward_types_coffee_shop_id", "reward_types", ["coffee_shop_id"])

    op.create_table(
        "ideas",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("coffee_shop_id", sa.Uuid(), sa.ForeignKey("coffee_shops.id", ondelete="SET NULL"), nullable=True),
        sa.Column("creator_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("category_id", sa.Uuid(), sa.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True),
        sa.Column("title", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_ideas_coffee_shop_id", "ideas", ["coffee_shop_id"])
    op.create_index("ix_ideas_creator_id", "ideas", ["creator_id"])

    op.create_table(
        "idea_comments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("idea_id", sa.Uuid(), sa.ForeignKey("ideas.id", ondelete="CASCADE"), nullable=True),
        sa.Column("creator_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("author_name", sa.String(length=100), nullable=False),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_idea_comments_idea_id", "idea_comments", ["idea_id"])

    op.create_table(
        "idea_likes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("idea_id", sa.Uuid(), sa.ForeignKey("ideas.id", ondelete="CASCADE"), nullable=False),
        *_soft_delete_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_idea_likes_idea_id", "idea_likes", ["idea_id"])
    op.create_index(
        "uq_idea_likes_active",
        "idea_likes",
        ["user_id", "idea_id"],
        unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )

    op.bulk_insert(roles, [{"id": uuid.uuid4(), "name": "admin"}])


def downgrade() -> None:
    op.drop_index("uq_idea_likes_active", table_name="idea_likes")
    op.drop_table("idea_likes")
    op.drop_table("idea_comments")
    op.drop_table("ideas")
    op.drop_table("reward_types")
    op.drop_table("categories")
    op.drop_index("uq_worker_coffee_shops_active", table_name="worker_coffee_shops")
    op.drop_table("worker_coffee_shops")
    op.drop_table("coffee_shops")
    op.drop_table("users")
    op.drop_table("roles")
