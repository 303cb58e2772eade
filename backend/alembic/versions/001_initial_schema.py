"""Initial TechShirt schema

Revision ID: 001
Revises: None
Create Date: 2024-03-01 00:00:00.000000+00:00

What:  Creates every marketplace table: users, designers, portfolios,
       designs, design_previews, comments, notifications, designer_pricing,
       print_pricing, inventory_categories, inventory_items,
       ratings_feedback and stored_files.
How:   Foreign keys are plain UUID columns without constraints; enums are
       stored as VARCHAR values.

Rollback: downgrade() drops every table (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Uuid(), nullable=False, primary_key=True)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    # ── Users and designers ──────────────────────────────────────────────
    op.create_table(
        "users",
        _id(),
        sa.Column(
            "clerk_id",
            sa.String(255),
            nullable=False,
            comment="External identity provider subject id",
        ),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("first_name", sa.String(120), nullable=False, server_default=sa.text("''")),
        sa.Column("last_name", sa.String(120), nullable=False, server_default=sa.text("''")),
        sa.Column(
            "role",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'client'"),
            comment="client, designer or admin",
        ),
        _created_at(),
    )
    op.create_index("uq_users_clerk_id", "users", ["clerk_id"], unique=True)
    op.create_index("idx_users_role", "users", ["role"])

    op.create_table(
        "designers",
        _id(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("contact_number", sa.String(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("idx_designers_user_id", "designers", ["user_id"])

    op.create_table(
        "portfolios",
        _id(),
        sa.Column("designer_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("specialization", sa.String(255), nullable=True),
        sa.Column("skills", sa.JSON(), nullable=False),
        _created_at(),
    )
    op.create_index("idx_portfolios_designer_id", "portfolios", ["designer_id"])

    # ── Designs and their activity ───────────────────────────────────────
    op.create_table(
        "designs",
        _id(),
        sa.Column("client_id", sa.Uuid(), nullable=True),
        sa.Column("designer_id", sa.Uuid(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'pending'")),
        _created_at(),
    )

    op.create_table(
        "design_previews",
        _id(),
        sa.Column("design_id", sa.Uuid(), nullable=False),
        sa.Column("storage_id", sa.String(64), nullable=True),
        _created_at(),
    )
    op.create_index("idx_design_previews_design_id", "design_previews", ["design_id"])

    op.create_table(
        "comments",
        _id(),
        sa.Column("preview_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        _created_at(),
    )
    op.create_index("idx_comments_preview_id", "comments", ["preview_id", "created_at"])
    op.create_index("idx_comments_user_id", "comments", ["user_id", "created_at"])

    op.create_table(
        "notifications",
        _id(),
        sa.Column("recipient_user_id", sa.Uuid(), nullable=False),
        sa.Column("recipient_user_type", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _created_at(),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index(
        "idx_notifications_recipient",
        "notifications",
        ["recipient_user_id", "created_at"],
    )

    op.create_table(
        "ratings_feedback",
        _id(),
        sa.Column("portfolio_id", sa.Uuid(), nullable=False),
        sa.Column("design_id", sa.Uuid(), nullable=False),
        sa.Column("reviewer_id", sa.Uuid(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=False, server_default=sa.text("''")),
        _created_at(),
    )
    op.create_index("idx_ratings_portfolio_id", "ratings_feedback", ["portfolio_id"])

    # ── Pricing ──────────────────────────────────────────────────────────
    op.create_table(
        "designer_pricing",
        _id(),
        sa.Column("designer_id", sa.Uuid(), nullable=False),
        sa.Column("normal_amount", sa.Float(), nullable=False),
        sa.Column("promo_amount", sa.Float(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index("idx_designer_pricing_designer_id", "designer_pricing", ["designer_id"])

    op.create_table(
        "print_pricing",
        _id(),
        sa.Column("print_type", sa.String(20), nullable=False, comment="Sublimation or Dtf"),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )

    # ── Inventory ────────────────────────────────────────────────────────
    op.create_table(
        "inventory_categories",
        _id(),
        sa.Column("category_name", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("idx_inventory_categories_name", "inventory_categories", ["category_name"])

    op.create_table(
        "inventory_items",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category_id", sa.Uuid(), nullable=False),
        sa.Column("unit", sa.String(50), nullable=False),
        sa.Column("stock", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("reorder_level", sa.Float(), nullable=True),
        sa.Column("pending_restock", sa.Float(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index("idx_inventory_items_name", "inventory_items", ["name"])
    op.create_index("idx_inventory_items_category_id", "inventory_items", ["category_id"])

    # ── Blob handles ─────────────────────────────────────────────────────
    op.create_table(
        "stored_files",
        sa.Column("id", sa.String(64), nullable=False, primary_key=True),
        sa.Column(
            "path",
            sa.String(255),
            nullable=False,
            comment="Relative path from storage root to the blob",
        ),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("size_bytes", sa.Integer(), nullable=False),
        _created_at(),
    )


def downgrade() -> None:
    """Drop every table. All marketplace data is lost."""
    op.drop_table("stored_files")
    op.drop_index("idx_inventory_items_category_id", table_name="inventory_items")
    op.drop_index("idx_inventory_items_name", table_name="inventory_items")
    op.drop_table("inventory_items")
    op.drop_index("idx_inventory_categories_name", table_name="inventory_categories")
    op.drop_table("inventory_categories")
    op.drop_table("print_pricing")
    op.drop_index("idx_designer_pricing_designer_id", table_name="designer_pricing")
    op.drop_table("designer_pricing")
    op.drop_index("idx_ratings_portfolio_id", table_name="ratings_feedback")
    op.drop_table("ratings_feedback")
    op.drop_index("idx_notifications_recipient", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("idx_comments_user_id", table_name="comments")
    op.drop_index("idx_comments_preview_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_design_previews_design_id", table_name="design_previews")
    op.drop_table("design_previews")
    op.drop_table("designs")
    op.drop_index("idx_portfolios_designer_id", table_name="portfolios")
    op.drop_table("portfolios")
    op.drop_index("idx_designers_user_id", table_name="designers")
    op.drop_table("designers")
    op.drop_index("idx_users_role", table_name="users")
    op.drop_index("uq_users_clerk_id", table_name="users")
    op.drop_table("users")
