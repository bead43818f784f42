"""create_shop_tables

Revision ID: 3f2a9c1d7e01
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    """Primary key and timestamps from BaseMutableModel."""
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
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


def _address() -> list[sa.Column]:
    """Embedded Address columns."""
    return [
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("street", sa.String(length=255), nullable=True),
        sa.Column("zipcode", sa.String(length=20), nullable=True),
    ]


def upgrade() -> None:
    """Create members, deliveries, items, orders and order_items tables."""
    op.create_table(
        "members",
        *_timestamps(),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Member display name",
        ),
        *_address(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_members_name", "members", ["name"])

    op.create_table(
        "deliveries",
        *_timestamps(),
        *_address(),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="Delivery status (ready, comp)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "items",
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), nullable=False),
        sa.Column(
            "item_type",
            sa.String(length=20),
            nullable=False,
            comment="Single-table discriminator (book, album, movie)",
        ),
        # Subtype columns (nullable, single table)
        sa.Column("author", sa.String(length=255), nullable=True),
        sa.Column("isbn", sa.String(length=32), nullable=True),
        sa.Column("artist", sa.String(length=255), nullable=True),
        sa.Column("etc", sa.String(length=255), nullable=True),
        sa.Column("director", sa.String(length=255), nullable=True),
        sa.Column("actor", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "orders",
        *_timestamps(),
        sa.Column(
            "member_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to members table",
        ),
        sa.Column(
            "delivery_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to deliveries table",
        ),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="Order status (order, cancel)",
        ),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"]),
        sa.ForeignKeyConstraint(["delivery_id"], ["deliveries.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("delivery_id"),
    )
    op.create_index("ix_orders_member_id", "orders", ["member_id"])
    op.create_index("ix_orders_status", "orders", ["status"])

    op.create_table(
        "order_items",
        *_timestamps(),
        sa.Column(
            "order_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to orders table",
        ),
        sa.Column(
            "item_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to items table",
        ),
        sa.Column("order_price", sa.Integer(), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["item_id"], ["items.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])
    op.create_index("ix_order_items_item_id", "order_items", ["item_id"])


def downgrade() -> None:
    """Drop the shop tables in reverse dependency order."""
    op.drop_index("ix_order_items_item_id", table_name="order_items")
    op.drop_index("ix_order_items_order_id", table_name="order_items")
    op.drop_table("order_items")
    op.drop_index("ix_orders_status", table_name="orders")
    op.drop_index("ix_orders_member_id", table_name="orders")
    op.drop_table("orders")
    op.drop_table("items")
    op.drop_table("deliveries")
    op.drop_index("ix_members_name", table_name="members")
    op.drop_table("members")
