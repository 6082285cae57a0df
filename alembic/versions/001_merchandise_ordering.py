"""Merchandise ordering tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates: profiles, products, orders, order_items
Enums: user_role, order_status
Sequences: order_number_seq
"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # ── 1. Create enum types ──────────────────────────────────────────────
    op.execute("CREATE TYPE user_role AS ENUM ('dealer', 'vendor', 'admin');")
    op.execute("""
        CREATE TYPE order_status AS ENUM (
            'pending', 'accepted', 'rejected',
            'not_in_stock', 'dispatched', 'delivered'
        );
    """)

    # ── 2. Create sequence for order numbers ──────────────────────────────
    op.execute("CREATE SEQUENCE order_number_seq START WITH 1;")

    # ── 3. Create profiles table ──────────────────────────────────────────
    op.execute("""
        CREATE TABLE profiles (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            role user_role NOT NULL DEFAULT 'dealer',
            full_name VARCHAR(200),
            company_name VARCHAR(200),
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );
    """)
    op.execute("CREATE INDEX ix_profiles_role ON profiles (role);")

    # ── 4. Create products table ──────────────────────────────────────────
    op.execute("""
        CREATE TABLE products (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name VARCHAR(255) NOT NULL,
            category VARCHAR(100),
            sku VARCHAR(64),
            description TEXT,
            image_url VARCHAR(500),
            unit_type VARCHAR(30),
            min_quantity INTEGER,
            requires_dimensions BOOLEAN NOT NULL DEFAULT false,
            is_active BOOLEAN NOT NULL DEFAULT true,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            CONSTRAINT uq_products_sku UNIQUE (sku)
        );
    """)
    op.execute("CREATE INDEX ix_products_is_active_name ON products (is_active, name);")

    # ── 5. Create orders table ────────────────────────────────────────────
    op.execute("""
        CREATE TABLE orders (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            order_number VARCHAR(50) NOT NULL,
            dealer_id UUID NOT NULL REFERENCES profiles(id) ON DELETE RESTRICT,
            status order_status NOT NULL DEFAULT 'pending',
            total_items INTEGER NOT NULL,
            notes TEXT,
            vendor_comments TEXT,
            courier_details VARCHAR(200),
            tracking_number VARCHAR(100),
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            CONSTRAINT uq_orders_order_number UNIQUE (order_number),
            CONSTRAINT ck_orders_total_items_positive CHECK (total_items > 0)
        );
    """)
    op.execute("CREATE INDEX ix_orders_dealer_id_created_at ON orders (dealer_id, created_at);")
    op.execute("CREATE INDEX ix_orders_status ON orders (status);")

    # ── 6. Create order_items table ───────────────────────────────────────
    op.execute("""
        CREATE TABLE order_items (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            order_id UUID NOT NULL REFERENCES orders(id) ON DELETE RESTRICT,
            product_id UUID NOT NULL REFERENCES products(id) ON DELETE RESTRICT,
            quantity INTEGER NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            CONSTRAINT ck_order_items_quantity_positive CHECK (quantity > 0)
        );
    """)
    op.execute("CREATE INDEX ix_order_items_order_id ON order_items (order_id);")
    op.execute("CREATE INDEX ix_order_items_product_id ON order_items (product_id);")


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS ix_order_items_product_id;")
    op.execute("DROP INDEX IF EXISTS ix_order_items_order_id;")
    op.execute("DROP TABLE IF EXISTS order_items;")

    op.execute("DROP INDEX IF EXISTS ix_orders_status;")
    op.execute("DROP INDEX IF EXISTS ix_orders_dealer_id_created_at;")
    op.execute("DROP TABLE IF EXISTS orders;")

    op.execute("DROP INDEX IF EXISTS ix_products_is_active_name;")
    op.execute("DROP TABLE IF EXISTS products;")

    op.execute("DROP INDEX IF EXISTS ix_profiles_role;")
    op.execute("DROP TABLE IF EXISTS profiles;")

    # ── Drop sequence ──────────────────────────────────────────────────────
    op.execute("DROP SEQUENCE IF EXISTS order_number_seq;")

    # ── Drop enum types ────────────────────────────────────────────────────
    op.execute("DROP TYPE IF EXISTS order_status;")
    op.execute("DROP TYPE IF EXISTS user_role;")
