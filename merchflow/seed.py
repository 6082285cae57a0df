"""Database seeder for MerchFlow — demo profiles and the merchandise catalog.

Run via: python -m merchflow.seed
"""

from sqlalchemy import text
from sqlalchemy.orm import Session

from merchflow.database.engine import sync_engine
from merchflow.seed_data.products import PRODUCTS
from merchflow.seed_data.profiles import PROFILES


def seed_profiles(session: Session) -> None:
    """Upsert demo profiles."""
    for profile in PROFILES:
        session.execute(
            text("""
                INSERT INTO profiles (id, role, full_name, company_name)
                VALUES (:id, CAST(:role AS user_role), :full_name, :company_name)
                ON CONFLICT (id) DO UPDATE SET
                    role = EXCLUDED.role,
                    full_name = EXCLUDED.full_name,
                    company_name = EXCLUDED.company_name,
                    updated_at = now()
            """),
            profile,
        )

    print(f"  Seeded {len(PROFILES)} profiles.")


def seed_products(session: Session) -> None:
    """Upsert catalog products keyed by SKU."""
    for product in PRODUCTS:
        session.execute(
            text("""
                INSERT INTO products
                    (name, category, sku, description, unit_type,
                     min_quantity, requires_dimensions, is_active)
                VALUES
                    (:name, :category, :sku, :description, :unit_type,
                     :min_quantity, :requires_dimensions, true)
                ON CONFLICT (sku) DO UPDATE SET
                    name = EXCLUDED.name,
                    category = EXCLUDED.category,
                    description = EXCLUDED.description,
                    unit_type = EXCLUDED.unit_type,
                    min_quantity = EXCLUDED.min_quantity,
                    requires_dimensions = EXCLUDED.requires_dimensions,
                    updated_at = now()
            """),
            product,
        )

    print(f"  Seeded {len(PRODUCTS)} products.")


def main() -> None:
    """Run all seed functions inside a single transaction."""
    print("Seeding MerchFlow database...")

    with Session(sync_engine) as session:
        with session.begin():
            seed_profiles(session)
            seed_products(session)

    print("Seeding complete.")


if __name__ == "__main__":
    main()
