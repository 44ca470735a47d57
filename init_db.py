"""
Initialize database and seed the country catalog
Run this script once to set up your database
"""

from app import create_app
from extensions import db
from services.catalog_service import CatalogService


def init_db():
    """Initialize the database"""
    app = create_app('development')

    with app.app_context():
        print("Creating database tables...")
        db.create_all()
        print("✓ Database tables created successfully!")
        print(f"Database location: {app.config['SQLALCHEMY_DATABASE_URI']}")

        print("\nTables created:")
        for table in db.metadata.sorted_tables:
            print(f"  - {table.name}")

        added, updated = CatalogService.seed_from_csv()
        print(f"\n✓ Country catalog: {added} added, {updated} renamed, {CatalogService.count()} total")


if __name__ == '__main__':
    init_db()
