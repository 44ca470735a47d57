"""
Sample data population script for Family Travel Tracker
Seeds the country catalog and one demo family with a few visits.

Run from project root: python scripts/populate_sample_data.py
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from services.catalog_service import CatalogService
from services.family_service import FamilyService
from services.ledger_service import CountryNotFound, LedgerService

SAMPLE_VISITS = {
    'Angela': ('teal', ['France', 'Spain', 'Japan']),
    'Jack': ('powderblue', ['United Kingdom', 'Canada']),
}


def populate_sample_data():
    """Seed catalog, then one family built from the first sample member"""
    app = create_app()

    with app.app_context():
        print("=== STEP 1: Country catalog ===")
        added, updated = CatalogService.seed_from_csv()
        print(f"  {added} added, {updated} renamed")

        print("\n=== STEP 2: Family members ===")
        names = list(SAMPLE_VISITS)
        founder = FamilyService.resolve_or_create_user(names[0])
        members = [founder]
        existing = {u.name for u in FamilyService.get_family_members(founder.family_id)}
        for name in names[1:]:
            if name in existing:
                continue
            color, _ = SAMPLE_VISITS[name]
            members.append(FamilyService.add_family_member(name, color, founder.family_id))
        print(f"  family {founder.family_id}: {', '.join(m.name for m in members)}")

        print("\n=== STEP 3: Visited countries ===")
        for member in FamilyService.get_family_members(founder.family_id):
            _, countries = SAMPLE_VISITS.get(member.name, (None, []))
            for country in countries:
                try:
                    LedgerService.record_visit(member.id, country)
                except CountryNotFound as e:
                    print(f"  ⚠️  {e}")
            print(f"  {member.name}: {LedgerService.list_visited_codes(member.id)}")

        print("\n✓ Sample data populated")


if __name__ == '__main__':
    populate_sample_data()
