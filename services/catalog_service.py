"""
Catalog Service
Loads the static country name/code table from a CSV file.
"""
import csv

from flask import current_app

from extensions import db
from models.countries import Country


class CatalogService:

    @staticmethod
    def read_csv(path):
        """Yield ``(country_code, country_name)`` pairs from *path*.

        The file needs a header row with ``country_code`` and ``country_name``
        columns; blank codes or names are skipped.
        """
        with open(path, newline='', encoding='utf-8') as fh:
            for row in csv.DictReader(fh):
                code = (row.get('country_code') or '').strip().upper()
                name = (row.get('country_name') or '').strip()
                if code and name:
                    yield code, name

    @staticmethod
    def load_countries(pairs):
        """
        Insert or rename catalog rows keyed by country code.

        Returns:
            (added, updated) counts.
        """
        added = updated = 0
        for code, name in pairs:
            country = db.session.get(Country, code)
            if country is None:
                db.session.add(Country(country_code=code, country_name=name))
                added += 1
            elif country.country_name != name:
                country.country_name = name
                updated += 1
        db.session.commit()
        current_app.logger.info(f'Country catalog loaded: {added} added, {updated} updated')
        return added, updated

    @staticmethod
    def seed_from_csv(path=None):
        path = path or current_app.config['COUNTRIES_CSV']
        return CatalogService.load_countries(CatalogService.read_csv(path))

    @staticmethod
    def count():
        return Country.query.count()
