"""
Ledger Service
==============
Records and lists the countries each user has visited.

Free-text input is matched against the country catalog by case-insensitive
substring.  When several catalog names match, the shortest name wins and
ties are broken alphabetically, so "land" always resolves to Poland and
never to whichever row the database happens to return first.

Recording the same country twice adds a second row; the ledger is a
multiset and the visited total counts every row.
"""
from flask import current_app
from sqlalchemy import func

from extensions import db
from models.countries import Country
from models.visited_countries import VisitedCountry


class LedgerError(Exception):
    """Base class for ledger failures the caller is expected to handle."""


class CountryNotFound(LedgerError):
    """No catalog entry matches the requested country name."""

    def __init__(self, query):
        self.query = query
        super().__init__(f'No country matching "{query}"')


class LedgerService:

    @staticmethod
    def find_country(free_text):
        """Return the best catalog match for *free_text*, or None."""
        term = (free_text or '').strip().lower()
        if not term:
            return None
        return (
            Country.query
            .filter(func.lower(Country.country_name).contains(term, autoescape=True))
            .order_by(func.length(Country.country_name), Country.country_name)
            .first()
        )

    @staticmethod
    def record_visit(user_id, free_text):
        """
        Resolve *free_text* to a country and append it to the user's ledger.

        Raises:
            CountryNotFound: nothing in the catalog matches; no row is written.
        """
        country = LedgerService.find_country(free_text)
        if country is None:
            raise CountryNotFound(free_text)

        visit = VisitedCountry(user_id=user_id, country_code=country.country_code)
        db.session.add(visit)
        db.session.commit()
        current_app.logger.info(f'User {user_id} visited {country.country_code} ({country.country_name})')
        return visit

    @staticmethod
    def list_visited_codes(user_id):
        """Country codes recorded for *user_id*, in recording order."""
        rows = (
            db.session.query(VisitedCountry.country_code)
            .filter(VisitedCountry.user_id == user_id)
            .order_by(VisitedCountry.id)
            .all()
        )
        return [row.country_code for row in rows]

    @staticmethod
    def total_visited(user_id):
        return len(LedgerService.list_visited_codes(user_id))
