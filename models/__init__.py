# Models package - Import all models for Flask-SQLAlchemy

from models.countries import Country
from models.users import User
from models.visited_countries import VisitedCountry

__all__ = [
    'Country',
    'User',
    'VisitedCountry',
]
