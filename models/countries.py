"""
Country Model
Static catalog of country names and their two-letter codes.
"""
from extensions import db


class Country(db.Model):
    """Reference row mapping a country name to its code"""
    __tablename__ = 'countries'

    country_code = db.Column(db.String(2), primary_key=True)
    country_name = db.Column(db.String(100), nullable=False)

    def __repr__(self):
        return f'<Country {self.country_code} {self.country_name}>'
