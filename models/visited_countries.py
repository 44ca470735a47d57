"""
VisitedCountry Model
One row per recorded visit. The same (user, country) pair may appear more
than once; rows are listed in the order they were recorded.
"""
from extensions import db


class VisitedCountry(db.Model):
    __tablename__ = 'visited_countries'

    id = db.Column(db.Integer, primary_key=True)
    country_code = db.Column(db.String(2), db.ForeignKey('countries.country_code'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    def __repr__(self):
        return f'<VisitedCountry user={self.user_id} {self.country_code}>'
