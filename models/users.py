"""
User Model
A named family member. Families are not stored separately: every user
sharing a family_id belongs to the same household.
"""
from extensions import db


class User(db.Model):
    """Family member whose visited countries are tracked"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    # Display tag used to shade the map for this member
    color = db.Column(db.String(30), nullable=False)
    family_id = db.Column(db.Integer, nullable=False, index=True)

    def __repr__(self):
        return f'<User {self.name} family={self.family_id}>'
