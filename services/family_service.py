"""
Family Service
==============
Resolves who is using the tracker and which household they belong to.

A family is not stored on its own: it is the set of users sharing a
``family_id``.  A name that has never been seen starts a new family whose id
is one more than the largest id in use.

Primary entry points
--------------------
  resolve_or_create_user() - login by display name, creating a family if needed
  get_user_by_id()         - point lookup for the session's current user
  get_family_members()     - everyone sharing a family id
  add_family_member()      - new user under an existing family id
"""
from flask import current_app
from sqlalchemy import func, insert, literal, select

from extensions import db
from models.users import User


class FamilyService:

    @staticmethod
    def next_family_id():
        """Return the id a brand-new family would receive right now."""
        return db.session.query(func.coalesce(func.max(User.family_id), 0)).scalar() + 1

    @staticmethod
    def resolve_or_create_user(name):
        """
        Look up a user by exact name, creating one in a new family if absent.

        An existing user is returned unchanged.  A new user gets the configured
        default color and a freshly allocated family id.
        """
        user = User.query.filter_by(name=name).order_by(User.id).first()
        if user:
            return user
        return FamilyService.create_user_in_new_family(name)

    @staticmethod
    def create_user_in_new_family(name, color=None):
        """
        Insert *name* under ``COALESCE(MAX(family_id), 0) + 1``.

        Allocation and insert run as a single ``INSERT ... SELECT`` so the
        max() is read by the same statement that writes the row, and the new
        row is fetched back by the id that statement returned.
        """
        color = color or current_app.config['DEFAULT_USER_COLOR']
        users = User.__table__
        stmt = insert(users).from_select(
            ['name', 'color', 'family_id'],
            select(
                literal(name, users.c.name.type),
                literal(color, users.c.color.type),
                func.coalesce(func.max(users.c.family_id), 0) + 1,
            ),
        ).returning(users.c.id)
        user_id = db.session.execute(stmt).scalar_one()
        db.session.commit()

        user = db.session.get(User, user_id)
        current_app.logger.info(f'Created user "{name}" (id={user.id}) in new family {user.family_id}')
        return user

    @staticmethod
    def get_user_by_id(user_id):
        """Return the User for *user_id*, or None if it does not exist."""
        if user_id is None:
            return None
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            return None
        return db.session.get(User, user_id)

    @staticmethod
    def get_family_members(family_id):
        """All users sharing *family_id*, in the order they were created."""
        if family_id is None:
            return []
        return User.query.filter_by(family_id=family_id).order_by(User.id).all()

    @staticmethod
    def add_family_member(name, color, family_id):
        """Insert a new user under an existing family id."""
        user = User(name=name, color=color, family_id=family_id)
        db.session.add(user)
        db.session.commit()
        current_app.logger.info(f'Added "{name}" (id={user.id}) to family {family_id}')
        return user

    @staticmethod
    def list_families():
        """Return ``{family_id: [User, ...]}`` for every family, ordered by id."""
        families = {}
        for user in User.query.order_by(User.family_id, User.id).all():
            families.setdefault(user.family_id, []).append(user)
        return families
