"""
Shared pytest fixtures for the Family Travel Tracker test suite.

All tests run against an in-memory SQLite database (TestingConfig).
A single app context is pushed for the whole session so that SQLAlchemy
objects remain attached throughout.  After each test, clean_db wipes all
rows so tests are fully independent.
"""
import pytest
from app import create_app
from extensions import db as _db


# ---------------------------------------------------------------------------
# Application / database lifecycle
# ---------------------------------------------------------------------------

@pytest.fixture(scope='session')
def app():
    """Create a test Flask application with an in-memory SQLite database."""
    application = create_app('testing')
    ctx = application.app_context()
    ctx.push()
    _db.create_all()
    yield application
    _db.session.remove()
    _db.drop_all()
    ctx.pop()


@pytest.fixture(autouse=True)
def clean_db(app):
    """Wipe every table after each test so tests never share state."""
    yield
    _db.session.rollback()
    for table in reversed(_db.metadata.sorted_tables):
        _db.session.execute(table.delete())
    _db.session.commit()
    _db.session.expunge_all()


@pytest.fixture
def client(app):
    return app.test_client()


# ---------------------------------------------------------------------------
# Common model helpers
# ---------------------------------------------------------------------------

CATALOG = [
    ('ES', 'Spain'),
    ('FI', 'Finland'),
    ('GB', 'United Kingdom'),
    ('GL', 'Greenland'),
    ('IE', 'Ireland'),
    ('IS', 'Iceland'),
    ('NE', 'Niger'),
    ('NG', 'Nigeria'),
    ('PL', 'Poland'),
    ('US', 'United States of America'),
]


@pytest.fixture
def catalog(app):
    from models.countries import Country
    _db.session.add_all(Country(country_code=code, country_name=name) for code, name in CATALOG)
    _db.session.commit()
    return dict(CATALOG)


@pytest.fixture
def make_user(app):
    """Factory inserting a user directly, bypassing the family allocator."""
    from models.users import User

    def _make(name, family_id, color='teal'):
        u = User(name=name, color=color, family_id=family_id)
        _db.session.add(u)
        _db.session.commit()
        return u
    return _make


@pytest.fixture
def login_as(client):
    """Put *user* into the test client's cookie session."""
    def _login(user, family_id=None):
        with client.session_transaction() as sess:
            sess['current_user_id'] = user.id
            sess['current_family_id'] = user.family_id if family_id is None else family_id
    return _login
