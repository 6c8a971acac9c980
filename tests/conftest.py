import pytest
from werkzeug.security import generate_password_hash

from dailyjournal.app import create_app
from dailyjournal.cli import seed_competencies
from dailyjournal.extensions import db
from dailyjournal.models.user import User

PASSWORD = "password123"

TEST_COMPETENCIES = [
    ("Communication", "Expressing ideas clearly."),
    ("Teamwork", "Working with others."),
    ("Problem Solving", "Finding workable solutions."),
    ("Leadership", "Guiding others."),
]


@pytest.fixture(scope='session')
def app():
    """Session-wide test `Flask` application."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()

    # Requests must run without an outer app context, otherwise Flask reuses
    # it and the signed-in user cached on `g` leaks between requests.
    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def clean_db(app):
    """Empties every table and reloads the competency catalog before a test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        seed_competencies(db.session, TEST_COMPETENCIES)


@pytest.fixture(scope='function')
def client(app, clean_db):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture(scope='function')
def make_user(app, clean_db):
    """Factory creating a user with the shared test password."""
    def _make(email):
        with app.app_context():
            user = User(email=email, password_hash=generate_password_hash(PASSWORD))
            db.session.add(user)
            db.session.commit()
        return email
    return _make


def login(client, email, password=PASSWORD):
    return client.post("/auth/login", data={"email": email, "password": password})


@pytest.fixture(scope='function')
def alice(app, make_user):
    """Test client signed in as alice@example.com."""
    make_user("alice@example.com")
    c = app.test_client()
    login(c, "alice@example.com")
    return c


@pytest.fixture(scope='function')
def bob(app, make_user):
    """Test client signed in as bob@example.com."""
    make_user("bob@example.com")
    c = app.test_client()
    login(c, "bob@example.com")
    return c
