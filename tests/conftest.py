import pytest

from items_api import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'items.db'}",
            "LOG_LEVEL": "WARNING",
        }
    )
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    """A standalone session on the test database, outside any request."""
    session = app.extensions["session_factory"]()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def widget():
    return {"name": "Widget", "price": 9.99, "category": "tools"}
