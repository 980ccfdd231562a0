import pytest
from sqlalchemy.pool import StaticPool

from .albums import Albums
from .app import create_app
from .database import Base, Database
from .types import Album


@pytest.fixture
def db():
    # one shared in-memory connection so every session sees the same tables
    db = Database("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=db.engine)
    yield db
    db.engine.dispose()


@pytest.fixture
def albums(db):
    return Albums(db)


@pytest.fixture
def app(albums):
    app = create_app(albums)
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def coltrane(albums):
    return [
        albums.add(Album(title="Blue Train", artist="John Coltrane", price=56.99)),
        albums.add(Album(title="Giant Steps", artist="John Coltrane", price=63.99)),
    ]
