import os

os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from backend.core.database import build_engine, get_db, init_db
from backend.main import app
from backend.models.book import Book

SEED_BOOK = {
    "isbn": "1234567890",
    "amazon_url": "https://amazon.com/randombook",
    "author": "Jolkien Rolkien",
    "language": "English",
    "pages": 456,
    "publisher": "Penguin",
    "title": "Some Book",
    "year": 1956,
}


@pytest.fixture
def engine(tmp_path, request):
    # Unique database file per test
    db_file = tmp_path / f"books_test_{request.node.name}.db"
    test_engine = build_engine(f"sqlite:///{db_file}")
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_isbn(session_factory):
    session = session_factory()
    try:
        session.add(Book(**SEED_BOOK))
        session.commit()
    finally:
        session.close()
    return SEED_BOOK["isbn"]


@pytest.fixture
def client(session_factory, seeded_isbn):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
