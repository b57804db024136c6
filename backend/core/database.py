from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

try:
    from backend.core.config import settings
except ModuleNotFoundError:
    from core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    return create_engine(
        url,
        echo=echo,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
    )


engine = build_engine(settings.active_database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    # Import models here so SQLAlchemy registers metadata before create_all().
    try:
        from backend.models.book import Book  # noqa: F401
    except ModuleNotFoundError:
        from models.book import Book  # noqa: F401

    Base.metadata.create_all(bind=bind)


def get_db() -> Generator[Session, None, None]:
    # FastAPI dependency that provides/cleans a DB session per request.
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
