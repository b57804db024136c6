from sqlalchemy import Column, Integer, String, Text

try:
    from backend.core.database import Base
except ModuleNotFoundError:
    from core.database import Base


class Book(Base):
    """
    A single catalogued book, keyed by its ISBN.
    Every column is required; the ISBN never changes after insert.
    """

    __tablename__ = "books"

    isbn = Column(String(32), primary_key=True)
    amazon_url = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    language = Column(Text, nullable=False)
    pages = Column(Integer, nullable=False)
    publisher = Column(Text, nullable=False)
    title = Column(Text, nullable=False, index=True)
    year = Column(Integer, nullable=False)
