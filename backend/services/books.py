import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

try:
    from backend.core.errors import BookConflictError, BookNotFoundError, BookValidationError
    from backend.models.book import Book
    from backend.schemas.book import BookSchema
except ModuleNotFoundError:
    from core.errors import BookConflictError, BookNotFoundError, BookValidationError
    from models.book import Book
    from schemas.book import BookSchema

logger = logging.getLogger(__name__)


class BookService:
    """
    CRUD operations over the books table.
    The session is owned by the caller; each write commits once and rolls back on failure.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_books(self) -> List[Book]:
        return list(self.db.execute(select(Book).order_by(Book.title)).scalars())

    def get_book(self, isbn: str) -> Book:
        book = self.db.get(Book, isbn)
        if book is None:
            logger.debug("Book lookup missed: %s", isbn)
            raise BookNotFoundError(isbn)
        return book

    def create_book(self, payload: BookSchema) -> Book:
        if self.db.get(Book, payload.isbn) is not None:
            raise BookConflictError(payload.isbn)

        book = Book(**payload.model_dump())
        self.db.add(book)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent insert of the same isbn.
            self.db.rollback()
            raise BookConflictError(payload.isbn)
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(book)
        logger.info("Book created: %s", book.isbn)
        return book

    def update_book(self, isbn: str, payload: BookSchema) -> Book:
        if payload.isbn != isbn:
            raise BookValidationError(
                "isbn in body does not match the isbn in the URL",
                details=[f"isbn: expected '{isbn}', got '{payload.isbn}'"],
            )

        book = self.get_book(isbn)
        for field, value in payload.model_dump(exclude={"isbn"}).items():
            setattr(book, field, value)

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(book)
        logger.info("Book updated: %s", isbn)
        return book

    def delete_book(self, isbn: str) -> None:
        book = self.get_book(isbn)
        self.db.delete(book)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("Book deleted: %s", isbn)
