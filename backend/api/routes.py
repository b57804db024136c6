from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

try:
    from backend.core.database import get_db
    from backend.schemas.book import BookListResponse, BookResponse, BookSchema, MessageResponse
    from backend.services.books import BookService
except ModuleNotFoundError:
    from core.database import get_db
    from schemas.book import BookListResponse, BookResponse, BookSchema, MessageResponse
    from services.books import BookService

router = APIRouter()


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    return BookService(db)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "service": "books-api"}


@router.get("/books", response_model=BookListResponse, tags=["books"])
def list_books(service: BookService = Depends(get_book_service)) -> dict:
    return {"books": service.list_books()}


@router.get("/books/{isbn}", response_model=BookResponse, tags=["books"])
def get_book(isbn: str, service: BookService = Depends(get_book_service)) -> dict:
    return {"book": service.get_book(isbn)}


@router.post("/books", response_model=BookResponse, status_code=201, tags=["books"])
def create_book(payload: BookSchema, service: BookService = Depends(get_book_service)) -> dict:
    return {"book": service.create_book(payload)}


@router.put("/books/{isbn}", response_model=BookResponse, tags=["books"])
def update_book(
    isbn: str,
    payload: BookSchema,
    service: BookService = Depends(get_book_service),
) -> dict:
    """
    Full replacement: the body must carry every field, including an isbn equal to the path.
    """
    return {"book": service.update_book(isbn, payload)}


@router.delete("/books/{isbn}", response_model=MessageResponse, tags=["books"])
def delete_book(isbn: str, service: BookService = Depends(get_book_service)) -> dict:
    service.delete_book(isbn)
    return {"message": "Book deleted"}
