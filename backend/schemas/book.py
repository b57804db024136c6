from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Largest value a 32-bit INTEGER column holds.
MAX_INT_COLUMN = 2_147_483_647


class BookSchema(BaseModel):
    """
    Full book payload accepted by POST /books and PUT /books/{isbn}.
    Exactly these eight fields, strictly typed; anything else is rejected.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    isbn: str = Field(min_length=1, max_length=32)
    amazon_url: str = Field(min_length=1)
    author: str = Field(min_length=1)
    language: str = Field(min_length=1)
    pages: int = Field(ge=1, le=MAX_INT_COLUMN)
    publisher: str = Field(min_length=1)
    title: str = Field(min_length=1)
    year: int = Field(ge=0, le=9999)


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookResponse(BaseModel):
    book: BookOut


class BookListResponse(BaseModel):
    books: List[BookOut]


class MessageResponse(BaseModel):
    message: str
