import pytest
from pydantic import ValidationError

from backend.schemas.book import BookSchema

VALID = {
    "isbn": "1234567890",
    "amazon_url": "https://amazon.com/randombook",
    "author": "Jolkien Rolkien",
    "language": "English",
    "pages": 456,
    "publisher": "Penguin",
    "title": "Some Book",
    "year": 1956,
}


def test_valid_payload():
    book = BookSchema.model_validate(VALID)
    assert book.pages == 456


@pytest.mark.parametrize("field", sorted(VALID))
def test_missing_field_rejected(field):
    payload = {k: v for k, v in VALID.items() if k != field}
    with pytest.raises(ValidationError):
        BookSchema.model_validate(payload)


@pytest.mark.parametrize(
    "field,value",
    [
        ("pages", "456"),
        ("year", 1956.5),
        ("year", True),
        ("title", ""),
        ("author", 42),
        ("pages", 0),
        ("pages", 10**20),
        ("year", -1),
        ("year", 10000),
    ],
)
def test_wrong_type_rejected(field, value):
    with pytest.raises(ValidationError):
        BookSchema.model_validate({**VALID, field: value})


def test_extra_field_rejected():
    with pytest.raises(ValidationError):
        BookSchema.model_validate({**VALID, "subtitle": "x"})
