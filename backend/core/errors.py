from typing import Any


def error_payload(code: str, message: str, details: Any = None) -> dict:
    # Standardized error body for easier frontend handling and debugging.
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
        }
    }


class BookServiceError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        return error_payload(self.code, self.message, self.details)


class BookValidationError(BookServiceError):
    status_code = 400
    code = "VALIDATION_ERROR"


class BookNotFoundError(BookServiceError):
    status_code = 404
    code = "BOOK_NOT_FOUND"

    def __init__(self, isbn: str):
        super().__init__(f"There is no book with an isbn '{isbn}'")
        self.isbn = isbn


class BookConflictError(BookServiceError):
    status_code = 409
    code = "BOOK_EXISTS"

    def __init__(self, isbn: str):
        super().__init__(f"A book with isbn '{isbn}' already exists")
        self.isbn = isbn
