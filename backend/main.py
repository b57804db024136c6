import logging
from typing import Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

try:
    # Works when running from project root: uvicorn backend.main:app --reload
    from backend.core.config import settings
    from backend.core.database import init_db
    from backend.core.errors import BookServiceError, error_payload
    from backend.core.logging_config import configure_logging
    from backend.api.routes import router
except ModuleNotFoundError:
    # Works when running from backend folder: uvicorn main:app --reload
    from core.config import settings
    from core.database import init_db
    from core.errors import BookServiceError, error_payload
    from core.logging_config import configure_logging
    from api.routes import router

logger = logging.getLogger(__name__)


def format_validation_errors(errors: Sequence[dict]) -> list:
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        messages.append(f"{field}: {err.get('msg')}")
    return messages


app = FastAPI(
    title="Books API",
    version="0.1.0",
    description="CRUD service over a single books table.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(BookServiceError)
async def book_service_error_handler(request: Request, exc: BookServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = format_validation_errors(exc.errors())
    logger.debug("Rejected payload for %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=400,
        content=error_payload("VALIDATION_ERROR", "Book payload failed validation.", details),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_payload("INTERNAL_ERROR", "Unexpected server error."),
    )


@app.on_event("startup")
async def startup_event() -> None:
    configure_logging(settings.log_level)
    # Create DB tables on startup so the project works out-of-the-box.
    init_db()
    logger.info("Books API started (env=%s)", settings.app_env)
