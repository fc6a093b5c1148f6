"""
POST /books and GET /books/{book_id} -- the book collection.

Both handlers are plain ``def`` functions: FastAPI runs them on its worker
thread pool, and the store's lock keeps concurrent requests consistent.
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import TypeAdapter, ValidationError

from library_api.dependencies import get_store
from library_api.errors import INVALID_BODY, APIError
from library_api.models.schemas import Book, BookCreated, BookRef, ErrorResponse
from library_api.store import BookStore

logger = logging.getLogger(__name__)

router = APIRouter()

# A JSON null body decodes to an empty book, like a JSON object with no fields.
_book_or_null = TypeAdapter(Book | None)


async def read_book(request: Request) -> Book:
    """Decode the request body as a JSON book, whatever its Content-Type says."""
    body = await request.body()
    try:
        book = _book_or_null.validate_json(body)
    except ValidationError as e:
        logger.info("Rejected book body: %s", e.errors(include_input=False))
        raise APIError(400, INVALID_BODY) from e
    return book if book is not None else Book()


@router.post(
    "/books",
    status_code=201,
    response_model=BookCreated,
    responses={400: {"model": ErrorResponse}},
    summary="Add a book",
    tags=["Books"],
)
def create_book(
    book: Book = Depends(read_book),
    store: BookStore = Depends(get_store),
) -> BookCreated:
    if not book.title or not book.author:
        raise APIError(400, "Title and author are required")

    book_id = store.create(book)
    logger.info("Created book %s", book_id)
    return BookCreated(id=book_id)


@router.get(
    "/books/{book_id}",
    response_model=BookRef,
    responses={404: {"model": ErrorResponse}},
    summary="Look up a book by id",
    description="Confirms the book exists. Only the id is echoed back.",
    tags=["Books"],
)
def get_book(book_id: str, store: BookStore = Depends(get_store)) -> BookRef:
    if not store.exists(book_id):
        raise APIError(404, "Book not found")

    return BookRef(id=book_id)
