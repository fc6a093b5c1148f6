"""
Library API -- Pydantic Data Models

Request and response bodies for the book endpoints. The schema document
served at /api-docs is not modelled here: its shape belongs to whoever
published it in the registry, so it travels as a plain dict.
"""

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# /books
# ---------------------------------------------------------------------------

class Book(BaseModel):
    """A book as sent by the client.

    Both fields default to "" so that a missing or null field is reported
    as "required" rather than as an unparseable body. Non-string values
    are still rejected at parse time."""

    title: str = Field(default="", examples=["Dune"])
    author: str = Field(default="", examples=["Frank Herbert"])

    @field_validator("title", "author", mode="before")
    @classmethod
    def null_is_empty(cls, value):
        return "" if value is None else value


class BookCreated(BaseModel):
    id: str = Field(description="Generated identifier of the new book.")


class BookRef(BaseModel):
    """Returned by GET /books/{id}. Carries the id only, not the stored fields."""

    id: str


# ---------------------------------------------------------------------------
# Errors and health
# ---------------------------------------------------------------------------

class ErrorResponse(BaseModel):
    error: str = Field(examples=["Book not found"])


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    registry_artifact: str = Field(description="group/artifact@version of the loaded schema")
    books_stored: int
