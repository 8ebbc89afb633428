"""
Request bodies and read models for the author endpoints.

Request bodies are deliberately permissive: a missing or blank field is
rejected by the command input models, so validation lives in one place
and produces the same error envelope for HTTP and for direct callers.
"""

from pydantic import BaseModel, Field


class CreateAuthorRequest(BaseModel):
    """Body of ``POST /authors``."""

    name: str | None = Field(
        default=None, description="The author name", examples=["Stephen King"]
    )


class SaveBookRequest(BaseModel):
    """Body of ``POST /authors/{author_id}/books``."""

    title: str | None = Field(
        default=None, description="The book title", examples=["Carrie"]
    )
    pages: int | None = Field(
        default=None, description="The number of pages", examples=[199]
    )


class BookView(BaseModel):
    """Book as embedded in an author response."""

    title: str = Field(..., description="The book title", examples=["Carrie"])
    pages: int = Field(..., description="The number of pages", examples=[550])


class AuthorView(BaseModel):
    """Author together with its books."""

    id: int = Field(..., description="The author id", examples=[42])
    name: str = Field(
        ..., description="The author name", examples=["Stephen King"]
    )
    books: list[BookView] = Field(
        default_factory=list, description="Books written by the author"
    )
