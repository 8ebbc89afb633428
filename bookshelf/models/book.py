from datetime import datetime

from sqlalchemy import func
from sqlmodel import Field

from bookshelf.models.base import BaseModel


class Book(BaseModel, table=True):
    """
    SQLModel representing a book owned by exactly one author.

    Attributes:
        id: Primary key assigned by the database on insert
        title: Book title
        pages: Number of pages, at least 1
        date_created: Insert timestamp assigned by the database
        author_id: Foreign key to ``author.id``
    """

    __tablename__ = "book"
    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    pages: int = Field(nullable=False)
    date_created: datetime | None = Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": func.now()},
    )
    author_id: int = Field(foreign_key="author.id", nullable=False, index=True)
