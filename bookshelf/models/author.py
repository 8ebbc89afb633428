from datetime import datetime

from sqlalchemy import func
from sqlmodel import Field

from bookshelf.models.base import BaseModel


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    Books reference their author through ``Book.author_id``; the author
    itself keeps no collection. Use AuthorRepository for all database
    operations.

    Attributes:
        id: Primary key assigned by the database on insert
        name: Display name of the author
        date_created: Insert timestamp assigned by the database
    """

    __tablename__ = "author"
    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    date_created: datetime | None = Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": func.now()},
    )
