"""
Base model for all database tables.

Includes SQLAlchemy's AsyncAttrs mixin so lazy attributes can be awaited
through ``awaitable_attrs`` instead of raising MissingGreenlet in async code.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async attribute support.

    Table models do not declare ORM relationships. Associations are plain
    foreign-key columns and joined views are built by repository queries.

    Example:
        class Book(BaseModel, table=True):
            id: int | None = Field(default=None, primary_key=True)
            title: str
            author_id: int = Field(foreign_key="author.id")
    """

    pass
