"""
Repository for Book entity.

Books are only ever inserted for an existing author. The foreign key on
``book.author_id`` is the final guard: a violation is reported as
ReferentialIntegrityError instead of a raw database error.
"""

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookshelf.exceptions import ReferentialIntegrityError
from bookshelf.logging import logger
from bookshelf.models.book import Book
from bookshelf.repositories.base import BaseRepository


def is_foreign_key_violation(ex: IntegrityError) -> bool:
    """
    Tell whether an IntegrityError was caused by a foreign key constraint.

    Works for asyncpg ("violates foreign key constraint") and SQLite
    ("FOREIGN KEY constraint failed") messages.
    """
    return "foreign key" in str(ex.orig).lower()


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        """
        Initialize Book repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Book)

    async def create(self, entity: Book) -> Book:
        """
        Insert a book.

        Args:
            entity: Book bound to an existing author through author_id.

        Returns:
            The created book with id and date_created populated.

        Raises:
            ReferentialIntegrityError: If author_id names no existing author.
            SQLAlchemyError: For any other database failure.
        """
        try:
            return await super().create(entity)
        except IntegrityError as ex:
            if not is_foreign_key_violation(ex):
                raise
            logger.warning(
                f"Rejected book for missing author {entity.author_id}"
            )
            raise ReferentialIntegrityError(
                f"Author with ID {entity.author_id} does not exist",
                details={"author_id": entity.author_id},
            ) from ex

    async def get_by_author_id(self, author_id: int) -> list[Book]:
        """
        Get all books of an author, in ascending ID order.

        Args:
            author_id: ID of the owning author.

        Returns:
            List of books, empty if the author has none.
        """
        stmt = (
            select(Book).where(Book.author_id == author_id).order_by(Book.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
