"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from bookshelf.repositories.author_repository import AuthorRepository
    from bookshelf.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        author = await repo.get_by_name("Stephen King")
        found = await repo.get_with_books_by_name("Stephen King")
        if found:
            author, books = found
    ```
"""

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookshelf.models.author import Author
from bookshelf.models.book import Book
from bookshelf.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Name lookups are exact matches and use the database's default
    collation, which is case-sensitive on both PostgreSQL and SQLite.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)

    async def get_by_name(self, name: str) -> Author | None:
        """
        Get author by exact name match.

        Names are not unique; the oldest matching author wins.

        Args:
            name: Exact author name to search for.

        Returns:
            Author if found, None otherwise.
        """
        stmt = select(Author).where(Author.name == name).order_by(Author.id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_for_update(self, author_id: int) -> Author | None:
        """
        Get author by ID and lock its row until the transaction ends.

        Keeps a concurrent transaction from deleting the author between
        the lookup and a dependent insert. Dialects without row locks
        (SQLite) ignore the lock and rely on the foreign key alone.

        Args:
            author_id: Primary key value.

        Returns:
            Author if found, None otherwise.
        """
        return await self.session.get(Author, author_id, with_for_update=True)

    async def get_with_books_by_name(
        self, name: str
    ) -> tuple[Author, list[Book]] | None:
        """
        Get an author and all of its books in a single query.

        Uses a LEFT OUTER JOIN so an author without books still matches.
        Books come back in ascending ID order.

        Args:
            name: Exact author name to search for.

        Returns:
            Tuple of the author and its books, or None if no author matches.
        """
        stmt = (
            select(Author, Book)
            .outerjoin(Book, Book.author_id == Author.id)
            .where(Author.name == name)
            .order_by(Author.id, Book.id)
        )
        result = await self.session.exec(stmt)
        rows = result.all()
        if not rows:
            return None

        author = rows[0][0]
        books = [
            book
            for row_author, book in rows
            if book is not None and row_author.id == author.id
        ]
        return author, books
