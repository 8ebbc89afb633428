"""
Commands for the Author/Book aggregate.

Example:
    ```python
    from bookshelf.commands.author_commands import (
        AddBookToAuthorCommand,
        SaveBookInput,
    )
    from bookshelf.commands.base import validate_input

    async with async_session() as session:
        command = AddBookToAuthorCommand(
            AuthorRepository(session), BookRepository(session)
        )
        input_data = validate_input(
            SaveBookInput, author_id=1, title="Carrie", pages=199
        )
        await command.execute(input_data)
        await session.commit()
    ```
"""

from pydantic import BaseModel, Field

from bookshelf.commands.base import BaseCommand, NonBlankStr
from bookshelf.exceptions import NotFoundError
from bookshelf.logging import logger
from bookshelf.models.author import Author
from bookshelf.models.book import Book
from bookshelf.repositories.author_repository import AuthorRepository
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.schemas.author import AuthorView
from bookshelf.utils.view_mapper import author_to_view


# ============================================================================
# Input Models
# ============================================================================


class CreateAuthorInput(BaseModel):
    """Input model for creating an author."""

    name: NonBlankStr = Field(..., description="Author name")


class SaveBookInput(BaseModel):
    """Input model for attaching a book to an author."""

    author_id: int = Field(..., description="ID of the owning author")
    title: NonBlankStr = Field(..., description="Book title")
    pages: int = Field(..., ge=1, description="Number of pages")


class FindAuthorByNameInput(BaseModel):
    """Input model for looking an author up by name."""

    name: NonBlankStr = Field(..., description="Exact author name")


# ============================================================================
# Commands
# ============================================================================


class CreateAuthorCommand(BaseCommand[CreateAuthorInput, AuthorView]):
    """
    Command to create a new author.

    Names are not unique; creating the same name twice yields two authors.
    """

    def __init__(self, repository: AuthorRepository):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: CreateAuthorInput) -> AuthorView:
        """
        Execute command to create author.

        Args:
            input_data: Author data to create.

        Returns:
            The new author with its generated ID and no books.
        """
        author = await self.repository.create(Author(name=input_data.name))
        logger.info(f"Created author {author.id}")
        return author_to_view(author)


class AddBookToAuthorCommand(BaseCommand[SaveBookInput, None]):
    """
    Command to attach a new book to an existing author.

    The author row is looked up (and locked where the database supports
    it) before the book is inserted. If the author still disappears in
    between, the foreign key makes the insert fail with
    ReferentialIntegrityError and no orphan book is written.
    """

    def __init__(
        self,
        author_repository: AuthorRepository,
        book_repository: BookRepository,
    ):
        """
        Initialize command with repositories sharing one session.

        Args:
            author_repository: Author repository for the existence check.
            book_repository: Book repository for the insert.
        """
        self.author_repository = author_repository
        self.book_repository = book_repository

    async def execute(self, input_data: SaveBookInput) -> None:
        """
        Execute command to attach the book.

        Args:
            input_data: Book data and owning author ID.

        Raises:
            NotFoundError: If the author does not exist.
            ReferentialIntegrityError: If the author vanished before insert.
        """
        author = await self.author_repository.get_for_update(
            input_data.author_id
        )
        if author is None:
            raise NotFoundError(
                f"Author with ID {input_data.author_id} not found",
                details={"author_id": input_data.author_id},
            )

        book = await self.book_repository.create(
            Book(
                title=input_data.title,
                pages=input_data.pages,
                author_id=author.id,
            )
        )
        logger.info(f"Added book {book.id} to author {author.id}")


class FindAuthorByNameCommand(
    BaseCommand[FindAuthorByNameInput, AuthorView | None]
):
    """
    Command to find an author with all of its books.

    Absence is a normal outcome and is returned as None.
    """

    def __init__(self, repository: AuthorRepository):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(
        self, input_data: FindAuthorByNameInput
    ) -> AuthorView | None:
        """
        Execute command to find the author.

        Args:
            input_data: Exact name to look for.

        Returns:
            AuthorView with its books, or None if no author has that name.
        """
        found = await self.repository.get_with_books_by_name(input_data.name)
        if found is None:
            return None

        author, books = found
        return author_to_view(author, books)
