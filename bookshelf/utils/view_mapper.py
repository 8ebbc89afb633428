"""
Conversion of stored entities into response read models.

Pure functions: no database access, no mutation of the inputs.
"""

from collections.abc import Iterable

from bookshelf.models.author import Author
from bookshelf.models.book import Book
from bookshelf.schemas.author import AuthorView, BookView


def book_to_view(book: Book) -> BookView:
    """Project a book onto its title and page count."""
    return BookView(title=book.title, pages=book.pages)


def author_to_view(author: Author, books: Iterable[Book] = ()) -> AuthorView:
    """
    Build the author read model.

    Args:
        author: Persisted author (id must be assigned).
        books: The author's books, in the order they should be listed.

    Returns:
        AuthorView with one BookView per book; an empty list when there
        are no books.
    """
    return AuthorView(
        id=author.id,
        name=author.name,
        books=[book_to_view(book) for book in books],
    )
