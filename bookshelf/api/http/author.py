"""
Author endpoints.

Each endpoint validates its input with ``validate_input``, runs one command
over repositories that share the request's session and maps the outcome to
an HTTP response. The session is committed by ``get_session`` once the
endpoint returns and rolled back when it raises.
"""

from fastapi import APIRouter, Query, status

from bookshelf.commands.author_commands import (
    AddBookToAuthorCommand,
    CreateAuthorCommand,
    CreateAuthorInput,
    FindAuthorByNameCommand,
    FindAuthorByNameInput,
    SaveBookInput,
)
from bookshelf.commands.base import validate_input
from bookshelf.dependencies import AuthorRepoDep, BookRepoDep, SecurityDep
from bookshelf.exceptions import AuthenticationError, NotFoundError
from bookshelf.schemas.author import (
    AuthorView,
    CreateAuthorRequest,
    SaveBookRequest,
)
from bookshelf.schemas.errors import HTTPErrorResponse
from bookshelf.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/authors", tags=["authors"])


@router.post(
    "",
    response_model=AuthorView,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    responses={400: {"model": HTTPErrorResponse}},
)
@handle_http_errors
async def create_author(
    body: CreateAuthorRequest,
    repo: AuthorRepoDep,
) -> AuthorView:
    """
    Create a new author without books.

    Example:
        POST /authors
        {
            "name": "Stephen King"
        }
    """
    input_data = validate_input(CreateAuthorInput, name=body.name)
    return await CreateAuthorCommand(repo).execute(input_data)


@router.post(
    "/{author_id}/books",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Add a book to an author",
    responses={
        400: {"model": HTTPErrorResponse},
        404: {"model": HTTPErrorResponse},
        409: {"model": HTTPErrorResponse},
    },
)
@handle_http_errors
async def add_book_to_author(
    author_id: int,
    body: SaveBookRequest,
    author_repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> None:
    """
    Attach a new book to an existing author.

    Example:
        POST /authors/1/books
        {
            "title": "Carrie",
            "pages": 199
        }
    """
    input_data = validate_input(
        SaveBookInput, author_id=author_id, title=body.title, pages=body.pages
    )
    await AddBookToAuthorCommand(author_repo, book_repo).execute(input_data)


@router.get(
    "/by-name",
    response_model=AuthorView,
    summary="Find an author and its books by exact name",
    responses={
        400: {"model": HTTPErrorResponse},
        401: {"model": HTTPErrorResponse},
        404: {"model": HTTPErrorResponse},
    },
)
@handle_http_errors
async def find_author_by_name(
    repo: AuthorRepoDep,
    security: SecurityDep,
    author: str | None = Query(default=None, description="Exact author name"),
    username: str | None = Query(
        default=None, description="Caller name checked by the access predicate"
    ),
) -> AuthorView:
    """
    Find an author by exact (case-sensitive) name.

    The caller is checked before the lookup, so a denied caller gets 401
    whether or not the author exists.

    Example:
        GET /authors/by-name?author=Stephen%20King&username=admin
    """
    if not security.can_access(username):
        raise AuthenticationError("User is not allowed to look authors up")

    input_data = validate_input(FindAuthorByNameInput, name=author)
    view = await FindAuthorByNameCommand(repo).execute(input_data)
    if view is None:
        raise NotFoundError(
            f"Author '{input_data.name}' not found",
            details={"author": input_data.name},
        )
    return view
