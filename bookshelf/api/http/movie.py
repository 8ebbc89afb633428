"""Movie lookup endpoint, a pass-through to the OMDb API."""

from fastapi import APIRouter, Query

from bookshelf.commands.base import validate_input
from bookshelf.commands.movie_commands import (
    FindMovieByTitleCommand,
    FindMovieByTitleInput,
)
from bookshelf.dependencies import MovieLookupDep
from bookshelf.exceptions import NotFoundError
from bookshelf.schemas.errors import HTTPErrorResponse
from bookshelf.schemas.movie import Movie
from bookshelf.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get(
    "/by-title",
    response_model=Movie,
    summary="Find a movie by title",
    responses={
        400: {"model": HTTPErrorResponse},
        404: {"model": HTTPErrorResponse},
        502: {"model": HTTPErrorResponse},
    },
)
@handle_http_errors
async def find_movie_by_title(
    lookup: MovieLookupDep,
    title: str | None = Query(default=None, description="Movie title"),
) -> Movie:
    """
    Return the title and year of the first OMDb match.

    Example:
        GET /movies/by-title?title=Carrie
    """
    input_data = validate_input(FindMovieByTitleInput, title=title)
    movie = await FindMovieByTitleCommand(lookup).execute(input_data)
    if movie is None:
        raise NotFoundError(
            f"Movie '{input_data.title}' not found",
            details={"title": input_data.title},
        )
    return movie
