from pydantic import BaseModel, Field

from bookshelf.commands.base import BaseCommand, NonBlankStr
from bookshelf.protocols import MovieLookup
from bookshelf.schemas.movie import Movie


class FindMovieByTitleInput(BaseModel):
    """Input model for a movie lookup."""

    title: NonBlankStr = Field(..., description="Free-text movie title")


class FindMovieByTitleCommand(BaseCommand[FindMovieByTitleInput, Movie | None]):
    """
    Command to look a movie up in the external catalogue.

    Independent of the author/book aggregate; it never touches the database.
    """

    def __init__(self, lookup: MovieLookup):
        self.lookup = lookup

    async def execute(self, input_data: FindMovieByTitleInput) -> Movie | None:
        return await self.lookup.find_movie_by_title(input_data.title)
