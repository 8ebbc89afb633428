"""
Administrative CLI.

Example:
    bookshelf init-db
    bookshelf purge --yes
    bookshelf find-movie "Carrie"
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bookshelf.commands.base import validate_input
from bookshelf.commands.movie_commands import (
    FindMovieByTitleCommand,
    FindMovieByTitleInput,
)
from bookshelf.exceptions import AppException
from bookshelf.managers.omdb_manager import OmdbManager
from bookshelf.repositories.author_repository import AuthorRepository
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.storage.db import async_session, create_tables

typer_app = typer.Typer(
    name="bookshelf",
    help="Bookshelf administration CLI",
    add_completion=False,
)
console = Console()


async def purge_all(session_factory=async_session) -> tuple[int, int]:
    """
    Delete every book and then every author in one transaction.

    Books go first so no foreign key is ever left dangling.

    Args:
        session_factory: Callable returning an AsyncSession context manager.

    Returns:
        Tuple of (deleted books, deleted authors).
    """
    async with session_factory() as session:
        books = await BookRepository(session).delete_all()
        authors = await AuthorRepository(session).delete_all()
        await session.commit()
    return books, authors


@typer_app.command(name="init-db")
def init_db():
    """Create the author and book tables if they do not exist."""
    asyncio.run(create_tables())
    console.print("[green]✓[/green] Tables created")


@typer_app.command(name="purge")
def purge(
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Do not ask for confirmation"
    ),
):
    """
    Delete all authors and books.

    Example:
        bookshelf purge --yes
    """
    if not yes and not typer.confirm("Delete ALL authors and books?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(code=0)

    books, authors = asyncio.run(purge_all())
    console.print(
        f"[green]✓[/green] Deleted [bold]{books}[/bold] books and "
        f"[bold]{authors}[/bold] authors"
    )


@typer_app.command(name="find-movie")
def find_movie(title: str = typer.Argument(..., help="Movie title")):
    """Look a movie up on OMDb and print its title and year."""
    try:
        input_data = validate_input(FindMovieByTitleInput, title=title)
        command = FindMovieByTitleCommand(OmdbManager())
        movie = asyncio.run(command.execute(input_data))
    except AppException as ex:
        console.print(f"[red]✗[/red] {ex.message}")
        raise typer.Exit(code=1)

    if movie is None:
        console.print(f"[yellow]No movie found for[/yellow] '{title}'")
        raise typer.Exit(code=1)

    console.print(
        Panel.fit("[bold cyan]OMDb match[/bold cyan]", border_style="cyan")
    )
    table = Table("Title", "Year")
    table.add_row(movie.title, movie.year)
    console.print(table)


def main():
    typer_app()


if __name__ == "__main__":
    main()
