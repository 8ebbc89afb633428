"""
Protocol classes for the collaborators that are swapped in tests.

Any object implementing the methods is accepted; no inheritance needed.

Example:
    ```python
    class DenyAll:
        def can_access(self, username: str | None) -> bool:
            return False


    app.dependency_overrides[get_security_manager] = DenyAll
    ```
"""

from typing import Protocol, runtime_checkable

from bookshelf.schemas.movie import Movie


@runtime_checkable
class AccessPredicate(Protocol):
    """Decides whether a caller may use a protected endpoint."""

    def can_access(self, username: str | None) -> bool:
        """
        Check access for a caller.

        Args:
            username: Name supplied by the caller, None if absent.

        Returns:
            True if access is granted.
        """
        ...


@runtime_checkable
class MovieLookup(Protocol):
    """Looks a movie up by title in an external catalogue."""

    async def find_movie_by_title(self, title: str) -> Movie | None:
        """
        Find a movie.

        Args:
            title: Free-text movie title.

        Returns:
            The movie, or None if the catalogue has no match.

        Raises:
            UpstreamError: If the catalogue cannot be queried.
        """
        ...
