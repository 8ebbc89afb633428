"""
Dependency injection configuration for FastAPI.

Collaborators are resolved through ``Depends()`` so tests can replace any
of them with ``app.dependency_overrides``.

Example:
    ```python
    from bookshelf.dependencies import AuthorRepoDep, SecurityDep

    @router.get("/authors/by-name")
    async def find_author(repo: AuthorRepoDep, security: SecurityDep):
        ...
    ```
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from bookshelf.logging import logger
from bookshelf.managers.omdb_manager import OmdbManager
from bookshelf.managers.security_manager import (
    AllowAllSecurityManager,
    SecurityManager,
)
from bookshelf.protocols import AccessPredicate, MovieLookup
from bookshelf.repositories.author_repository import AuthorRepository
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.settings import app_settings
from bookshelf.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Collaborator Dependencies
# ============================================================================


@lru_cache
def get_security_manager() -> AccessPredicate:
    """
    Get cached access predicate.

    Returns the allow-all predicate when ``MOCK_SECURITY`` is enabled.

    Returns:
        Cached access predicate instance.
    """
    if app_settings.MOCK_SECURITY:
        logger.warning("MOCK_SECURITY enabled, every caller is allowed")
        return AllowAllSecurityManager()
    return SecurityManager()


@lru_cache
def get_omdb_manager() -> MovieLookup:
    """
    Get cached OMDb client.

    Returns:
        Cached OmdbManager instance.
    """
    return OmdbManager()


SecurityDep = Annotated[AccessPredicate, Depends(get_security_manager)]
MovieLookupDep = Annotated[MovieLookup, Depends(get_omdb_manager)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get author repository bound to the request session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        AuthorRepository instance with session.
    """
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    """
    Get book repository bound to the request session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        BookRepository instance with session.
    """
    return BookRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]
