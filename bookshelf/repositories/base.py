"""
Base repository with common CRUD operations.

The Repository pattern separates data access logic from business logic,
making it easier to test and maintain. Repositories encapsulate all
database operations for a specific entity and never validate input; that
happens once, before a command reaches them.

Example:
    ```python
    from bookshelf.repositories.base import BaseRepository
    from bookshelf.models.author import Author


    class AuthorRepository(BaseRepository[Author]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Author)

        async def get_by_name(self, name: str) -> Author | None:
            stmt = select(Author).where(Author.name == name)
            result = await self.session.exec(stmt)
            return result.first()
    ```
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookshelf.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Each repository operates on a single model type and on the session it
    was given, so every repository built from the same session shares one
    transaction.

    Type Parameters:
        T: The SQLModel type this repository manages.

    Attributes:
        session: The database session (unit of work) for executing queries.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """
        Initialize repository with session and model.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
        """
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        return await self.session.get(self.model, id)

    async def get_all(self, **filters: Any) -> list[T]:
        """
        Get all entities matching the provided filters.

        Args:
            **filters: Field name and value pairs to filter by.
                Example: get_all(name="John")

        Returns:
            List of entities matching all filters, ordered by primary key.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = select(self.model)
            for key, value in filters.items():
                if value is not None:
                    stmt = stmt.where(getattr(self.model, key) == value)
            stmt = stmt.order_by(self.model.id)
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise

    async def create(self, entity: T) -> T:
        """
        Insert a new entity.

        The session is flushed and the entity refreshed so that values
        assigned by the database (primary key, timestamps) are populated.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    async def delete_all(self) -> int:
        """
        Delete every row of this model.

        Administrative and test cleanup only; not exposed over HTTP.

        Returns:
            Number of deleted rows.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            result = await self.session.exec(sa_delete(self.model))
            await self.session.flush()
            return result.rowcount
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting all {self.model.__name__}: {e}")
            raise

    async def count(self) -> int:
        """
        Count all rows of this model.

        Returns:
            Number of rows.
        """
        result = await self.session.exec(
            select(func.count()).select_from(self.model)
        )
        return result.one()
