"""
Base command for encapsulating business operations.

The Command pattern encapsulates business logic as objects that depend only
on repositories, so they can be tested in isolation and reused from the HTTP
layer, the CLI or a test.

Example:
    ```python
    class CreateAuthorCommand(BaseCommand[CreateAuthorInput, AuthorView]):
        def __init__(self, repository: AuthorRepository):
            self.repository = repository

        async def execute(self, input_data: CreateAuthorInput) -> AuthorView:
            author = await self.repository.create(Author(name=input_data.name))
            return author_to_view(author)


    # Usage in HTTP handler
    @router.post("/authors")
    async def create_author(body: CreateAuthorRequest, repo: AuthorRepoDep):
        input_data = validate_input(CreateAuthorInput, name=body.name)
        return await CreateAuthorCommand(repo).execute(input_data)
    ```
"""

from abc import ABC, abstractmethod
from typing import Annotated, Any, Generic, Type, TypeVar

from pydantic import AfterValidator, BaseModel
from pydantic import ValidationError as PydanticValidationError

from bookshelf.exceptions import ValidationError

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")
TModel = TypeVar("TModel", bound=BaseModel)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Text that must contain at least one non-whitespace character
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


def validate_input(model: Type[TModel], **data: Any) -> TModel:
    """
    Build a command input model from raw values.

    This is the single validation point of the application: nothing
    reaches a repository without passing through here.

    Args:
        model: Input model class to instantiate.
        **data: Raw field values.

    Returns:
        The validated input model.

    Raises:
        ValidationError: If any field is missing or invalid. ``details``
            lists every failing field.

    Example:
        ```python
        validate_input(CreateAuthorInput, name="")
        # ValidationError: name: Value error, must not be blank
        ```
    """
    try:
        return model(**data)
    except PydanticValidationError as ex:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "msg": error["msg"],
            }
            for error in ex.errors()
        ]
        message = "; ".join(f"{e['field']}: {e['msg']}" for e in errors)
        raise ValidationError(message, details={"errors": errors}) from ex


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands keep no state of their own beyond the repositories they are
    given. All repositories handed to one command must share the same
    session so the command runs inside a single unit of work.

    Type Parameters:
        TInput: Input data type (a validated Pydantic model).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Validated input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            NotFoundError: When a referenced entity does not exist.
            ReferentialIntegrityError: When the store rejects a reference.
        """
        pass
