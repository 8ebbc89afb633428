from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """
    Movie as returned by the OMDb API.

    Only ``Title`` and ``Year`` are read from the upstream payload; every
    other field is ignored. Both stay strings because OMDb reports ranges
    such as ``"2011-2019"`` for series.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(
        ...,
        validation_alias="Title",
        description="The movie title",
        examples=["Carrie"],
    )
    year: str = Field(
        ...,
        validation_alias="Year",
        description="The movie year",
        examples=["1976"],
    )
