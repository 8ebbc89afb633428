from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from bookshelf.exceptions import UpstreamError
from bookshelf.logging import logger
from bookshelf.schemas.movie import Movie
from bookshelf.settings import app_settings


class OmdbManager:
    """
    Client for the OMDb movie API (http://www.omdbapi.com/).

    Every lookup is a single ``GET <base_url>?t=<title>`` request. There is
    no retry and no caching.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API endpoint. Defaults to app_settings.OMDB_BASE_URL.
            api_key: API key sent as ``apikey``. Defaults to
                app_settings.OMDB_API_KEY; omitted from the request when unset.
            timeout: Request timeout in seconds. Defaults to
                app_settings.OMDB_TIMEOUT.
            transport: Optional httpx transport, used by tests to mock the API.
        """
        if api_key is None and app_settings.OMDB_API_KEY is not None:
            api_key = app_settings.OMDB_API_KEY.get_secret_value()

        self.base_url = base_url or app_settings.OMDB_BASE_URL
        self.api_key = api_key
        self.timeout = timeout if timeout is not None else app_settings.OMDB_TIMEOUT
        self.transport = transport

    def _params(self, title: str) -> dict[str, str]:
        params = {"t": title}
        if self.api_key:
            params["apikey"] = self.api_key
        return params

    async def _fetch(self, title: str) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(
                    self.base_url, params=self._params(title)
                )
                response.raise_for_status()
        except httpx.HTTPError as ex:
            logger.error(f"Movie API request failed: {ex}")
            raise UpstreamError("Movie API request failed") from ex

        try:
            return response.json()
        except ValueError as ex:
            logger.error(f"Movie API returned a non-JSON body: {ex}")
            raise UpstreamError("Movie API returned an invalid response") from ex

    async def find_movie_by_title(self, title: str) -> Movie | None:
        """
        Look a movie up by title.

        Only ``Title`` and ``Year`` are taken from the response.

        Args:
            title: Free-text movie title.

        Returns:
            The movie, or None when OMDb reports that nothing matched.

        Raises:
            UpstreamError: On transport errors, non-2xx responses, bodies
                that are not JSON objects, OMDb errors other than "not found"
                (invalid key, request limit...) and matches without a
                title or year.
        """
        payload = await self._fetch(title)
        if not isinstance(payload, dict):
            raise UpstreamError("Movie API returned an invalid response")

        if payload.get("Response") == "False":
            error = str(payload.get("Error", ""))
            if "not found" in error.lower():
                logger.info(f"No movie found for title '{title}'")
                return None
            logger.error(f"Movie API returned an error: {error}")
            raise UpstreamError(
                "Movie API returned an error", details={"error": error}
            )

        try:
            return Movie.model_validate(payload)
        except PydanticValidationError as ex:
            logger.error(f"Movie API response is missing fields: {ex}")
            raise UpstreamError(
                "Movie API returned an invalid response"
            ) from ex
