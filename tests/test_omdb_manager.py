"""
Tests for the OMDb client.

Requests never leave the process: every test plugs an httpx.MockTransport
into the manager.
"""

import httpx
import pytest

from bookshelf.exceptions import UpstreamError
from bookshelf.managers.omdb_manager import OmdbManager
from bookshelf.protocols import MovieLookup
from bookshelf.schemas.movie import Movie
from tests.mocks.omdb_mocks import (
    INVALID_KEY_RESPONSE,
    MOCK_OMDB_URL,
    NOT_FOUND_RESPONSE,
    STAR_WARS_RESPONSE,
    create_mock_omdb_manager,
    json_transport,
    raw_transport,
)


class TestFindMovieByTitle:
    """Tests for OmdbManager.find_movie_by_title."""

    @pytest.mark.asyncio
    async def test_match_keeps_title_and_year(self):
        """Test that only Title and Year survive the full payload."""
        manager = create_mock_omdb_manager(json_transport(STAR_WARS_RESPONSE))

        movie = await manager.find_movie_by_title("Star Wars")

        assert movie == Movie(
            title="Star Wars: Episode IV - A New Hope", year="1977"
        )
        assert movie.model_dump() == {
            "title": "Star Wars: Episode IV - A New Hope",
            "year": "1977",
        }

    @pytest.mark.asyncio
    async def test_title_is_sent_as_t_parameter(self):
        """Test the request shape without an API key."""
        requests = []
        manager = create_mock_omdb_manager(
            json_transport(STAR_WARS_RESPONSE, requests=requests)
        )

        await manager.find_movie_by_title("Star Wars")

        assert len(requests) == 1
        request = requests[0]
        assert request.method == "GET"
        assert str(request.url).startswith(MOCK_OMDB_URL)
        assert dict(request.url.params) == {"t": "Star Wars"}

    @pytest.mark.asyncio
    async def test_api_key_is_sent_when_configured(self):
        """Test that a configured key is passed as apikey."""
        requests = []
        manager = OmdbManager(
            base_url=MOCK_OMDB_URL,
            api_key="secret",
            transport=json_transport(STAR_WARS_RESPONSE, requests=requests),
        )

        await manager.find_movie_by_title("Carrie")

        assert requests[0].url.params["apikey"] == "secret"

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self):
        """Test that OMDb's 'Movie not found!' is a normal absence."""
        manager = create_mock_omdb_manager(json_transport(NOT_FOUND_RESPONSE))

        assert await manager.find_movie_by_title("zzzzzz") is None

    @pytest.mark.asyncio
    async def test_other_omdb_error_raises(self):
        """Test that an invalid key is an upstream failure, not a miss."""
        manager = create_mock_omdb_manager(json_transport(INVALID_KEY_RESPONSE))

        with pytest.raises(UpstreamError) as exc_info:
            await manager.find_movie_by_title("Carrie")

        assert exc_info.value.details == {"error": "Invalid API key!"}

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        """Test that a non-2xx response is an upstream failure."""
        manager = create_mock_omdb_manager(
            json_transport({"Response": "False"}, status_code=500)
        )

        with pytest.raises(UpstreamError):
            await manager.find_movie_by_title("Carrie")

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        """Test that an HTML error page is an upstream failure."""
        manager = create_mock_omdb_manager(
            raw_transport(
                lambda request: httpx.Response(200, content=b"<html>oops</html>")
            )
        )

        with pytest.raises(UpstreamError):
            await manager.find_movie_by_title("Carrie")

    @pytest.mark.asyncio
    async def test_json_array_raises(self):
        """Test that a JSON body that is not an object is rejected."""
        manager = create_mock_omdb_manager(json_transport([1, 2, 3]))

        with pytest.raises(UpstreamError):
            await manager.find_movie_by_title("Carrie")

    @pytest.mark.asyncio
    async def test_missing_year_raises(self):
        """Test that a match without a year is rejected."""
        manager = create_mock_omdb_manager(
            json_transport({"Title": "Carrie", "Response": "True"})
        )

        with pytest.raises(UpstreamError):
            await manager.find_movie_by_title("Carrie")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
        ],
    )
    async def test_transport_errors_raise(self, error):
        """Test that network failures are upstream failures."""

        def handler(request):
            raise error

        manager = create_mock_omdb_manager(raw_transport(handler))

        with pytest.raises(UpstreamError):
            await manager.find_movie_by_title("Carrie")

    @pytest.mark.asyncio
    async def test_no_retry(self):
        """Test that a failed request is made exactly once."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        manager = create_mock_omdb_manager(raw_transport(handler))

        with pytest.raises(UpstreamError):
            await manager.find_movie_by_title("Carrie")

        assert len(calls) == 1


def test_defaults_come_from_settings():
    manager = OmdbManager()

    assert manager.base_url == "http://www.omdbapi.com/"
    assert manager.timeout == 5.0
    assert isinstance(manager, MovieLookup)
