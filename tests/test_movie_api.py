"""Tests for GET /movies/by-title."""

import pytest
from fastapi.testclient import TestClient

from bookshelf.dependencies import get_omdb_manager
from tests.mocks.omdb_mocks import (
    INVALID_KEY_RESPONSE,
    NOT_FOUND_RESPONSE,
    STAR_WARS_RESPONSE,
    create_mock_omdb_manager,
    json_transport,
)


@pytest.fixture
def client_for(app):
    """
    Build a test client whose OMDb client answers with a fixed payload.

    Returns:
        Callable taking (payload, status_code) and returning a TestClient.
    """

    def make(payload, status_code=200):
        manager = create_mock_omdb_manager(
            json_transport(payload, status_code=status_code)
        )
        app.dependency_overrides[get_omdb_manager] = lambda: manager
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


def test_find_movie(client_for):
    client = client_for(STAR_WARS_RESPONSE)

    response = client.get("/movies/by-title", params={"title": "Star Wars"})

    assert response.status_code == 200
    assert response.json() == {
        "title": "Star Wars: Episode IV - A New Hope",
        "year": "1977",
    }


def test_movie_not_found(client_for):
    client = client_for(NOT_FOUND_RESPONSE)

    response = client.get("/movies/by-title", params={"title": "zzzzzz"})

    assert response.status_code == 404
    assert response.json()["error"]["details"] == {"title": "zzzzzz"}


def test_upstream_error(client_for):
    client = client_for(INVALID_KEY_RESPONSE)

    response = client.get("/movies/by-title", params={"title": "Carrie"})

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "upstream_error"


def test_upstream_server_error(client_for):
    client = client_for({}, status_code=503)

    response = client.get("/movies/by-title", params={"title": "Carrie"})

    assert response.status_code == 502


@pytest.mark.parametrize("params", [{}, {"title": ""}, {"title": "  "}])
def test_missing_title(client_for, params):
    client = client_for(STAR_WARS_RESPONSE)

    response = client.get("/movies/by-title", params=params)

    assert response.status_code == 400


def test_correlation_id_is_echoed(client_for):
    client = client_for(STAR_WARS_RESPONSE)

    response = client.get(
        "/movies/by-title",
        params={"title": "Star Wars"},
        headers={"X-Correlation-ID": "abcdef1234"},
    )

    assert response.headers["X-Correlation-ID"] == "abcdef12"
