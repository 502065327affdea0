"""
Tests for GET /elevation.
"""

import httpx
import pytest

from tracklog.features.elevation import ElevationClient

API_URL = "https://elevation.test/v1/test-dataset"

PAYLOAD = {"results": [{"elevation": 1234.5}], "status": "OK"}


class FakeUpstream:
    def __init__(self, calls, state):
        self.calls = calls
        self.state = state

    def respond(self, response):
        self.state["response"] = response


@pytest.fixture
def upstream(app):
    """Route the app's elevation client through a mock transport."""
    calls = []
    state = {"response": httpx.Response(200, json=PAYLOAD)}

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        response = state["response"]
        if isinstance(response, Exception):
            raise response
        return response

    app.state.elevation = ElevationClient(API_URL, transport=httpx.MockTransport(handler))
    return FakeUpstream(calls, state)


class TestElevationProxy:
    """Tests for the elevation proxy endpoint."""

    def test_forwards_payload(self, client, upstream):
        response = client.get("/elevation", params={"lat": "46.5", "lon": "7.9"})

        assert response.status_code == 200
        assert response.json() == PAYLOAD
        assert upstream.calls[0].url.params["locations"] == "46.5,7.9"

    @pytest.mark.parametrize("params", [{}, {"lat": "46.5"}, {"lon": "7.9"}, {"lat": "", "lon": "7.9"}])
    def test_missing_coordinates(self, client, upstream, params):
        response = client.get("/elevation", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing lat/lon"}
        assert upstream.calls == []

    def test_upstream_error_status(self, client, upstream):
        upstream.respond(httpx.Response(429, json={"error": "Too many requests"}))

        response = client.get("/elevation", params={"lat": "1", "lon": "2"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch elevation"}

    def test_upstream_unreachable(self, client, upstream):
        upstream.respond(httpx.ConnectError("connection refused"))

        response = client.get("/elevation", params={"lat": "1", "lon": "2"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch elevation"}
