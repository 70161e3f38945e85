"""
tests/test_maps.py – Unit tests for MapsClient (httpx.MockTransport, no network).
  - geocode: coordinate / not found / provider error
  - nearby_search: parsing, ZERO_RESULTS
  - place_details: status handling
"""
import httpx
import pytest

from api.core.maps import MapsClient, MapsError
from api.models import Coordinate


def make_client(handler) -> tuple[MapsClient, list[httpx.Request]]:
    calls: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    return MapsClient(api_key="key", transport=httpx.MockTransport(_record)), calls


def respond(payload, status_code=200):
    return lambda request: httpx.Response(status_code, json=payload)


class TestGeocode:

    @pytest.mark.asyncio
    async def test_first_result(self):
        client, calls = make_client(respond({"status": "OK", "results": [
            {"geometry": {"location": {"lat": 35.69, "lng": 139.70}}},
            {"geometry": {"location": {"lat": 0.0, "lng": 0.0}}},
        ]}))
        loc = await client.geocode("Shinjuku station, Japan")
        assert loc == Coordinate(lat=35.69, lng=139.70)
        req = calls[0]
        assert req.url.path == "/maps/api/geocode/json"
        assert req.url.params["address"] == "Shinjuku station, Japan"
        assert req.url.params["region"] == "jp"
        assert req.url.params["key"] == "key"

    @pytest.mark.asyncio
    async def test_zero_results_is_none(self):
        client, _ = make_client(respond({"status": "ZERO_RESULTS", "results": []}))
        assert await client.geocode("Nowhere station, Japan") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("first", [
        {},
        {"geometry": {}},
        {"geometry": {"location": {"lat": "35", "lng": 139.7}}},
        "not-a-dict",
    ])
    async def test_malformed_is_none(self, first):
        client, _ = make_client(respond({"status": "OK", "results": [first]}))
        assert await client.geocode("x") is None

    @pytest.mark.asyncio
    async def test_provider_error_raises(self):
        client, _ = make_client(respond({"status": "REQUEST_DENIED", "error_message": "bad key"}))
        with pytest.raises(MapsError, match="bad key"):
            await client.geocode("x")

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        client, _ = make_client(respond({}, status_code=503))
        with pytest.raises(MapsError):
            await client.geocode("x")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def boom(request):
            raise httpx.ConnectError("boom", request=request)
        client, _ = make_client(boom)
        with pytest.raises(MapsError):
            await client.geocode("x")

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        client, _ = make_client(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(MapsError, match="invalid JSON"):
            await client.geocode("x")


class TestNearbySearch:

    @pytest.mark.asyncio
    async def test_params_and_parsing(self):
        client, calls = make_client(respond({"status": "OK", "results": [
            {"place_id": "A", "name": "Fuunji", "rating": 4.5, "user_ratings_total": 3000,
             "vicinity": "Yoyogi", "geometry": {"location": {"lat": 35.68, "lng": 139.69}}},
            {"name": "No Rating Shop"},
            {"place_id": "", "name": "Odd", "rating": "4.9", "user_ratings_total": -1},
            {"place_id": "C", "name": "Too High", "rating": 7},
        ]}))
        places = await client.nearby_search(Coordinate(lat=35.69, lng=139.70), 1200, "ramen")

        params = calls[0].url.params
        assert calls[0].url.path == "/maps/api/place/nearbysearch/json"
        assert params["location"] == "35.69,139.7"
        assert params["radius"] == "1200"
        assert params["type"] == "restaurant"
        assert params["keyword"] == "ramen"
        assert params["language"] == "en"

        assert [p.name for p in places] == ["Fuunji", "No Rating Shop", "Odd", "Too High"]
        first = places[0]
        assert first.place_id == "A"
        assert first.rating == 4.5
        assert first.rating_count == 3000
        assert first.location == Coordinate(lat=35.68, lng=139.69)
        assert places[1].rating is None and places[1].location is None
        assert places[2].place_id is None
        assert places[2].rating is None and places[2].rating_count is None
        assert places[3].rating is None

    @pytest.mark.asyncio
    async def test_zero_results(self):
        client, _ = make_client(respond({"status": "ZERO_RESULTS", "results": []}))
        assert await client.nearby_search(Coordinate(lat=1, lng=2), 1200, "ramen") == []

    @pytest.mark.asyncio
    async def test_over_query_limit_raises(self):
        client, _ = make_client(respond({"status": "OVER_QUERY_LIMIT"}))
        with pytest.raises(MapsError):
            await client.nearby_search(Coordinate(lat=1, lng=2), 1200, "ramen")


class TestPlaceDetails:

    @pytest.mark.asyncio
    async def test_ok(self):
        client, calls = make_client(respond({"status": "OK", "result": {"reviews": [{"text": "yum"}]}}))
        result = await client.place_details("A")
        assert result == {"reviews": [{"text": "yum"}]}
        assert calls[0].url.params["fields"] == "reviews"
        assert calls[0].url.params["place_id"] == "A"

    @pytest.mark.asyncio
    async def test_not_ok_raises(self):
        client, _ = make_client(respond({"status": "ZERO_RESULTS"}))
        with pytest.raises(MapsError):
            await client.place_details("A")
