"""
core/maps.py – MapsClient class.
Responsibility: talk to Google Geocoding / Places (nearby search, details).
Returns domain models; knows nothing about ranking or formatting.
"""
import logging
from typing import Any, Optional

import httpx

from ..models import Candidate, Coordinate

logger = logging.getLogger(__name__)

_BASE_URL = "https://maps.googleapis.com/maps/api"
_OK_STATUSES = {"OK", "ZERO_RESULTS"}


class MapsError(RuntimeError):
    """Transport failure, non-2xx response, or a provider error status."""


class MapsClient:
    """Async wrapper over the Google Maps web services."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 5.0,
        language: str = "en",
        region: str = "jp",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._key      = api_key
        self._language = language
        self._region   = region
        self._client   = httpx.AsyncClient(base_url=_BASE_URL, timeout=timeout, transport=transport)

    # ── Public API ─────────────────────────────────────────────────────────────

    async def geocode(self, address: str) -> Optional[Coordinate]:
        """First result's coordinate, or None when nothing usable comes back."""
        payload = await self._get_json(
            "/geocode/json", {"address": address, "region": self._region}
        )
        results = payload.get("results")
        if not isinstance(results, list) or not results:
            logger.info("geocode: no results for %r", address)
            return None
        return self._parse_location(results[0])

    async def nearby_search(self, location: Coordinate, radius: int, keyword: str) -> list[Candidate]:
        """Restaurants around `location` matching `keyword`. [] on zero results."""
        payload = await self._get_json(
            "/place/nearbysearch/json",
            {
                "location": f"{location.lat},{location.lng}",
                "radius": str(radius),
                "type": "restaurant",
                "keyword": keyword,
                "language": self._language,
                "region": self._region,
            },
        )
        results = payload.get("results")
        if not isinstance(results, list):
            return []
        return [self._to_candidate(r) for r in results if isinstance(r, dict)]

    async def place_details(self, place_id: str, fields: str = "reviews") -> dict[str, Any]:
        """Place Details `result` object. Anything but status OK raises MapsError."""
        payload = await self._get_json(
            "/place/details/json",
            {"place_id": place_id, "fields": fields, "language": self._language},
        )
        status = payload.get("status")
        if status and status != "OK":
            raise MapsError(f"place_details status={status}")
        result = payload.get("result")
        return result if isinstance(result, dict) else {}

    async def aclose(self) -> None:
        await self._client.aclose()

    # ── Private helpers ────────────────────────────────────────────────────────

    async def _get_json(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        try:
            response = await self._client.get(path, params={**params, "key": self._key})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.error("%s failed: %s", path, type(e).__name__)
            raise MapsError(f"{path}: {type(e).__name__}") from e
        except ValueError as e:
            logger.error("%s returned invalid JSON", path)
            raise MapsError(f"{path}: invalid JSON") from e

        if not isinstance(payload, dict):
            raise MapsError(f"{path}: unexpected payload")
        status = payload.get("status")
        if status and status not in _OK_STATUSES:
            logger.error("%s failed: status=%s, error_message=%s", path, status, payload.get("error_message"))
            raise MapsError(payload.get("error_message") or status)
        return payload

    @staticmethod
    def _parse_location(raw: Any) -> Optional[Coordinate]:
        geometry = raw.get("geometry") if isinstance(raw, dict) else None
        loc = geometry.get("location") if isinstance(geometry, dict) else None
        if not isinstance(loc, dict):
            return None
        lat, lng = loc.get("lat"), loc.get("lng")
        if not _is_number(lat) or not _is_number(lng):
            return None
        return Coordinate(lat=lat, lng=lng)

    @classmethod
    def _to_candidate(cls, raw: dict[str, Any]) -> Candidate:
        rating = raw.get("rating")
        if not _is_number(rating) or not 1.0 <= rating <= 5.0:
            rating = None
        count = raw.get("user_ratings_total")
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            count = None
        return Candidate(
            place_id=_text(raw.get("place_id")),
            name=_text(raw.get("name")) or "",
            rating=rating,
            rating_count=count,
            location=cls._parse_location(raw),
            vicinity=_text(raw.get("vicinity")),
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None
