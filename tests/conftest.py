"""tests/conftest.py – shared fixtures for all tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from api.core.config import Settings
from api.models import Candidate, Coordinate

SHINJUKU = Coordinate(lat=35.6896, lng=139.7006)


def make_candidate(**kw) -> Candidate:
    defaults = dict(
        place_id="pid-1", name="Ramen Test", rating=4.2, rating_count=120,
        location=Coordinate(lat=35.6910, lng=139.7020), vicinity="Nishishinjuku",
    )
    defaults.update(kw)
    return Candidate(**defaults)


def make_rated(ratings: list[float | None]) -> list[Candidate]:
    """One candidate per rating, ids 'p0', 'p1', ... in input order."""
    return [
        make_candidate(place_id=f"p{i}", name=f"Shop {i}", rating=r, rating_count=10 * i)
        for i, r in enumerate(ratings)
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(maps_api_key="maps-key", insight_mode="keyword")


@pytest.fixture
def sample_candidates() -> list[Candidate]:
    return [
        make_candidate(place_id="p1", name="Fuunji", rating=4.5, rating_count=3000),
        make_candidate(place_id="p2", name="Menya Musashi", rating=4.1, rating_count=2500),
        make_candidate(place_id=None, name="Ramen Nagi", rating=4.3, rating_count=800, location=None),
    ]


@pytest.fixture
def mock_maps(sample_candidates):
    """MapsClient stand-in: Shinjuku resolves, three ramen shops nearby."""
    m = MagicMock()
    m.geocode       = AsyncMock(return_value=SHINJUKU)
    m.nearby_search = AsyncMock(return_value=sample_candidates)
    m.place_details = AsyncMock(return_value={"reviews": [{"text": "Delicious rich broth, friendly staff."}]})
    m.aclose        = AsyncMock()
    return m
