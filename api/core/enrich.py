"""
core/enrich.py – DetailEnricher class.
Responsibility: fetch review excerpts for one shortlisted venue.
Never raises: any failure means "no detail available".
"""
import logging
from typing import Any, Optional

from .maps import MapsClient, MapsError

logger = logging.getLogger(__name__)

REVIEW_CAP = 6


def extract_review_texts(details: Optional[dict[str, Any]], cap: int = REVIEW_CAP) -> list[str]:
    """Non-empty, trimmed review texts, at most `cap` of them."""
    if not details or not isinstance(details.get("reviews"), list):
        return []
    texts = [
        r["text"].strip()
        for r in details["reviews"]
        if isinstance(r, dict) and isinstance(r.get("text"), str)
    ]
    return [t for t in texts if t][:cap]


class DetailEnricher:
    """Place Details → review texts."""

    def __init__(self, maps: MapsClient, review_cap: int = REVIEW_CAP) -> None:
        self._maps = maps
        self._cap  = review_cap

    async def reviews(self, place_id: Optional[str]) -> list[str]:
        if not place_id or self._cap <= 0:
            return []
        try:
            details = await self._maps.place_details(place_id, fields="reviews")
        except MapsError as e:
            logger.warning("No reviews for %s: %s", place_id, e)
            return []
        return extract_review_texts(details, self._cap)
