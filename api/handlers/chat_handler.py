"""
handlers/chat_handler.py – ChatHandler class.
Responsibility: orchestrate parse → geocode → search → select → enrich →
format for POST /api/chat.
"""
import asyncio
import logging
from typing import Optional

from ..core.config import Settings
from ..core.enrich import DetailEnricher
from ..core.formatter import ReplyFormatter
from ..core.gemini import GeminiService
from ..core.insight import InsightGenerator
from ..core.maps import MapsClient, MapsError
from ..core.query import QueryParser
from ..core.selector import CandidateSelector
from ..models import Candidate, ChatResponse, Coordinate, EnrichedEntry, InsightRequest, ParsedQuery

logger = logging.getLogger(__name__)


class ChatHandler:
    """Turns one free-text query into one chat reply."""

    def __init__(
        self,
        settings: Settings,
        parser: QueryParser,
        maps: MapsClient,
        selector: CandidateSelector,
        enricher: DetailEnricher,
        insight: InsightGenerator,
        formatter: ReplyFormatter,
        gemini: Optional[GeminiService] = None,
    ) -> None:
        self._settings  = settings
        self._parser    = parser
        self._maps      = maps
        self._selector  = selector
        self._enricher  = enricher
        self._insight   = insight
        self._formatter = formatter
        self._gemini    = gemini

    # ── REST ──────────────────────────────────────────────────────────────────

    async def handle(self, text: str) -> ChatResponse:
        """Raises ConfigurationError / EmptyInput; every other outcome is a reply."""
        self._settings.ensure_ready()
        query = self._parser.parse(text)
        logger.info("[Chat] station=%r genre=%r", query.station, query.genre)

        try:
            origin = await self._maps.geocode(f"{query.station} station, Japan")
        except MapsError as e:
            logger.error("[Chat] geocode failed: %s", e)
            return ChatResponse(reply=self._formatter.service_trouble())
        if origin is None:
            return ChatResponse(reply=self._formatter.station_not_found(query.station))

        try:
            places = await self._maps.nearby_search(origin, self._settings.search_radius_m, query.genre)
        except MapsError as e:
            logger.error("[Chat] nearby search failed: %s", e)
            return ChatResponse(reply=self._formatter.service_trouble())
        if not places:
            return ChatResponse(reply=self._formatter.no_results(query.station, query.genre))

        shortlist = self._selector.select(places)
        logger.info("[Chat] %d candidates → %d picks", len(places), len(shortlist))

        entries = await asyncio.gather(*(self._enrich(c, query, origin) for c in shortlist))
        return ChatResponse(reply=self._formatter.render(query, entries))

    # ── Private helpers ────────────────────────────────────────────────────────

    async def _enrich(self, candidate: Candidate, query: ParsedQuery, origin: Coordinate) -> EnrichedEntry:
        reviews = await self._enricher.reviews(candidate.place_id)
        req = InsightRequest(
            name=candidate.name, station=query.station, genre=query.genre, reviews=reviews
        )
        insight, display_name = await asyncio.gather(
            self._insight.describe(req), self._display_name(candidate.name)
        )
        return self._formatter.entry(candidate, origin, query.station, insight, display_name)

    async def _display_name(self, name: str) -> Optional[str]:
        """'Romaji (原文)' for non-ASCII names when romanization is on."""
        if not (self._settings.romanize_names and self._gemini and name) or name.isascii():
            return None
        romaji = await self._gemini.romanize(name)
        if not romaji or romaji == name:
            return None
        return f"{romaji} ({name})"
