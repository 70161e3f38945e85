"""
core/query.py – QueryParser class.
Splits a free-text query into a station term and a genre term.
Responsibility: parsing ONLY – no geocoding, no search.
"""
import re

from ..models import ParsedQuery

DEFAULT_GENRE = "restaurants"

_WHITESPACE = re.compile(r"\s+")


class EmptyInput(ValueError):
    """Raised when the query is blank after trimming."""


class QueryParser:
    """'Shinjuku ramen' → station='Shinjuku', genre='ramen'."""

    def parse(self, text: str) -> ParsedQuery:
        cleaned = self.clean(text)
        if not cleaned:
            raise EmptyInput("Missing 'text' in request body.")
        if "," in cleaned:
            return self._split_on_comma(cleaned)
        return self._split_on_space(cleaned)

    @staticmethod
    def clean(text: str) -> str:
        """Trim and collapse internal whitespace."""
        return _WHITESPACE.sub(" ", text or "").strip()

    # ── Private ────────────────────────────────────────────────────────────────

    def _split_on_comma(self, cleaned: str) -> ParsedQuery:
        parts = [p.strip() for p in cleaned.split(",")]
        parts = [p for p in parts if p]
        station = parts[0] if parts else cleaned
        genre = " ".join(parts[1:]) or DEFAULT_GENRE
        return ParsedQuery(station=station, genre=genre)

    def _split_on_space(self, cleaned: str) -> ParsedQuery:
        station, _, rest = cleaned.partition(" ")
        return ParsedQuery(station=station, genre=rest.strip() or DEFAULT_GENRE)
