"""
core/formatter.py – ReplyFormatter class.
Responsibility: derived display fields (access, map link, review phrasing)
and the final chat reply text. No I/O, no randomness.
"""
from typing import Optional, Sequence
from urllib.parse import quote

from .geo import MAX_WALK_MINUTES, WALK_SPEED_M_PER_MIN, estimate_walk_minutes
from ..models import Candidate, Coordinate, EnrichedEntry, ParsedQuery

MAPS_PLACE_URL = "https://www.google.com/maps/place/?q="
UNKNOWN_NAME = "Unknown Restaurant"
REVIEW_COUNT_THRESHOLD = 10

# Characters encodeURIComponent leaves alone besides [A-Za-z0-9_.-~].
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def make_map_url(place_id: Optional[str], name: str, vicinity: Optional[str], station: str) -> str:
    """Deep link by place id; free-text search link when there is no id."""
    if place_id:
        return f"{MAPS_PLACE_URL}place_id:{encode_uri_component(place_id)}"
    return MAPS_PLACE_URL + encode_uri_component(f"{name} {vicinity or station} Japan")


def review_count_phrase(count: Optional[int], threshold: int = REVIEW_COUNT_THRESHOLD) -> str:
    if count is None:
        return "a few reviews"
    if count == 0:
        return "no reviews yet"
    if count < threshold:
        return "1 review" if count == 1 else f"{count} reviews"
    rounded = count // 10 * 10 if count >= 10 else count
    return f"{rounded}+ reviews"


class ReplyFormatter:
    """Builds EnrichedEntry display fields and the Sakura-chan reply."""

    def __init__(
        self,
        walk_speed_m_per_min: float = WALK_SPEED_M_PER_MIN,
        max_walk_minutes: int = MAX_WALK_MINUTES,
    ) -> None:
        self._speed = walk_speed_m_per_min
        self._max_walk = max_walk_minutes

    # ── Entry fields ───────────────────────────────────────────────────────────

    def access_text(self, origin: Coordinate, dest: Optional[Coordinate], station: str) -> str:
        minutes = estimate_walk_minutes(origin, dest, self._speed, self._max_walk)
        if minutes is None:
            return f"Near {station}"
        return f"Near {station} (Approx. {minutes} min walk)"

    def entry(
        self,
        candidate: Candidate,
        origin: Coordinate,
        station: str,
        insight: str,
        display_name: Optional[str] = None,
    ) -> EnrichedEntry:
        name = candidate.name or UNKNOWN_NAME
        return EnrichedEntry(
            candidate=candidate,
            display_name=display_name or name,
            insight=insight,
            access=self.access_text(origin, candidate.location, station),
            map_url=make_map_url(candidate.place_id, name, candidate.vicinity, station),
        )

    # ── Reply ──────────────────────────────────────────────────────────────────

    def render(self, query: ParsedQuery, entries: Sequence[EnrichedEntry]) -> str:
        header = (
            "Konnichiwa! I’m Sakura-chan 🌸✨\n"
            f"Here are my picks near **{query.station}** for **{query.genre}** "
            f"(within ~{self._max_walk} min walk)! Oishii~ 💖\n\n"
        )
        blocks = "".join(self._block(e) for e in entries)
        return header + blocks + "I hope you find your favorite meal! Matane! 🌸✨"

    def _block(self, e: EnrichedEntry) -> str:
        return (
            f"🌸 {e.display_name}\n"
            f"🚶 Access: {e.access}\n"
            f"💬 Buzz: {review_count_phrase(e.candidate.rating_count)}\n"
            f"✨ Sakura’s Pick: {e.insight}\n"
            f"📍 Let’s go!: {e.map_url}\n\n"
        )

    # ── Soft replies ───────────────────────────────────────────────────────────

    @staticmethod
    def station_not_found(station: str) -> str:
        return (
            f"Aww… I couldn’t locate the station \"{station}\" 🥺\n"
            "Try like: \"Shinjuku ramen\" / \"Shibuya sushi\" 🌸"
        )

    @staticmethod
    def no_results(station: str, genre: str) -> str:
        return (
            f"Hmm… I couldn’t find restaurants near {station} for \"{genre}\" 🥺\n"
            "Try another genre like ramen / sushi / yakitori / cafe 🌸✨"
        )

    @staticmethod
    def service_trouble() -> str:
        return (
            "Gomen ne… the map service isn’t answering right now 🥺\n"
            "Please try again in a little while 🌸"
        )
