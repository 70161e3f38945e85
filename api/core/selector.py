"""
core/selector.py – CandidateSelector class.
Responsibility: turn raw nearby-search results into a short, quality-biased,
randomly sampled shortlist.

Rank by rating (ties: more reviews first), restrict to high-quality venues
when there are any, shuffle the top slice, keep the first few. Repeated
identical queries get variety without dropping below the quality floor.
"""
import random
from typing import MutableSequence, Sequence, TypeVar

from ..models import Candidate

T = TypeVar("T")

Shortlist = tuple[Candidate, ...]

SHORTLIST_SIZE = 5
POOL_LIMIT = 10
QUALITY_THRESHOLD = 4.0


def shuffle_in_place(items: MutableSequence[T], rng: random.Random) -> None:
    """Fisher–Yates shuffle driven by `rng`."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


class CandidateSelector:
    """Filter → rank → pool → shuffle → shortlist."""

    def __init__(
        self,
        shortlist_size: int = SHORTLIST_SIZE,
        pool_limit: int = POOL_LIMIT,
        quality_threshold: float = QUALITY_THRESHOLD,
        rng: random.Random | None = None,
    ) -> None:
        self._size      = shortlist_size
        self._limit     = max(pool_limit, shortlist_size)
        self._threshold = quality_threshold
        self._rng       = rng or random.Random()

    # ── Public ─────────────────────────────────────────────────────────────────

    def select(self, candidates: Sequence[Candidate]) -> Shortlist:
        pool = self.build_pool(candidates)
        top  = pool[: min(self._limit, len(pool))]
        shuffle_in_place(top, self._rng)
        return tuple(top[: min(self._size, len(top))])

    def build_pool(self, candidates: Sequence[Candidate]) -> list[Candidate]:
        """Ranked selection pool, before the top-N cut and the shuffle."""
        rated   = self.rank([c for c in candidates if c.rating is not None])
        unrated = [c for c in candidates if c.rating is None]
        if not rated:
            return list(candidates)

        high = [c for c in rated if c.rating >= self._threshold]
        pool = high or rated
        if len(pool) < self._size:
            pool = self._fill(pool, [*rated, *unrated])
        return pool

    @staticmethod
    def rank(rated: Sequence[Candidate]) -> list[Candidate]:
        """Descending by rating, then by review count. Stable for equal keys."""
        return sorted(rated, key=lambda c: (-(c.rating or 0.0), -(c.rating_count or 0)))

    # ── Private ────────────────────────────────────────────────────────────────

    def _fill(self, pool: list[Candidate], backups: list[Candidate]) -> list[Candidate]:
        filled = list(pool)
        for c in backups:
            if len(filled) >= self._size:
                break
            if not any(c is p for p in filled):
                filled.append(c)
        return filled
