"""
core/insight.py – InsightGenerator and its strategies.
Responsibility: produce the short blurb shown under each venue.

Strategies are tried in order; the first non-empty text wins.
If all of them come back empty the fixed FALLBACK_INSIGHT is used.
"""
import logging
import re
from typing import Optional, Protocol, Sequence

from .gemini import GeminiService
from ..models import InsightRequest

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = "Lovely flavors and a comfy vibe make this a pleasant stop for food lovers. 🌸✨"


class InsightStrategy(Protocol):
    name: str

    async def generate(self, req: InsightRequest) -> str: ...


# ── Gemini ─────────────────────────────────────────────────────────────────────

class GeminiInsight:
    """Review summary written by Gemini."""

    name = "gemini"

    def __init__(self, gemini: GeminiService) -> None:
        self._gemini = gemini

    async def generate(self, req: InsightRequest) -> str:
        return await self._gemini.summarize_reviews(req)


# ── Keyword buckets ────────────────────────────────────────────────────────────

BUCKETS: dict[str, tuple[str, ...]] = {
    "taste":      ("delicious", "tasty", "flavo", "yummy", "oishi", "broth", "fresh", "juicy", "rich", "savory"),
    "service":    ("friendly", "staff", "service", "welcoming", "polite", "helpful", "attentive"),
    "atmosphere": ("cozy", "cosy", "atmosphere", "vibe", "ambience", "ambiance", "interior", "relaxing", "quiet"),
    "crowd":      ("queue", "lined up", "line up", "waited", "crowded", "busy", "packed", "popular"),
    "value":      ("value", "affordable", "reasonable", "cheap", "worth", "generous portion", "big portion"),
}

_PRAISE: dict[str, str] = {
    "taste":      "the flavors",
    "service":    "the friendly staff",
    "atmosphere": "the cozy atmosphere",
    "value":      "how satisfying it is for what you get",
}
_CROWD_NOTE = "It's a popular spot, so a short wait can happen."

# A clause holding any of these words says nothing positive about its vocabulary.
NEGATIVE_WORDS = frozenset({
    "not", "no", "never", "nothing", "hardly", "rude", "bad", "bland", "terrible", "awful",
    "poor", "mediocre", "worst", "disappointing", "disappointed", "overpriced", "unfriendly",
})

_CLAUSE_SPLIT = re.compile(r"[,.;:!?\n]+|\bbut\b|\bhowever\b", re.I)
_WORD = re.compile(r"[a-z']+")


class KeywordInsight:
    """Rule-based summary from review vocabulary. Deterministic, no provider."""

    name = "keyword"

    def __init__(self) -> None:
        self._patterns = {
            bucket: re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")", re.I)
            for bucket, words in BUCKETS.items()
        }

    async def generate(self, req: InsightRequest) -> str:
        return self.summarize(req.reviews)

    def detect(self, texts: Sequence[str]) -> list[str]:
        """Buckets whose vocabulary appears in a non-negative clause of `texts`, in BUCKETS order."""
        blob = "\n".join(c for text in texts for c in self._positive_clauses(text))
        return [bucket for bucket, p in self._patterns.items() if p.search(blob)]

    @staticmethod
    def _positive_clauses(text: str) -> list[str]:
        """Clauses with no negation ("not", "isn't") and no negative word ("rude", "bland")."""
        kept = []
        for clause in _CLAUSE_SPLIT.split(text.replace("’", "'")):
            words = _WORD.findall(clause.lower())
            if any(w in NEGATIVE_WORDS or w.endswith("n't") for w in words):
                continue
            kept.append(clause)
        return kept

    def summarize(self, texts: Sequence[str]) -> str:
        hits = self.detect(texts)
        if not hits:
            return ""
        praise = [_PRAISE[b] for b in hits if b in _PRAISE]
        parts = []
        if praise:
            parts.append(f"Reviewers love {self._join(praise)}.")
        if "crowd" in hits:
            parts.append(_CROWD_NOTE)
        return " ".join(parts)

    @staticmethod
    def _join(items: list[str]) -> str:
        if len(items) == 1:
            return items[0]
        return ", ".join(items[:-1]) + " and " + items[-1]


# ── Chain ──────────────────────────────────────────────────────────────────────

class InsightGenerator:
    """Try each strategy in order; fall back to a canned sentence."""

    def __init__(self, strategies: Sequence[InsightStrategy], fallback: str = FALLBACK_INSIGHT) -> None:
        self._strategies = list(strategies)
        self._fallback   = fallback

    async def describe(self, req: InsightRequest) -> str:
        text = await self._first_non_empty(req)
        return text or self._fallback

    async def _first_non_empty(self, req: InsightRequest) -> Optional[str]:
        for strategy in self._strategies:
            try:
                text = (await strategy.generate(req)).strip()
            except Exception as e:
                logger.error("Insight strategy %s failed for %r: %s", strategy.name, req.name, e)
                continue
            if text:
                return text
            logger.info("Insight strategy %s empty for %r", strategy.name, req.name)
        return None
