"""
deps.py – Dependency Injection: singleton service instances.
Built once at import time from Settings.from_env().
"""
from typing import Optional

from .core.config import Settings
from .core.enrich import DetailEnricher
from .core.formatter import ReplyFormatter
from .core.gemini import GeminiService
from .core.insight import GeminiInsight, InsightGenerator, InsightStrategy, KeywordInsight
from .core.maps import MapsClient
from .core.prompt import PromptBuilder
from .core.query import QueryParser
from .core.selector import CandidateSelector
from .handlers.chat_handler import ChatHandler


def build_insight(settings: Settings, gemini: Optional[GeminiService]) -> InsightGenerator:
    strategies: list[InsightStrategy] = []
    if settings.uses_gemini and gemini is not None:
        strategies.append(GeminiInsight(gemini))
    strategies.append(KeywordInsight())
    return InsightGenerator(strategies)


def build_chat_handler(settings: Settings, maps: MapsClient, gemini: Optional[GeminiService]) -> ChatHandler:
    return ChatHandler(
        settings=settings,
        parser=QueryParser(),
        maps=maps,
        selector=CandidateSelector(
            shortlist_size=settings.shortlist_size,
            pool_limit=settings.pool_limit,
            quality_threshold=settings.quality_threshold,
        ),
        enricher=DetailEnricher(maps, review_cap=settings.review_cap),
        insight=build_insight(settings, gemini),
        formatter=ReplyFormatter(
            walk_speed_m_per_min=settings.walk_speed_m_per_min,
            max_walk_minutes=settings.max_walk_minutes,
        ),
        gemini=gemini,
    )


# ── Core singletons ────────────────────────────────────────────────────────────

_settings = Settings.from_env()
_maps     = MapsClient(api_key=_settings.maps_api_key, timeout=_settings.http_timeout)
_gemini   = (
    GeminiService(
        api_key=_settings.gemini_api_key,
        prompt_builder=PromptBuilder(),
        model_name=_settings.gemini_model,
        timeout=_settings.generation_timeout,
    )
    if _settings.gemini_api_key
    else None
)

# ── Handler singletons ─────────────────────────────────────────────────────────

_chat = build_chat_handler(_settings, _maps, _gemini)


# ── Getters (used in routes) ───────────────────────────────────────────────────

def get_settings()     -> Settings:    return _settings
def get_maps()         -> MapsClient:  return _maps
def get_chat_handler() -> ChatHandler: return _chat
