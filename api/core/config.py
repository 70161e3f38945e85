"""
core/config.py – Settings dataclass.
Responsibility: read tunables and credentials from the environment once,
then get passed explicitly into services and handlers.
"""
import logging
import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

logger = logging.getLogger(__name__)

InsightMode = Literal["gemini", "keyword"]

MAX_REVIEW_CAP = 8


class ConfigurationError(RuntimeError):
    """Raised when a required credential is missing."""

    def __init__(self, variable: str, remediation: str) -> None:
        super().__init__(f"{variable} is not set.")
        self.variable = variable
        self.remediation = remediation


@dataclass(frozen=True)
class Settings:
    maps_api_key: str = ""
    gemini_api_key: str = ""
    insight_mode: InsightMode = "gemini"
    gemini_model: str = "gemini-2.0-flash"
    romanize_names: bool = False
    search_radius_m: int = 1200
    shortlist_size: int = 5
    pool_limit: int = 10
    quality_threshold: float = 4.0
    review_cap: int = 6
    walk_speed_m_per_min: float = 80.0
    max_walk_minutes: int = 15
    http_timeout: float = 5.0
    generation_timeout: float = 8.0

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from environment variables with the observed defaults."""
        env = os.environ if env is None else env

        mode = env.get("INSIGHT_MODE", "gemini").strip().lower()
        if mode not in ("gemini", "keyword"):
            logger.warning("Unknown INSIGHT_MODE=%r, using 'gemini'.", mode)
            mode = "gemini"

        shortlist_size = max(1, int(env.get("SHORTLIST_SIZE", "5")))
        pool_limit     = max(shortlist_size, int(env.get("POOL_LIMIT", "10")))
        review_cap     = min(MAX_REVIEW_CAP, max(0, int(env.get("REVIEW_CAP", "6"))))

        settings = cls(
            maps_api_key=env.get("GOOGLE_MAPS_API_KEY", "").strip(),
            gemini_api_key=env.get("GEMINI_API_KEY", "").strip(),
            insight_mode=mode,
            gemini_model=env.get("GEMINI_MODEL", "gemini-2.0-flash"),
            romanize_names=env.get("ROMANIZE_NAMES", "false").lower() in {"1", "true", "yes"},
            search_radius_m=int(env.get("SEARCH_RADIUS_M", "1200")),
            shortlist_size=shortlist_size,
            pool_limit=pool_limit,
            quality_threshold=float(env.get("QUALITY_THRESHOLD", "4.0")),
            review_cap=review_cap,
            walk_speed_m_per_min=max(1.0, float(env.get("WALK_SPEED_M_PER_MIN", "80"))),
            max_walk_minutes=max(1, int(env.get("MAX_WALK_MINUTES", "15"))),
            http_timeout=float(env.get("HTTP_TIMEOUT", "5.0")),
            generation_timeout=float(env.get("GENERATION_TIMEOUT", "8.0")),
        )

        if not settings.maps_api_key:
            logger.warning("GOOGLE_MAPS_API_KEY is not configured; /api/chat will return 500.")
        if settings.uses_gemini and not settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is not configured; /api/chat will return 500.")
        return settings

    @property
    def uses_gemini(self) -> bool:
        return self.insight_mode == "gemini"

    def ensure_ready(self) -> None:
        """Raise ConfigurationError if a credential needed for this mode is missing."""
        if not self.maps_api_key:
            raise ConfigurationError(
                "GOOGLE_MAPS_API_KEY",
                "Set GOOGLE_MAPS_API_KEY to a key with Geocoding and Places enabled.",
            )
        if self.uses_gemini and not self.gemini_api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY",
                "Set GEMINI_API_KEY, or set INSIGHT_MODE=keyword to skip text generation.",
            )
