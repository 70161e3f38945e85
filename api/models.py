"""
models.py – Pydantic schemas for request/response and request-scoped values.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


# ── Request Models ─────────────────────────────────────────────────────────────

class ChatRequest(BaseModel):
    text: str = Field(..., description="Free-text query, e.g. 'Shinjuku ramen'")


# ── Response Models ────────────────────────────────────────────────────────────

class ChatResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None


# ── Domain Values ──────────────────────────────────────────────────────────────

class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Candidate(BaseModel):
    """One raw venue from nearby search, before ranking."""
    model_config = ConfigDict(frozen=True)

    place_id: Optional[str] = None
    name: str = ""
    rating: Optional[float] = Field(default=None, ge=1.0, le=5.0)
    rating_count: Optional[int] = Field(default=None, ge=0)
    location: Optional[Coordinate] = None
    vicinity: Optional[str] = None


class ParsedQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    station: str
    genre: str


class InsightRequest(BaseModel):
    name: str
    station: str
    genre: str
    reviews: List[str] = Field(default_factory=list)


class EnrichedEntry(BaseModel):
    candidate: Candidate
    display_name: str
    insight: str
    access: str
    map_url: str
