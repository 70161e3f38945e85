"""routes/system.py – /health"""
from datetime import datetime
from fastapi import APIRouter
from ..deps import get_settings

router = APIRouter(tags=["System"])


@router.get("/health")
async def health():
    settings = get_settings()
    return {
        "status": "ok",
        "time": datetime.now().isoformat(),
        "maps_configured": bool(settings.maps_api_key),
        "insight_mode": settings.insight_mode,
    }
