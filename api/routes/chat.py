"""routes/chat.py – POST /api/chat"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from ..core.config import ConfigurationError
from ..core.query import EmptyInput
from ..deps import get_chat_handler, get_settings
from ..models import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


def _config_error(e: ConfigurationError) -> HTTPException:
    return HTTPException(status_code=500, detail={"error": str(e), "detail": e.remediation})


def require_ready() -> None:
    """Credential check. Runs before the request body is validated."""
    try:
        get_settings().ensure_ready()
    except ConfigurationError as e:
        raise _config_error(e)


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    dependencies=[Depends(require_ready)],
)
async def chat(req: ChatRequest):
    try:
        return await get_chat_handler().handle(req.text)
    except EmptyInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConfigurationError as e:
        raise _config_error(e)
    except Exception as e:
        logger.exception("api/chat error")
        raise HTTPException(status_code=500, detail={"error": "Internal server error", "detail": str(e)})
