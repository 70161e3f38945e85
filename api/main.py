"""
main.py – FastAPI app entry point (slim wire-up only).
Only routes, error shape, and lifespan live here. No business logic.
"""
import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .routes import chat, system
from .deps import get_maps, get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MISSING_TEXT = "Missing 'text' in request body."


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🌸 Ready (insight mode: %s).", get_settings().insight_mode)
    yield
    await get_maps().aclose()
    logger.info("Shutdown.")


app = FastAPI(
    title="Sakura-chan Gourmet API",
    description="Station + genre → nearby restaurant picks with short review-based blurbs.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


# ── Error shape: { error, detail? } ───────────────────────────────────────────

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": MISSING_TEXT})


app.include_router(system.router)
app.include_router(chat.router)
