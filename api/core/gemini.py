"""
core/gemini.py – GeminiService class.
Responsibility: talk to the Google Gemini API.
Every public call returns "" on failure; callers supply their own fallback.
"""
import asyncio
import logging

import google.generativeai as genai
from google.generativeai.types import GenerationConfig

from .prompt import PromptBuilder
from ..models import InsightRequest

logger = logging.getLogger(__name__)

_INSIGHT_TOKENS  = 160
_ROMANIZE_TOKENS = 40


class GeminiService:
    """Wrapper over the Gemini REST API (blocking SDK run in an executor)."""

    def __init__(
        self,
        api_key: str,
        prompt_builder: PromptBuilder,
        model_name: str = "gemini-2.0-flash",
        timeout: float = 8.0,
    ) -> None:
        if api_key:
            genai.configure(api_key=api_key)
        self._pb      = prompt_builder
        self._model   = model_name
        self._timeout = timeout

    # ── Public API ─────────────────────────────────────────────────────────────

    async def generate(self, prompt: str, max_tokens: int, temperature: float = 0.7) -> str:
        """Call Gemini and return stripped text, or "" on any failure."""
        cfg = GenerationConfig(max_output_tokens=max_tokens, temperature=temperature)

        def _call() -> str:
            model = genai.GenerativeModel(
                model_name=self._model,
                system_instruction=self._pb.build_system(),
                generation_config=cfg,
            )
            return model.generate_content(prompt).text

        loop = asyncio.get_running_loop()
        try:
            text = await asyncio.wait_for(loop.run_in_executor(None, _call), self._timeout)
        except Exception as e:
            logger.error(f"Gemini.generate error: {type(e).__name__}: {e}")
            return ""
        return text.strip() if isinstance(text, str) else ""

    async def summarize_reviews(self, req: InsightRequest) -> str:
        return await self.generate(self._pb.build_insight(req), _INSIGHT_TOKENS)

    async def romanize(self, name: str) -> str:
        text = await self.generate(self._pb.build_romanize(name), _ROMANIZE_TOKENS, temperature=0.0)
        return text.splitlines()[0].strip().strip('"') if text else ""
