"""
core/prompt.py – PromptBuilder class.
Responsibility: build the system prompt and user prompts sent to Gemini.
"""
from ..models import InsightRequest

PERSONA = "Sakura-chan"


class PromptBuilder:
    """Builds prompts for the Gemini API."""

    # ── System prompt ──────────────────────────────────────────────────────────

    def build_system(self) -> str:
        return f"You are {PERSONA}, a cute anime girl food guide for travelers in Japan."

    # ── Review summary ─────────────────────────────────────────────────────────

    def build_insight(self, req: InsightRequest) -> str:
        """Ask for a 2–3 sentence blurb grounded only in the supplied text."""
        if req.reviews:
            source = "Reviews:\n" + "\n".join(f"({i}) {t}" for i, t in enumerate(req.reviews, start=1))
            basis = "Based ONLY on the reviews below"
        else:
            source = "Description:\n" + self.build_seed(req)
            basis = "Based ONLY on the short description below"
        return (
            f"{basis}, write a friendly 2–3 sentence description in English.\n"
            "Do NOT mention prices or numeric ratings. Do NOT invent facts.\n"
            "Focus on flavor, atmosphere, service, and who might enjoy this place.\n\n"
            f"Restaurant: {req.name}\n"
            f"Nearby station: {req.station}\n"
            f"Genre: {req.genre}\n\n"
            f"{source}\n\n"
            f"Now write the description as {PERSONA} (2–3 sentences)."
        )

    @staticmethod
    def build_seed(req: InsightRequest) -> str:
        return f"{req.name} is a {req.genre} spot near {req.station} Station."

    # ── Romanization ───────────────────────────────────────────────────────────

    def build_romanize(self, name: str) -> str:
        return (
            "Romanize this Japanese restaurant name into Hepburn romaji. "
            "Reply with the romanized name only, no quotes, no explanation.\n\n"
            f"Name: {name}"
        )
