"""
Advisor Service

Turns risk factors into short lifestyle tips using Groq (Llama 3). This is
best-effort enrichment: with no factors, no API key, or any failure on the
LLM path, a fixed tip is returned instead and the profile is still built.
"""

import json
import logging
import re
from typing import Protocol

from groq import AsyncGroq

from health_profiler.config import ADVICE_TEMPERATURE, GROQ_API_KEY, GROQ_MODEL
from health_profiler.models.profile import RiskFactor

logger = logging.getLogger(__name__)

client = AsyncGroq(api_key=GROQ_API_KEY) if GROQ_API_KEY else None

HEALTHY_TIP = "Maintain your healthy lifestyle habits."
FALLBACK_TIP = "Focus on a balanced diet and regular exercise."

TIP_COUNT = 3

SYSTEM_PROMPT = """You are a friendly wellness coach writing lifestyle tips for a
health survey summary.

CRITICAL RULES:
- NEVER diagnose, name diseases, or suggest medication.
- Do not frame anything as medical advice.
- Keep every tip short (one sentence), positive and encouraging.
- Return ONLY a JSON array of strings, no other text."""

FACTOR_LABELS = {
    RiskFactor.smoking: "smoking",
    RiskFactor.low_exercise: "low physical activity",
    RiskFactor.poor_diet: "a diet high in sugar or fat",
    RiskFactor.age_over_50: "age over 50",
}

_FENCE_RE = re.compile(r"^```[A-Za-z]*\s*|\s*```$")


class AdviceGenerator(Protocol):
    async def generate(self, system_prompt: str, user_prompt: str) -> str: ...


class GroqAdviceGenerator:
    def __init__(self, groq_client: AsyncGroq, model: str = GROQ_MODEL, temperature: float = ADVICE_TEMPERATURE):
        self.client = groq_client
        self.model = model
        self.temperature = temperature

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.temperature,
        )
        return response.choices[0].message.content


def get_advice_generator() -> AdviceGenerator | None:
    if client is None:
        return None
    return GroqAdviceGenerator(client)


def build_prompt(factors: list[RiskFactor]) -> str:
    labels = ", ".join(FACTOR_LABELS[f] for f in factors)
    return (
        f"The survey flagged these lifestyle risk factors: {labels}.\n"
        f"Write exactly {TIP_COUNT} short, encouraging, non-diagnostic tips that address them.\n"
        'Return JSON: ["tip 1", "tip 2", "tip 3"]'
    )


def strip_code_fences(text: str) -> str:
    """Drop a ```json ... ``` wrapper if the model added one."""
    return _FENCE_RE.sub("", text.strip())


def parse_tips(text: str) -> list[str]:
    tips = json.loads(strip_code_fences(text))
    if not isinstance(tips, list) or len(tips) != TIP_COUNT or not all(isinstance(t, str) for t in tips):
        raise ValueError(f"expected a list of {TIP_COUNT} strings, got: {tips!r}")
    return tips


async def recommend(factors: list[RiskFactor], generator: AdviceGenerator | None) -> list[str]:
    if not factors:
        return [HEALTHY_TIP]

    if generator is None:
        logger.warning("Advice generator not configured (GROQ_API_KEY unset), using fallback tip")
        return [FALLBACK_TIP]

    try:
        content = await generator.generate(SYSTEM_PROMPT, build_prompt(factors))
        return parse_tips(content)
    except Exception as e:
        logger.warning(f"Advice generation failed, using fallback tip: {e}")
        return [FALLBACK_TIP]
