"""Short narrative and tip list for a finished recommendation set."""

import logging

from stylist.errors import StylistError
from stylist.gemini import GeminiClient
from stylist.models import PersonalAdvice, StyleRecommendation
from stylist.parser import parse_advice
from stylist.prompts import build_advice_prompt

logger = logging.getLogger(__name__)

FALLBACK_ADVICE = (
    "These carefully selected styles will perfectly complement your unique "
    "features and enhance your natural look."
)

FALLBACK_TIPS: tuple[str, ...] = (
    "Book a consultation with an experienced stylist",
    "Bring reference photos to your appointment",
    "Start with subtle changes and adjust gradually",
    "Invest in quality styling products",
    "Maintain regular grooming appointments",
)


def fallback_advice() -> PersonalAdvice:
    return PersonalAdvice(advice=FALLBACK_ADVICE, tips=list(FALLBACK_TIPS))


async def generate_personal_advice(
    client: GeminiClient | None,
    recommendations: list[StyleRecommendation],
    user_context: str | None = None,
) -> PersonalAdvice:
    """Ask Gemini for advice on ``recommendations``; never raises."""
    if client is None:
        return fallback_advice()

    prompt = build_advice_prompt(recommendations, user_context)
    try:
        raw = await client.generate(prompt)
        return parse_advice(raw)
    except StylistError as e:
        logger.warning("Personal advice unavailable, using fallback: %s", e)
    except Exception:
        logger.exception("Unexpected error generating personal advice")
    return fallback_advice()
