"""Recommendation orchestration: AI path → parse → rule-based fallback → advice."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from stylist.advice import generate_personal_advice
from stylist.catalog import rule_based_recommendations
from stylist.config import TEXT_MODEL, VISION_MODEL
from stylist.errors import StylistError
from stylist.gemini import GeminiClient
from stylist.models import FaceAnalysis, PersonalAdvice, StylePreferences, StyleRecommendation
from stylist.parser import parse_recommendations
from stylist.prompts import build_recommendation_prompt

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = (
    "Enhanced recommendations are unavailable right now, "
    "so basic recommendations for your face shape are shown instead."
)


class PipelineState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    SUCCEEDED_AI = "succeeded_ai"
    SUCCEEDED_RULE_BASED = "succeeded_rule_based"


class RecommendationSource(str, Enum):
    AI = "ai"
    RULE_BASED = "rule_based"


@dataclass(frozen=True)
class GenerationConfig:
    """Per-call settings, including the API key read by the caller."""
    use_ai: bool = False
    api_key: str | None = None
    text_model: str = TEXT_MODEL
    vision_model: str = VISION_MODEL

    @property
    def ai_enabled(self) -> bool:
        return self.use_ai and bool(self.api_key)


@dataclass
class RecommendationOutcome:
    recommendations: list[StyleRecommendation]
    source: RecommendationSource
    advice: PersonalAdvice | None = None
    notice: str | None = None


ClientFactory = Callable[[GenerationConfig], GeminiClient]


def default_client_factory(config: GenerationConfig) -> GeminiClient:
    return GeminiClient(
        api_key=config.api_key,
        text_model=config.text_model,
        vision_model=config.vision_model,
    )


class RecommendationOrchestrator:
    """Runs one recommendation request at a time.

    The AI path is tried only when requested and a key is present. Any
    failure on it degrades to the catalogue; callers always get a
    non-empty list back.
    """

    def __init__(self, client_factory: ClientFactory = default_client_factory):
        self.client_factory = client_factory
        self.state = PipelineState.IDLE

    async def _ai_recommendations(
        self,
        client: GeminiClient,
        analysis: FaceAnalysis,
        preferences: StylePreferences | None,
    ) -> list[StyleRecommendation]:
        prompt = build_recommendation_prompt(analysis, preferences)
        raw = await client.generate(prompt, image=analysis.photo_data)
        return parse_recommendations(raw)

    async def recommend(
        self,
        analysis: FaceAnalysis,
        config: GenerationConfig,
        preferences: StylePreferences | None = None,
        user_context: str | None = None,
    ) -> RecommendationOutcome:
        self.state = PipelineState.GENERATING

        if config.ai_enabled:
            try:
                client = self.client_factory(config)
                recommendations = await self._ai_recommendations(client, analysis, preferences)
            except StylistError as e:
                logger.warning(
                    "AI recommendations failed for %s face, falling back: %s",
                    analysis.face_shape, e,
                )
            except Exception:
                logger.exception("Unexpected error in AI recommendations, falling back")
            else:
                advice = await generate_personal_advice(client, recommendations, user_context)
                self.state = PipelineState.SUCCEEDED_AI
                logger.info("Generated %d AI recommendations", len(recommendations))
                return RecommendationOutcome(
                    recommendations=recommendations,
                    source=RecommendationSource.AI,
                    advice=advice,
                )
        elif config.use_ai:
            logger.info("AI mode requested without an API key, using catalogue")

        self.state = PipelineState.SUCCEEDED_RULE_BASED
        return RecommendationOutcome(
            recommendations=rule_based_recommendations(analysis.face_shape),
            source=RecommendationSource.RULE_BASED,
            notice=FALLBACK_NOTICE if config.use_ai else None,
        )
