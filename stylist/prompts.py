"""Prompt templates for style recommendations and personal advice."""

from stylist.models import FaceAnalysis, StylePreferences, StyleRecommendation

NOT_SPECIFIED = "Not specified"

RECOMMENDATION_PROMPT_TEMPLATE = """You are an expert hair stylist and barber with 20+ years of experience. Analyze the following face shape data and provide personalized hair and beard style recommendations.

**Face Analysis Data:**
- Face Shape: {face_shape}
- Confidence: {confidence}%
- Jawline: {jawline}
- Cheekbones: {cheekbones}
- Forehead: {forehead}

**User Preferences:**
- Lifestyle: {lifestyle}
- Maintenance Level: {maintenance_level}
- Style Preference: {style_preference}

**Instructions:**
1. Provide 3-4 hair style recommendations and 2-3 beard style recommendations
2. Each recommendation should include:
   - Name of the style
   - Detailed description (2-3 sentences)
   - Suitability score (integer from 0 to 100, typically 80-98)
   - 3-4 specific styling tips
   - Professional reasoning (why this works for their face shape)
   - Maintenance requirements
   - Recommended styling products

3. Consider:
   - How each style complements their specific face shape
   - Professional and casual styling options
   - Modern trends that work with classic principles
   - Realistic maintenance expectations

4. If you can see their photo, also consider:
   - Hair texture and density
   - Current hair length and condition
   - Skin tone and complexion
   - Overall facial structure beyond just shape

**Output Format (JSON):**
{{
  "recommendations": [
    {{
      "id": "unique-id",
      "name": "Style Name",
      "category": "hair" or "beard",
      "description": "Detailed description...",
      "suitability": 0-100,
      "tips": ["tip1", "tip2", "tip3"],
      "reasoning": "Professional explanation...",
      "maintenance": "Maintenance description...",
      "styling_products": ["product1", "product2"]
    }}
  ]
}}

Only return valid JSON, no other text."""

ADVICE_PROMPT_TEMPLATE = """As an expert stylist, provide personalized advice for someone who received these style recommendations:

{style_summary}
{user_context}
Provide:
1. A warm, encouraging paragraph of personalized advice (2-3 sentences)
2. Exactly 5 practical tips for implementing these styles

Keep it conversational, supportive, and actionable. Format as JSON:
{{
  "advice": "your personalized advice...",
  "tips": ["tip1", "tip2", "tip3", "tip4", "tip5"]
}}
Only return valid JSON, no other text."""


def _or_not_specified(value: str | None) -> str:
    return value.strip() if value and value.strip() else NOT_SPECIFIED


def build_recommendation_prompt(
    analysis: FaceAnalysis,
    preferences: StylePreferences | None = None,
) -> str:
    """Render the recommendation request for ``analysis``.

    Output depends only on the arguments, so the same analysis and
    preferences always give the same prompt.
    """
    preferences = preferences or StylePreferences()
    return RECOMMENDATION_PROMPT_TEMPLATE.format(
        face_shape=analysis.face_shape,
        confidence=round(analysis.confidence * 100),
        jawline=analysis.features.jawline,
        cheekbones=analysis.features.cheekbones,
        forehead=analysis.features.forehead,
        lifestyle=_or_not_specified(preferences.lifestyle),
        maintenance_level=_or_not_specified(preferences.maintenance_level),
        style_preference=_or_not_specified(preferences.style_preference),
    )


def build_advice_prompt(
    recommendations: list[StyleRecommendation],
    user_context: str | None = None,
) -> str:
    style_summary = "\n".join(
        f"- {r.name} ({r.category}): {r.description}" for r in recommendations
    )
    context = f"\nAdditional context: {user_context.strip()}\n" if user_context and user_context.strip() else ""
    return ADVICE_PROMPT_TEMPLATE.format(style_summary=style_summary, user_context=context)
