from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FaceFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    jawline: str
    cheekbones: str
    forehead: str


class FaceAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    face_shape: str
    confidence: float = Field(ge=0.0, le=1.0)
    features: FaceFeatures
    photo_data: str | None = None


class StylePreferences(BaseModel):
    lifestyle: str | None = None
    maintenance_level: str | None = None
    style_preference: str | None = None


class StyleRecommendation(BaseModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: Literal["hair", "beard"]
    description: str
    suitability: int = Field(ge=0, le=100, strict=True)
    tips: list[str] = Field(min_length=1)
    reasoning: str | None = None
    maintenance: str | None = None
    styling_products: list[str] | None = None


class PersonalAdvice(BaseModel):
    advice: str = Field(min_length=1)
    tips: list[str]


class HealthResponse(BaseModel):
    status: str


class ApiKeyRequest(BaseModel):
    api_key: str


class ApiKeyResponse(BaseModel):
    status: str
    error: str | None = None


class ApiKeyStatusResponse(BaseModel):
    configured: bool


class RecommendationRequest(BaseModel):
    analysis: FaceAnalysis
    use_ai: bool = False
    preferences: StylePreferences | None = None
    user_context: str | None = None


class RecommendationResponse(BaseModel):
    status: str
    source: Literal["ai", "rule_based"]
    recommendations: list[StyleRecommendation]
    advice: PersonalAdvice | None = None
    notice: str | None = None
