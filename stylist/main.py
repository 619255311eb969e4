import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stylist.config import LOG_LEVEL
from stylist.credentials import CredentialStore
from stylist.estimator import estimate_face_shape
from stylist.gemini import validate_api_key
from stylist.models import (
    ApiKeyRequest, ApiKeyResponse, ApiKeyStatusResponse,
    FaceAnalysis, HealthResponse,
    RecommendationRequest, RecommendationResponse,
)
from stylist.pipeline import GenerationConfig, RecommendationOrchestrator

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="StyleAdvisor")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache()
def get_credential_store() -> CredentialStore:
    return CredentialStore()


def get_orchestrator() -> RecommendationOrchestrator:
    return RecommendationOrchestrator()


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


@app.get("/api-key", response_model=ApiKeyStatusResponse)
async def api_key_status(
    store: CredentialStore = Depends(get_credential_store),
) -> ApiKeyStatusResponse:
    return ApiKeyStatusResponse(configured=store.load() is not None)


@app.post("/api-key", response_model=ApiKeyResponse)
async def configure_api_key(
    request: ApiKeyRequest,
    store: CredentialStore = Depends(get_credential_store),
) -> ApiKeyResponse:
    api_key = request.api_key.strip()
    if not api_key:
        return JSONResponse(
            status_code=400,
            content={"status": "error", "error": "Please enter your Gemini API key"},
        )

    if not await validate_api_key(api_key):
        return JSONResponse(
            status_code=400,
            content={"status": "error", "error": "Invalid API key. Please check your Gemini API key and try again"},
        )

    store.save(api_key)
    return ApiKeyResponse(status="configured")


@app.delete("/api-key", response_model=ApiKeyResponse)
async def clear_api_key(
    store: CredentialStore = Depends(get_credential_store),
) -> ApiKeyResponse:
    store.clear()
    return ApiKeyResponse(status="cleared")


@app.post("/analyze", response_model=FaceAnalysis)
async def analyze(file: UploadFile = File(...)) -> FaceAnalysis:
    if not (file.content_type or "").startswith("image/"):
        return JSONResponse(
            status_code=400,
            content={"status": "error", "error": "Invalid file type. Please upload an image file"},
        )

    content = await file.read()
    try:
        analysis = estimate_face_shape(content)
    except ValueError as e:
        logger.info("Face analysis rejected upload: %s", e)
        return JSONResponse(
            status_code=400,
            content={"status": "error", "error": "Analysis failed. Please try again with a clearer image"},
        )

    logger.info("Detected %s face shape with %d%% confidence",
                analysis.face_shape, round(analysis.confidence * 100))
    return analysis


@app.post("/recommendations", response_model=RecommendationResponse)
async def recommendations(
    request: RecommendationRequest,
    store: CredentialStore = Depends(get_credential_store),
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> RecommendationResponse:
    config = GenerationConfig(use_ai=request.use_ai, api_key=store.load())
    outcome = await orchestrator.recommend(
        request.analysis,
        config,
        preferences=request.preferences,
        user_context=request.user_context,
    )
    return RecommendationResponse(
        status="success",
        source=outcome.source.value,
        recommendations=outcome.recommendations,
        advice=outcome.advice,
        notice=outcome.notice,
    )
