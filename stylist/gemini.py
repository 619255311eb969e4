"""Gemini client: API key checks and single-shot text / multimodal generation."""

import asyncio
import base64
import binascii
import logging

from google import genai
from google.genai import types

from stylist.config import TEXT_MODEL, VALIDATION_MODEL, VISION_MODEL
from stylist.errors import CredentialMissing, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MIME = "image/jpeg"


async def validate_api_key(api_key: str, model: str = VALIDATION_MODEL) -> bool:
    """Return True if ``api_key`` can complete a minimal request.

    Uses a throwaway client, so nothing stored is touched.
    """
    if not api_key or not api_key.strip():
        return False
    try:
        client = genai.Client(api_key=api_key.strip())
        response = await asyncio.to_thread(
            client.models.generate_content,
            model=model,
            contents="Test connection",
        )
        return bool(response.text)
    except Exception as e:
        logger.warning("Gemini API key check failed: %s", e)
        return False


def image_part(photo_data: str) -> types.Part:
    """Turn a base64 payload (raw or ``data:<mime>;base64,...``) into an SDK part."""
    mime_type = DEFAULT_IMAGE_MIME
    payload = photo_data.strip()
    if payload.startswith("data:") and "," in payload:
        header, payload = payload.split(",", 1)
        declared = header[len("data:"):].split(";", 1)[0]
        if declared:
            mime_type = declared
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise UpstreamError(f"Invalid image payload: {e}") from e
    return types.Part.from_bytes(data=data, mime_type=mime_type)


class GeminiClient:
    """One configured Gemini caller. Every ``generate`` is exactly one request."""

    def __init__(
        self,
        api_key: str | None,
        text_model: str = TEXT_MODEL,
        vision_model: str = VISION_MODEL,
        sdk_client=None,
    ):
        self.api_key = api_key
        self.text_model = text_model
        self.vision_model = vision_model
        self._sdk_client = sdk_client

    def _client(self):
        if self._sdk_client is None:
            self._sdk_client = genai.Client(api_key=self.api_key)
        return self._sdk_client

    def model_for(self, image: str | None) -> str:
        return self.vision_model if image else self.text_model

    async def generate(self, prompt: str, image: str | None = None) -> str:
        if not self.api_key:
            raise CredentialMissing("Gemini API key not found")
        contents: list = [prompt]
        if image:
            contents.append(image_part(image))
        model = self.model_for(image)

        try:
            client = self._client()
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=model,
                contents=contents,
            )
            text = response.text
        except Exception as e:
            raise UpstreamError(f"Gemini generation failed: {e}") from e

        logger.debug("Gemini %s returned %d characters", model, len(text or ""))
        return text or ""
