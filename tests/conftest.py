"""Shared fixtures: sample analyses, canned Gemini replies and fake clients."""

import json
import struct
import zlib

import pytest

from stylist.errors import UpstreamError
from stylist.models import FaceAnalysis, FaceFeatures


class FakeGeminiClient:
    """Stands in for GeminiClient; replays canned replies or raises canned errors."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls: list[tuple[str, str | None]] = []

    async def generate(self, prompt: str, image: str | None = None) -> str:
        self.calls.append((prompt, image))
        if not self.responses:
            raise UpstreamError("no canned response left")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_fake_client():
    return FakeGeminiClient


@pytest.fixture
def round_analysis() -> FaceAnalysis:
    return FaceAnalysis(
        face_shape="round",
        confidence=0.9,
        features=FaceFeatures(jawline="soft", cheekbones="full", forehead="proportional"),
    )


@pytest.fixture
def photo_analysis(round_analysis) -> FaceAnalysis:
    return round_analysis.model_copy(update={"photo_data": "data:image/png;base64,aGVsbG8="})


@pytest.fixture
def ai_payload() -> dict:
    return {
        "recommendations": [
            {
                "id": "ai-crop",
                "name": "Textured Crop",
                "category": "hair",
                "description": "Short textured top with a tight fade.",
                "suitability": 94,
                "tips": ["Ask for a skin fade", "Use matte paste", "Trim every 3 weeks"],
                "reasoning": "Height on top lengthens a round face.",
                "maintenance": "Medium",
                "styling_products": ["Matte paste", "Sea salt spray"],
            },
            {
                "id": "ai-goatee",
                "name": "Extended Goatee",
                "category": "beard",
                "description": "Chin-focused beard that adds length.",
                "suitability": 89,
                "tips": ["Keep cheeks clean", "Shape the chin point"],
                "reasoning": "Vertical lines offset roundness.",
                "maintenance": "Weekly trims",
                "styling_products": ["Beard oil"],
            },
        ]
    }


@pytest.fixture
def ai_reply(ai_payload) -> str:
    return "Sure! Here are my picks:\n```json\n" + json.dumps(ai_payload, indent=2) + "\n```\nEnjoy!"


@pytest.fixture
def advice_reply() -> str:
    return json.dumps({
        "advice": "Go bold on top and keep the beard sharp.",
        "tips": ["Tip one", "Tip two", "Tip three", "Tip four", "Tip five"],
    })


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)


@pytest.fixture
def oversized_png() -> bytes:
    """A tiny PNG whose header claims 30000x30000 pixels."""
    header = struct.pack(">IIBBBBB", 30000, 30000, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", b"")
        + _png_chunk(b"IEND", b"")
    )
