"""Placeholder face-shape estimate from image proportions."""

import base64
import io
import random

from PIL import Image, UnidentifiedImageError

from stylist.models import FaceAnalysis, FaceFeatures

WIDE_RATIO = 1.1
NARROW_RATIO = 0.9


def get_image_info(data: bytes) -> tuple[int, int, str]:
    """Width, height and mime type of an encoded image."""
    try:
        img = Image.open(io.BytesIO(data))
        width, height = img.size
        mime_type = Image.MIME.get(img.format or "", "image/jpeg")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError(f"Could not read image: {e}") from e
    if width <= 0 or height <= 0:
        raise ValueError("Image has no area")
    return width, height, mime_type


def classify_aspect_ratio(width: int, height: int, rng: random.Random) -> str:
    aspect_ratio = width / height
    if aspect_ratio > WIDE_RATIO:
        return "round"
    if aspect_ratio < NARROW_RATIO:
        return "oblong"
    # Near-square frames carry no signal either way.
    return "square" if rng.random() > 0.5 else "oval"


def estimate_face_shape(data: bytes, rng: random.Random | None = None) -> FaceAnalysis:
    rng = rng or random.Random()
    width, height, mime_type = get_image_info(data)
    face_shape = classify_aspect_ratio(width, height, rng)

    return FaceAnalysis(
        face_shape=face_shape,
        confidence=0.85 + rng.random() * 0.1,
        features=FaceFeatures(
            jawline="angular" if face_shape == "square" else "soft",
            cheekbones="full" if face_shape == "round" else "defined",
            forehead="high" if face_shape == "oblong" else "proportional",
        ),
        photo_data=f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}",
    )
