"""Static hair and beard catalogue used when the AI path is unavailable."""

from enum import Enum

from stylist.models import StyleRecommendation


class FaceShape(str, Enum):
    OVAL = "oval"
    ROUND = "round"
    SQUARE = "square"
    OBLONG = "oblong"

    @classmethod
    def from_label(cls, label: str | None) -> "FaceShape":
        """Map a free-form label onto the closed set; anything unknown is oval."""
        if isinstance(label, cls):
            return label
        key = (label or "").strip().lower()
        for shape in cls:
            if shape.value == key:
                return shape
        return cls.OVAL


def _hair(style_id: str, name: str, description: str, suitability: int, tips: list[str]) -> StyleRecommendation:
    return StyleRecommendation(
        id=style_id, name=name, category="hair",
        description=description, suitability=suitability, tips=tips,
    )


def _beard(style_id: str, name: str, description: str, suitability: int, tips: list[str]) -> StyleRecommendation:
    return StyleRecommendation(
        id=style_id, name=name, category="beard",
        description=description, suitability=suitability, tips=tips,
    )


HAIR_STYLES: dict[FaceShape, tuple[StyleRecommendation, ...]] = {
    FaceShape.OVAL: (
        _hair("oval-1", "Classic Side Part",
              "Timeless and versatile, works with any occasion", 95,
              ["Use pomade for a polished look", "Keep sides neat and trimmed"]),
        _hair("oval-2", "Textured Quiff",
              "Modern style with volume and texture", 90,
              ["Use texturizing clay", "Blow dry upward for volume"]),
    ),
    FaceShape.ROUND: (
        _hair("round-1", "High Fade with Pompadour",
              "Adds height and elongates the face", 88,
              ["Keep sides very short", "Style hair upward for height"]),
        _hair("round-2", "Angular Fringe",
              "Sharp angles to contrast round features", 85,
              ["Cut fringe at an angle", "Use matte styling product"]),
    ),
    FaceShape.SQUARE: (
        _hair("square-1", "Soft Layers",
              "Softens strong jawline with gentle curves", 92,
              ["Ask for layered cut", "Style with light product"]),
        _hair("square-2", "Side-Swept Undercut",
              "Modern cut that complements angular features", 87,
              ["Keep one side longer", "Use fiber for natural hold"]),
    ),
    FaceShape.OBLONG: (
        _hair("oblong-1", "Medium Length Waves",
              "Adds width and balances face proportions", 89,
              ["Use sea salt spray", "Scrunch for natural waves"]),
    ),
}

BEARD_STYLES: dict[FaceShape, tuple[StyleRecommendation, ...]] = {
    FaceShape.OVAL: (
        _beard("oval-beard-1", "Full Beard",
               "Classic full beard that maintains face balance", 93,
               ["Trim regularly for shape", "Use beard oil daily"]),
    ),
    FaceShape.ROUND: (
        _beard("round-beard-1", "Goatee",
               "Lengthens face and adds definition", 88,
               ["Keep chin hair longer", "Trim sides shorter"]),
    ),
    FaceShape.SQUARE: (
        _beard("square-beard-1", "Rounded Beard",
               "Softens angular jawline", 90,
               ["Round the corners", "Keep well-groomed"]),
    ),
    FaceShape.OBLONG: (
        _beard("oblong-beard-1", "Short Boxed Beard",
               "Adds width without extra length", 87,
               ["Keep short and wide", "Define the neckline"]),
    ),
}

def hair_styles_for(shape: str | FaceShape) -> list[StyleRecommendation]:
    return [s.model_copy(deep=True) for s in HAIR_STYLES[FaceShape.from_label(shape)]]


def beard_styles_for(shape: str | FaceShape) -> list[StyleRecommendation]:
    return [s.model_copy(deep=True) for s in BEARD_STYLES[FaceShape.from_label(shape)]]


def rule_based_recommendations(shape: str | FaceShape) -> list[StyleRecommendation]:
    """Hair styles followed by beard styles for ``shape``."""
    return hair_styles_for(shape) + beard_styles_for(shape)
