import os
from dotenv import load_dotenv

load_dotenv()

CREDENTIALS_FILE: str = os.getenv("CREDENTIALS_FILE", ".stylist/credentials.json")
CREDENTIAL_KEY: str = "gemini_api_key"

TEXT_MODEL: str = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")
VISION_MODEL: str = os.getenv("GEMINI_VISION_MODEL", "gemini-2.5-pro")
VALIDATION_MODEL: str = os.getenv("GEMINI_VALIDATION_MODEL", "gemini-2.5-flash-lite")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

VALID_FACE_SHAPES: list[str] = ["oval", "round", "square", "oblong"]
