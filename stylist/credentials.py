"""File-backed slot for the single Gemini API key."""

import json
import logging
import os
from pathlib import Path

from stylist.config import CREDENTIAL_KEY, CREDENTIALS_FILE

logger = logging.getLogger(__name__)


class CredentialStore:
    """Durable key-value file holding at most one API key.

    Nothing is validated here; checking a key against Gemini is
    ``stylist.gemini.validate_api_key``.
    """

    def __init__(self, path: str | Path = CREDENTIALS_FILE, key: str = CREDENTIAL_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable credential file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp, self.path)

    def save(self, secret: str) -> None:
        data = self._read()
        data[self.key] = secret
        self._write(data)
        logger.info("Gemini API key saved")

    def load(self) -> str | None:
        value = self._read().get(self.key)
        if isinstance(value, str) and value:
            return value
        return None

    def clear(self) -> None:
        data = self._read()
        if data.pop(self.key, None) is not None:
            self._write(data)
            logger.info("Gemini API key cleared")
