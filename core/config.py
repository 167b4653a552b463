"""Configuration defaults, persisted settings and logging setup."""
from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[1]

DELIMITER = ","
BASE_LANGUAGE = os.environ.get("WORDSMITH_BASE_LANGUAGE", "English")
DEFAULT_TRANSLATION_FILE = os.environ.get(
    "WORDSMITH_TRANSLATION_FILE", str(ROOT_DIR / "translations" / "translation.csv")
)
SETTINGS_FILE = "wordsmith_settings.json"

# Only these keys are written to ``SETTINGS_FILE``; anything else found in the
# file is ignored on load.
PERSISTED_KEYS = {"file_path", "language", "base_language"}

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
HANDLER_NAME = "wordsmith"


class Settings(BaseModel):
    file_path: str = DEFAULT_TRANSLATION_FILE
    language: str = BASE_LANGUAGE
    base_language: str = BASE_LANGUAGE


def load_settings() -> Settings:
    """Restore settings from ``SETTINGS_FILE``, falling back to defaults."""
    if not os.path.exists(SETTINGS_FILE):
        return Settings()
    try:
        with open(SETTINGS_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Settings(**{k: v for k, v in data.items() if k in PERSISTED_KEYS})
    except (OSError, ValueError, AttributeError, PydanticValidationError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_FILE, exc)
        return Settings()


def save_settings(settings: Settings) -> None:
    """Persist ``settings`` to ``SETTINGS_FILE``."""
    data = {k: v for k, v in settings.model_dump().items() if k in PERSISTED_KEYS}
    with open(SETTINGS_FILE, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def configure_logging(level: int = logging.INFO, name: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler to the ``name`` logger once and set its level."""
    target = logging.getLogger(name)
    if not any(h.get_name() == HANDLER_NAME for h in target.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        target.addHandler(handler)
    target.setLevel(level)
    return target
