"""Wordsmith: CSV-backed translation lookups.

This module exposes the package version and builds ready-to-use stores."""
from __future__ import annotations

import logging
from typing import Optional

from core.config import load_settings
from core.errors import LoadError, TranslationError, ValidationError
from core.events import EventLog
from core.i18n import TranslationStore
from core.version import __version__

__all__ = [
    "EventLog",
    "LoadError",
    "TranslationError",
    "TranslationStore",
    "ValidationError",
    "__version__",
    "create_store",
]

logger = logging.getLogger(__name__)


def create_store(
    path: Optional[str] = None,
    base_language: Optional[str] = None,
    events: Optional[EventLog] = None,
) -> TranslationStore:
    """Build a store from saved settings and try the first load.

    A missing or unreadable source is logged and leaves the store empty, so
    every lookup falls back to the original text.
    """
    settings = load_settings()
    store = TranslationStore(
        file_path=path or settings.file_path,
        base_language=base_language or settings.base_language,
        events=events,
    )
    try:
        store.load()
    except LoadError:
        logger.warning("Starting with an empty translation table")
        return store
    if settings.language != store.get_current_language():
        try:
            store.set_current_language(settings.language)
        except ValidationError as exc:
            logger.warning("Saved language ignored: %s", exc)
    return store
