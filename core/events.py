"""In-memory log of translation store events."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

LOADED = "loaded"
LOAD_FAILED = "load_failed"
LANGUAGE_CHANGED = "language_changed"
LANGUAGE_RESET = "language_reset"
LANGUAGE_MISSING = "language_missing"
TRANSLATION_MISSING = "translation_missing"

MAX_EVENTS = 500


@dataclass
class TranslationEvent:
    kind: str
    language: str
    key: Optional[str]
    detail: str
    timestamp: datetime


class EventLog:
    """Collects store events, keeping only the most recent ``limit`` entries."""

    def __init__(self, limit: int = MAX_EVENTS) -> None:
        self.limit = limit
        self.entries: List[TranslationEvent] = []

    def record(self, kind: str, language: str, key: Optional[str] = None, detail: str = "") -> None:
        """Record an event for ``language`` with a UTC timestamp."""
        self.entries.append(
            TranslationEvent(
                kind=kind,
                language=language,
                key=key,
                detail=detail,
                timestamp=datetime.now(timezone.utc),
            )
        )
        if len(self.entries) > self.limit:
            del self.entries[: len(self.entries) - self.limit]

    def of_kind(self, kind: str) -> List[TranslationEvent]:
        return [e for e in self.entries if e.kind == kind]

    def clear(self) -> None:
        self.entries.clear()

    def as_dict(self) -> List[dict]:
        """Return log entries as dictionaries for display or inspection."""
        return [
            {
                "kind": e.kind,
                "language": e.language,
                "key": e.key,
                "detail": e.detail,
                "timestamp": e.timestamp.isoformat(),
            }
            for e in self.entries
        ]
