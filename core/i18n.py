"""Translation lookups against a loaded table and a selected language."""
from __future__ import annotations

import copy
import logging
import os
import threading
from typing import Dict, FrozenSet, List, Optional

from core import events as ev
from core.config import BASE_LANGUAGE, DEFAULT_TRANSLATION_FILE
from core.errors import LoadError, ValidationError
from core.events import EventLog
from core.table import TranslationTable, read_table

logger = logging.getLogger(__name__)


class TranslationStore:
    """Holds one translation table and the currently selected language.

    Lookups against the base language return the text unchanged. Any other
    language is looked up in the table; a missing language or key falls back
    to the original text and is reported through logging and ``events``.

    The table, its languages and its source path live in a single immutable
    snapshot that is replaced whole on every successful load. A failed load
    leaves the previous snapshot in place.
    """

    def __init__(
        self,
        file_path: str = DEFAULT_TRANSLATION_FILE,
        base_language: str = BASE_LANGUAGE,
        events: Optional[EventLog] = None,
    ) -> None:
        self.base_language = base_language
        self.events = events
        self._lock = threading.RLock()
        self._snapshot = TranslationTable(path=file_path)
        self._current_language = base_language
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: Optional[str] = None) -> None:
        """Load ``path`` (or the stored path) and replace the current table.

        Raises :class:`LoadError` if the source cannot be read; the store then
        keeps the table, languages and path it had before.
        """
        with self._lock:
            target = self._snapshot.path if path is None else path
            try:
                snapshot = read_table(target)
            except LoadError as exc:
                logger.error("%s", exc)
                self._record(ev.LOAD_FAILED, detail=str(exc))
                raise
            self._snapshot = snapshot
            self._loaded = True
            logger.info(
                "Loaded %d languages from %s", len(snapshot.languages), snapshot.path
            )
            self._record(ev.LOADED, detail=snapshot.path)
            self._revalidate_language()

    def reload(self, path: Optional[str] = None) -> None:
        """Replace table and languages wholesale from ``path``."""
        self.load(path)

    def set_file_path(self, file_path: str) -> None:
        """Point the store at a new source file and reload it."""
        if file_path is None or not str(file_path).strip():
            raise ValidationError("File path cannot be null or empty")
        file_path = str(file_path).strip()
        if not os.path.exists(file_path):
            logger.warning("Translation file does not exist: %s", file_path)
        self.reload(file_path)

    def _revalidate_language(self) -> None:
        current = self._current_language
        if current == self.base_language or current in self._snapshot.available:
            return
        logger.warning(
            "Language %s is not offered by %s; falling back to %s",
            current, self._snapshot.path, self.base_language,
        )
        self._current_language = self.base_language
        self._record(ev.LANGUAGE_RESET, detail=current)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _view(self):
        with self._lock:
            return self._snapshot, self._current_language

    def translate(self, text: str) -> str:
        """Translate ``text`` to the current language, or return it unchanged."""
        if text is None:
            raise ValidationError("Text to translate cannot be null")
        snapshot, language = self._view()
        if language == self.base_language:
            return text

        translations = snapshot.entries.get(language)
        if translations is None:
            logger.warning("No translations found for language: %s", language)
            self._record(ev.LANGUAGE_MISSING, language=language, key=text)
            return text

        translation = translations.get(text)
        if not translation:
            logger.info("Missing translation for key: %s", text)
            self._record(ev.TRANSLATION_MISSING, language=language, key=text)
            return text
        return translation

    def has_translation(self, text: str) -> bool:
        """Return whether :meth:`translate` would produce a translated value."""
        if text is None:
            raise ValidationError("Text to check cannot be null")
        snapshot, language = self._view()
        if language == self.base_language:
            return True
        return bool(snapshot.lookup(language, text))

    # ------------------------------------------------------------------
    # Language state
    # ------------------------------------------------------------------

    def set_current_language(self, language: str) -> None:
        """Select ``language`` for subsequent lookups.

        Raises :class:`ValidationError` and keeps the current language when
        ``language`` is neither the base language nor loaded.
        """
        if language is None:
            raise ValidationError("Language cannot be null")
        candidate = language.strip()
        with self._lock:
            available = self._snapshot.available
            if candidate != self.base_language and candidate not in available:
                raise ValidationError(
                    f"Language not available: {candidate}. "
                    f"Available languages: {sorted(available)}"
                )
            self._current_language = candidate
        logger.info("Language changed to: %s", candidate)
        self._record(ev.LANGUAGE_CHANGED, language=candidate)

    def get_current_language(self) -> str:
        return self._current_language

    def get_available_languages(self) -> FrozenSet[str]:
        return self._snapshot.available

    def get_languages(self) -> List[str]:
        """Available languages in header order."""
        return list(self._snapshot.languages)

    def get_file_path(self) -> str:
        return self._snapshot.path

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_table(self) -> Dict[str, Dict[str, str]]:
        """Return a copy of the table; changes to it do not affect the store."""
        return copy.deepcopy(self._snapshot.entries)

    def get_keys(self) -> List[str]:
        keys = set()
        for translations in self._snapshot.entries.values():
            keys.update(translations)
        return sorted(keys)

    def _record(self, kind: str, language: Optional[str] = None, key: Optional[str] = None, detail: str = "") -> None:
        if self.events is not None:
            self.events.record(kind, language or self._current_language, key, detail)
