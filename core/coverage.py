"""Translation coverage reporting."""
from __future__ import annotations

from typing import List

import pandas as pd

from core.errors import ValidationError
from core.i18n import TranslationStore

COLUMNS = ["language", "keys", "translated", "missing", "coverage_pct"]


def coverage_frame(store: TranslationStore) -> pd.DataFrame:
    """Return one row per loaded language, in header order."""
    table = store.get_table()
    total = len(store.get_keys())
    rows = []
    for language in store.get_languages():
        if language == store.base_language:
            translated = total
        else:
            translated = sum(1 for value in table.get(language, {}).values() if value)
        rows.append(
            {
                "language": language,
                "keys": total,
                "translated": translated,
                "missing": total - translated,
                "coverage_pct": round(100.0 * translated / total, 1) if total else 100.0,
            }
        )
    return pd.DataFrame(rows, columns=COLUMNS)


def missing_keys(store: TranslationStore, language: str) -> List[str]:
    """Keys with no usable value for ``language``."""
    if language not in store.get_available_languages():
        raise ValidationError(f"Language not available: {language}")
    if language == store.base_language:
        return []
    translations = store.get_table().get(language, {})
    return [key for key in store.get_keys() if not translations.get(key)]
