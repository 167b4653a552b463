"""Parsing of comma-delimited translation tables.

The first line names the languages. Every following line starts with the
lookup key and then holds one value per header column, in header order.
Column 0 is the base language, so its value is the key text itself.
Quoting is not supported: a value containing the delimiter is split.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from core.config import DELIMITER
from core.errors import LoadError

logger = logging.getLogger(__name__)

BOM = "\ufeff"


class TranslationTable(BaseModel):
    """Immutable snapshot of one loaded source."""

    model_config = ConfigDict(frozen=True)

    path: str = ""
    languages: Tuple[str, ...] = ()
    entries: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    @property
    def available(self) -> frozenset:
        return frozenset(self.languages)

    def lookup(self, language: str, key: str) -> str:
        """Return the stored value or ``""`` when there is none."""
        return self.entries.get(language, {}).get(key, "")


def _split(line: str) -> List[str]:
    return [field.strip() for field in line.split(DELIMITER)]


def parse_table(lines: Iterable[str], path: str = "") -> TranslationTable:
    """Build a :class:`TranslationTable` from the lines of a source file."""
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        return TranslationTable(path=path)

    columns = _split(header.lstrip(BOM).rstrip("\r\n"))
    # A trailing delimiter does not add a column.
    while columns and not columns[-1]:
        columns.pop()
    if "" in columns:
        logger.warning("Ignoring unnamed header column(s) in %s", path)
    # Header order with duplicates collapsed to their first position.
    languages = tuple(language for language in dict.fromkeys(columns) if language)
    entries: Dict[str, Dict[str, str]] = {language: {} for language in languages}

    for lineno, line in enumerate(rows, start=2):
        if not line.strip():
            continue
        fields = _split(line.rstrip("\r\n"))
        if len(fields) < len(columns):
            logger.debug(
                "Skipping short record on line %d of %s: %d of %d fields",
                lineno, path, len(fields), len(columns),
            )
            continue
        key = fields[0]
        for language, value in zip(columns, fields):
            if language:
                entries[language][key] = value

    return TranslationTable(path=path, languages=languages, entries=entries)


def read_table(path: str) -> TranslationTable:
    """Read ``path`` completely and parse it.

    Raises :class:`LoadError` when the file cannot be opened or decoded.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(path, str(exc)) from exc
    return parse_table(lines, path)
