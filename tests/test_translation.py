import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from core.errors import LoadError, ValidationError
from core.events import (
    LANGUAGE_CHANGED,
    LANGUAGE_MISSING,
    LANGUAGE_RESET,
    LOAD_FAILED,
    TRANSLATION_MISSING,
    EventLog,
)
from core.i18n import TranslationStore

SAMPLE = "English,French\nhello,bonjour\nbye,au revoir\n"


def _write(tmp_path, text, name="translation.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def _store(tmp_path, text=SAMPLE, events=None):
    store = TranslationStore(file_path=_write(tmp_path, text), events=events)
    store.load()
    return store


def test_sample_scenario(tmp_path):
    store = _store(tmp_path)
    assert store.get_available_languages() == {"English", "French"}
    assert store.get_current_language() == "English"
    assert store.translate("hello") == "hello"
    store.set_current_language("French")
    assert store.translate("hello") == "bonjour"
    assert store.translate("bye") == "au revoir"
    assert store.translate("missing") == "missing"


def test_short_record_is_skipped(tmp_path):
    store = _store(tmp_path, "English,French\nonly_key\nhello,bonjour\n")
    store.set_current_language("French")
    assert not store.has_translation("only_key")
    assert store.translate("only_key") == "only_key"
    assert all("only_key" not in entries for entries in store.get_table().values())


def test_header_and_fields_are_trimmed(tmp_path):
    store = _store(tmp_path, " English , French \n hello ,  bonjour \n")
    assert store.get_available_languages() == {"English", "French"}
    store.set_current_language("French")
    assert store.translate("hello") == "bonjour"


def test_duplicate_header_last_column_wins(tmp_path):
    store = _store(tmp_path, "English,French,French\nhello,bonjour,salut\n")
    assert store.get_available_languages() == {"English", "French"}
    assert store.get_languages() == ["English", "French"]
    store.set_current_language("French")
    assert store.translate("hello") == "salut"


def test_base_language_is_identity(tmp_path):
    store = _store(tmp_path, "English,French\nhello,bonjour\nworld,Monde\n")
    store.set_current_language("French")
    store.set_current_language("English")
    assert store.translate("hello") == "hello"
    assert store.translate("not in any table") == "not in any table"
    assert store.has_translation("not in any table")


def test_stored_value_returned_verbatim(tmp_path):
    store = _store(tmp_path, "English,German\nstreet,Straße\nWelcome!,Willkommen!\n")
    store.set_current_language("German")
    assert store.translate("street") == "Straße"
    assert store.translate("Welcome!") == "Willkommen!"
    assert store.has_translation("street")


def test_empty_value_falls_back_and_is_reported(tmp_path):
    events = EventLog()
    store = _store(tmp_path, "English,Spanish\nyes,\nno,no\n", events=events)
    store.set_current_language("Spanish")
    assert store.translate("yes") == "yes"
    assert not store.has_translation("yes")
    missing = events.of_kind(TRANSLATION_MISSING)
    assert [(e.language, e.key) for e in missing] == [("Spanish", "yes")]


def test_has_translation_has_no_side_effects(tmp_path):
    events = EventLog()
    store = _store(tmp_path, events=events)
    store.set_current_language("French")
    events.clear()
    assert not store.has_translation("missing")
    assert events.entries == []


def test_unknown_language_rejected_and_kept(tmp_path):
    store = _store(tmp_path)
    store.set_current_language("French")
    for bad in ("german", "french", "Klingon", ""):
        with pytest.raises(ValidationError):
            store.set_current_language(bad)
        assert store.get_current_language() == "French"


def test_language_candidate_is_trimmed(tmp_path):
    events = EventLog()
    store = _store(tmp_path, events=events)
    store.set_current_language("  French ")
    assert store.get_current_language() == "French"
    assert events.of_kind(LANGUAGE_CHANGED)[-1].language == "French"


def test_base_language_always_selectable(tmp_path):
    store = _store(tmp_path, "Key,French\nhello,bonjour\n")
    store.set_current_language("English")
    assert store.get_current_language() == "English"


def test_null_arguments_rejected(tmp_path):
    store = _store(tmp_path)
    with pytest.raises(ValidationError):
        store.translate(None)
    with pytest.raises(ValidationError):
        store.has_translation(None)
    with pytest.raises(ValidationError):
        store.set_current_language(None)
    with pytest.raises(ValidationError):
        store.set_file_path("   ")


def test_available_languages_cannot_be_mutated(tmp_path):
    store = _store(tmp_path)
    languages = store.get_available_languages()
    with pytest.raises(AttributeError):
        languages.add("German")
    table = store.get_table()
    table["French"]["hello"] = "salut"
    store.set_current_language("French")
    assert store.translate("hello") == "bonjour"


def test_reload_is_idempotent(tmp_path):
    store = _store(tmp_path)
    store.reload(store.get_file_path())
    first = (store.get_table(), store.get_available_languages())
    store.reload(store.get_file_path())
    assert (store.get_table(), store.get_available_languages()) == (first[0], first[1])


def test_reload_replaces_table(tmp_path):
    store = _store(tmp_path)
    other = _write(tmp_path, "English,German\nhello,hallo\n", name="other.csv")
    store.set_file_path(other)
    assert store.get_file_path() == other
    assert store.get_available_languages() == {"English", "German"}
    assert "French" not in store.get_table()


def test_failed_reload_keeps_previous_state(tmp_path):
    events = EventLog()
    store = _store(tmp_path, events=events)
    store.set_current_language("French")
    path = store.get_file_path()
    before = store.get_table()

    with pytest.raises(LoadError) as info:
        store.set_file_path(str(tmp_path / "missing.csv"))

    assert info.value.path == str(tmp_path / "missing.csv")
    assert store.get_file_path() == path
    assert store.get_table() == before
    assert store.get_current_language() == "French"
    assert store.translate("hello") == "bonjour"
    assert len(events.of_kind(LOAD_FAILED)) == 1


def test_failed_first_load_stays_unloaded(tmp_path):
    store = TranslationStore(file_path=str(tmp_path / "absent.csv"))
    with pytest.raises(LoadError):
        store.load()
    assert not store.is_loaded
    assert store.get_available_languages() == frozenset()
    assert store.translate("hello") == "hello"


def test_reload_resets_language_no_longer_offered(tmp_path):
    events = EventLog()
    store = _store(tmp_path, events=events)
    store.set_current_language("French")
    store.reload(_write(tmp_path, "English,German\nhello,hallo\n", name="de.csv"))
    assert store.get_current_language() == "English"
    assert events.of_kind(LANGUAGE_RESET)[0].detail == "French"


def test_language_missing_from_table_falls_back(tmp_path):
    events = EventLog()
    store = _store(tmp_path, events=events)
    store._current_language = "Klingon"
    assert store.translate("hello") == "hello"
    assert not store.has_translation("hello")
    assert events.of_kind(LANGUAGE_MISSING)[0].key == "hello"


def test_trailing_delimiter_header_keeps_records(tmp_path):
    store = _store(tmp_path, "English,French,\nhello,bonjour\n")
    assert store.get_available_languages() == {"English", "French"}
    with pytest.raises(ValidationError):
        store.set_current_language("")
    store.set_current_language("French")
    assert store.translate("hello") == "bonjour"
