import streamlit as st
from core.config import Settings, save_settings
from core.errors import LoadError, ValidationError
from core.i18n import TranslationStore


def _persist(store: TranslationStore):
    save_settings(
        Settings(
            file_path=store.get_file_path(),
            language=store.get_current_language(),
            base_language=store.base_language,
        )
    )


def render_sidebar(store: TranslationStore):
    """Sidebar with the source file, a reload button and the language picker."""
    t = store.translate
    st.sidebar.header("Wordsmith")
    path = st.sidebar.text_input(
        t("Translation file"), value=store.get_file_path()
    )
    if st.sidebar.button(t("Reload"), key="reload"):
        try:
            store.set_file_path(path)
        except (LoadError, ValidationError) as exc:
            st.sidebar.error(str(exc))
        else:
            st.session_state.pop("lookup_last", None)
            _persist(store)

    languages = store.get_languages()
    if store.base_language not in languages:
        languages.insert(0, store.base_language)
    current = store.get_current_language()
    choice = st.sidebar.selectbox(
        t("Language"), languages, index=languages.index(current)
    )
    if choice != current:
        try:
            store.set_current_language(choice)
        except ValidationError as exc:
            st.sidebar.error(str(exc))
        else:
            _persist(store)
            st.rerun()
