import pandas as pd
import streamlit as st
from core.coverage import coverage_frame, missing_keys
from core.i18n import TranslationStore


def render_lookup(store: TranslationStore):
    """Free-text lookup against the current language."""
    t = store.translate
    text = st.text_input(t("Text to translate"), key="lookup_text")
    if text:
        # Reruns keep the input value; only look it up again when it or the
        # language changes.
        lookup = (text, store.get_current_language())
        if st.session_state.get("lookup_last") != lookup:
            st.session_state["lookup_last"] = lookup
            st.session_state["lookup_result"] = store.translate(text)
        result = st.session_state["lookup_result"]
        st.caption(f"{t('Translation')}: {result}")
        if not store.has_translation(text):
            st.info(f"No {store.get_current_language()} entry for '{text}'")


def render_coverage(store: TranslationStore):
    """Coverage per language plus the keys still untranslated."""
    t = store.translate
    st.header(t("Coverage"))
    frame = coverage_frame(store)
    if frame.empty:
        st.warning(f"No translations loaded from {store.get_file_path()}")
        return
    st.dataframe(frame, hide_index=True)
    current = store.get_current_language()
    if current in store.get_available_languages():
        missing = missing_keys(store, current)
        with st.expander(f"{t('Missing translations')} ({len(missing)})"):
            for key in missing:
                st.write(key)


def render_events(store: TranslationStore):
    if store.events is None:
        return
    with st.expander(store.translate("Events")):
        st.dataframe(pd.DataFrame(store.events.as_dict()), hide_index=True)
