import streamlit as st

from core.config import configure_logging
from core.events import EventLog
from ui.dashboard import render_coverage, render_events, render_lookup
from ui.sidebar import render_sidebar
from wordsmith import TranslationStore, __version__, create_store


def get_store() -> TranslationStore:
    """Return this session's store, creating and loading it on first use.

    Each browser session owns its own store so that one user's language
    choice never leaks into another session.
    """
    if "store" not in st.session_state:
        st.session_state["store"] = create_store(events=EventLog())
    return st.session_state["store"]


def main():
    configure_logging()
    st.set_page_config(page_title="Wordsmith", layout="wide")
    store = get_store()
    render_sidebar(store)

    st.title("Wordsmith")
    st.caption(f"v{__version__} • {store.get_file_path()}")
    if not store.is_loaded:
        st.error(f"Translations could not be loaded from {store.get_file_path()}")
    render_lookup(store)
    render_coverage(store)
    render_events(store)


if __name__ == "__main__":
    main()
