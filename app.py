import logging
import os

import streamlit as st

from src.ui import (
    show_welcome_page, show_workflow_page, show_saved_workflows_page
)
from src.utils.db import init_db

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(), format='%(asctime)s - %(levelname)s - %(message)s')

PAGES = {
    "Welcome": show_welcome_page,
    "Workflow": show_workflow_page,
    "Saved Workflows": show_saved_workflows_page,
}

# --- App State Initialization ---
def initialize_session_state():
    if "current_page" not in st.session_state: st.session_state.current_page = "Welcome"
    if "workflow" not in st.session_state: st.session_state.workflow = None
    if "dialogue_engine" not in st.session_state: st.session_state.dialogue_engine = None
    if "owner_id" not in st.session_state: st.session_state.owner_id = os.getenv("DOC_ASSIST_OWNER_ID") or "local-user"


def main():
    st.set_page_config(layout="wide", page_title="Legal Document Assistant")
    initialize_session_state()
    init_db()

    st.sidebar.title("Navigation")
    page_options = list(PAGES)
    default_page_index = page_options.index(st.session_state.current_page)
    # Without a key the radio follows current_page when a page switches it.
    selected_page = st.sidebar.radio("Go to", page_options, index=default_page_index)
    if selected_page != st.session_state.current_page:
        st.session_state.current_page = selected_page
        st.rerun()

    workflow = st.session_state.workflow
    if workflow is not None:
        st.sidebar.markdown("---")
        st.sidebar.markdown(f"**Current workflow:** {workflow.name}")
        st.sidebar.caption(f"Stage: {workflow.stage} | Status: {workflow.status}")

    PAGES[st.session_state.current_page]()


if __name__ == "__main__":
    main()
