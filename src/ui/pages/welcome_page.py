"""
Welcome page module for the Legal Document Assistant.

Lists the workflow templates and starts a new workflow from the one selected.
"""

import streamlit as st

from src.workflows.workflow import WORKFLOW_TEMPLATES, start_workflow
from src.ui.pages.components import open_workflow


def show_welcome_page():
    """
    Displays the workflow templates with a start button for each
    """
    st.title("⚖️ Legal Document Assistant")
    st.markdown("Upload a legal document template and complete its fields through a guided conversation.")

    st.subheader("📄 Start a New Workflow")
    columns = st.columns(len(WORKFLOW_TEMPLATES))
    for column, template in zip(columns, WORKFLOW_TEMPLATES):
        with column:
            with st.container(border=True):
                st.markdown(f"### {template['name']}")
                st.markdown(template["description"])
                st.caption(f"⏱️ {template['estimated_time']}")
                for doc_name in template["documents"]:
                    st.markdown(f"- {doc_name}")
                if st.button("Start", key=f"start_{template['id']}", type="primary", width="stretch"):
                    workflow = start_workflow(template["id"], owner_id=st.session_state.owner_id)
                    open_workflow(workflow)
                    st.rerun()
