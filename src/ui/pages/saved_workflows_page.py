"""
Saved Workflows Page Module

Lists the workflows saved for the current user, newest first, with actions to
resume, download or delete each one.
"""

import streamlit as st

from src.utils.db import delete_workflow, load_workflows_for_owner
from src.workflows.workflow import download_name, final_text
from src.ui.pages.components import open_workflow


def show_saved_workflows_page():
    st.title("🗂️ Saved Workflows")

    workflows = load_workflows_for_owner(st.session_state.owner_id)
    if not workflows:
        st.info("No saved workflows yet. Start one from the Welcome page.")
        return

    for workflow in workflows:
        with st.container(border=True):
            col1, col2, col3 = st.columns([4, 1, 1])
            with col1:
                status_icon = "✅" if workflow.is_completed else "📝"
                st.markdown(f"### {status_icon} {workflow.name}")
                st.markdown(f"**File:** {workflow.file_name or 'N/A'}")
                filled = sum(1 for f in workflow.fields if f.is_filled)
                st.caption(
                    f"{filled}/{len(workflow.fields)} fields | "
                    f"Created {workflow.created_at.strftime('%Y-%m-%d %H:%M')}"
                )
            with col2:
                if workflow.is_completed:
                    st.download_button(
                        "Download",
                        data=final_text(workflow),
                        file_name=download_name(workflow),
                        mime="text/plain",
                        key=f"download_{workflow.id}",
                        width="stretch",
                    )
                elif st.button("Resume", key=f"resume_{workflow.id}", width="stretch"):
                    open_workflow(workflow)
                    st.rerun()
            with col3:
                if st.button("Delete", key=f"delete_{workflow.id}", width="stretch"):
                    if delete_workflow(workflow.id):
                        st.success(f"Deleted {workflow.name}.")
                    else:
                        st.error("Could not delete the workflow.")
                    st.rerun()
