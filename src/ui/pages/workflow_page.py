"""
Workflow Page Module

Walks the current workflow through its four stages:
1. Upload - upload a DOCX/TXT document or paste its text
2. Extract - review the detected fields and their confidence
3. Dialogue - answer one field at a time in the chat
4. Review - preview and download the completed document
"""

import logging
import os
import tempfile

import streamlit as st

from src.utils.db import save_workflow
from src.utils.doc_filler import read_document_text
from src.workflows.errors import DialogueStateError
from src.workflows.workflow import download_name, final_text, load_document
from src.ui.pages.components import (
    render_conversation,
    render_field_overview,
    render_progress,
)

logger = logging.getLogger(__name__)

STAGE_TITLES = {
    "upload": "1. Upload Document",
    "extract": "2. Review Fields",
    "dialogue": "3. Complete Fields",
    "review": "4. Review & Download",
}


def _read_uploaded_file(uploaded_file) -> str:
    """Writes the upload to a temp file and reads its text."""
    suffix = os.path.splitext(uploaded_file.name)[1]
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
        tmp.write(uploaded_file.getvalue())
        tmp_path = tmp.name
    try:
        return read_document_text(tmp_path)
    finally:
        os.remove(tmp_path)


def show_upload_stage(workflow):
    uploaded_file = st.file_uploader("Choose a document template", type=["docx", "txt"], key="document_uploader")
    pasted_text = st.text_area("...or paste the document text", height=250, key="document_paste")

    if st.button("Analyze Document", type="primary", width="stretch"):
        if uploaded_file is not None:
            try:
                text = _read_uploaded_file(uploaded_file)
            except ValueError as e:
                st.error(str(e))
                return
            file_name = uploaded_file.name
        elif pasted_text.strip():
            text, file_name = pasted_text, None
        else:
            st.warning("Upload a document or paste its text first.")
            return

        with st.spinner("Analyzing document..."):
            load_document(workflow, text, file_name=file_name)
        save_workflow(workflow)
        st.rerun()


def show_extract_stage(workflow, engine):
    render_conversation(workflow.conversation)
    if workflow.document_type:
        st.markdown(f"**Document type:** {workflow.document_type} | **Jurisdiction:** {workflow.jurisdiction}")

    if not workflow.fields:
        if st.button("Upload a different document"):
            workflow.stage = "upload"
            workflow.conversation.clear()
            st.rerun()
        return

    render_field_overview(workflow.fields)
    if st.button("Start Completing Fields", type="primary", width="stretch"):
        try:
            engine.start()
        except DialogueStateError as e:
            st.error(str(e))
            return
        save_workflow(workflow)
        st.rerun()


def show_dialogue_stage(workflow, engine):
    render_progress(engine)
    render_conversation(workflow.conversation)

    active = engine.active_field
    if active is not None and active.suggestion:
        if st.button(f"Use suggestion: {active.suggestion}", key=f"suggest_{active.id}"):
            engine.use_suggestion()
            save_workflow(workflow)
            st.rerun()

    if answer := st.chat_input("Type your answer..."):
        result = engine.submit_answer(answer)
        if result.outcome == "no_active_field":
            st.warning(result.error)
        save_workflow(workflow)
        st.rerun()


def show_review_stage(workflow, engine):
    st.success("All fields have been completed.")
    render_field_overview(workflow.fields)

    completed = final_text(workflow)
    st.subheader("Document Preview")
    st.text_area("Completed document", completed, height=400, disabled=True)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📥 Download Completed Document",
            data=completed,
            file_name=download_name(workflow),
            mime="text/plain",
            type="primary",
            width="stretch",
        )
    with col2:
        if st.button("Start Over", width="stretch"):
            engine.restart()
            save_workflow(workflow)
            st.rerun()

    with st.expander("Conversation history"):
        render_conversation(workflow.conversation)


def show_workflow_page():
    """
    Displays the current workflow at its current stage
    """
    workflow = st.session_state.get("workflow")
    engine = st.session_state.get("dialogue_engine")
    if workflow is None or engine is None:
        st.info("No workflow in progress. Start one from the Welcome page.")
        return

    st.title(workflow.name)
    st.subheader(STAGE_TITLES[workflow.stage])

    if workflow.stage == "upload":
        show_upload_stage(workflow)
    elif workflow.stage == "extract":
        show_extract_stage(workflow, engine)
    elif workflow.stage == "dialogue":
        show_dialogue_stage(workflow, engine)
    else:
        show_review_stage(workflow, engine)
