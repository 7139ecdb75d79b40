"""
Workflow Components

Widgets shared by the workflow and saved-workflows pages:
- Field cards with confidence badges
- The completion conversation
- Progress through the dialogue
"""

from typing import List

import streamlit as st

from src.utils.db import save_workflow
from src.llm.confidence import confidence_breakdown, format_confidence, get_confidence_level
from src.workflows.dialogue import DialogueEngine
from src.workflows.models import ConversationTurn, Field, Workflow

CONFIDENCE_BADGES = {
    "high": "🟢",
    "medium": "🟡",
    "low": "🔴",
}


def open_workflow(workflow: Workflow):
    """Makes a workflow the current one and opens it on the workflow page."""
    st.session_state.workflow = workflow
    engine = DialogueEngine(workflow, on_complete=save_workflow)
    if workflow.stage == "dialogue":
        engine.resume()
    st.session_state.dialogue_engine = engine
    st.session_state.current_page = "Workflow"


def render_field_card(field: Field):
    badge = CONFIDENCE_BADGES[get_confidence_level(field.confidence)]
    with st.container(border=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{field.label}**  `{field.placeholder}`")
            st.caption(f"Type: {field.type} | {field.validation_rule}")
            if field.suggestion:
                st.caption(f"Suggestion: {field.suggestion}")
            if field.advisory_note:
                st.caption(f"⚖️ {field.advisory_note}")
        with col2:
            st.markdown(f"{badge} {format_confidence(field.confidence)}")
            if field.value:
                st.success(field.value)


def render_field_overview(fields: List[Field]):
    """Summary counts per confidence level followed by one card per field."""
    counts = confidence_breakdown(fields)
    col1, col2, col3 = st.columns(3)
    col1.metric("High confidence", counts["high"])
    col2.metric("Medium confidence", counts["medium"])
    col3.metric("Low confidence", counts["low"])

    for field in fields:
        render_field_card(field)


def render_conversation(conversation: List[ConversationTurn]):
    for turn in conversation:
        with st.chat_message(turn.role):
            st.markdown(turn.text)


def render_progress(engine: DialogueEngine):
    answered, total = engine.progress()
    if total:
        st.progress(answered / total, text=f"{answered} of {total} fields completed")
