"""Reusable Streamlit components for the workflow pages."""

from .workflow_components import (
    render_field_card,
    render_field_overview,
    render_conversation,
    render_progress,
    open_workflow,
)

__all__ = [
    'render_field_card',
    'render_field_overview',
    'render_conversation',
    'render_progress',
    'open_workflow',
]
