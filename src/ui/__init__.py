"""
UI modules for the Legal Document Assistant.

Page functions are re-exported here so app.py imports from one place.
"""

from src.ui.pages import (
    show_welcome_page,
    show_workflow_page,
    show_saved_workflows_page,
)

__all__ = [
    'show_welcome_page',
    'show_workflow_page',
    'show_saved_workflows_page',
]
