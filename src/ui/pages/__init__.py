"""
Page modules for the Legal Document Assistant.

Each page module renders one page of the Streamlit application:
- welcome_page: Workflow template selection
- workflow_page: Upload, field review, completion dialogue and document review
- saved_workflows_page: Saved workflows of the current user, resume and delete

Reusable widgets live in src/ui/pages/components/.
"""

from .welcome_page import show_welcome_page
from .workflow_page import show_workflow_page
from .saved_workflows_page import show_saved_workflows_page

__all__ = [
    'show_welcome_page',
    'show_workflow_page',
    'show_saved_workflows_page',
]
