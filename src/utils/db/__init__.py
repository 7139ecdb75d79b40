"""
Database utilities package - SQLite storage for document workflows.

Modules:
- base: Database initialization and connection management
- workflows: Workflow save/load by id and by owner

Usage:
    from src.utils.db import init_db, save_workflow, load_workflows_for_owner

    init_db()
    save_workflow(workflow)
    recent = load_workflows_for_owner("user-1")
"""

from .base import (
    DB_PATH,
    init_db,
    get_connection,
)

from .workflows import (
    save_workflow,
    load_workflow,
    load_workflows_for_owner,
    delete_workflow,
)

__all__ = [
    'DB_PATH',
    'init_db',
    'get_connection',

    'save_workflow',
    'load_workflow',
    'load_workflows_for_owner',
    'delete_workflow',
]
