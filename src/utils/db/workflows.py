"""
Workflow database operations - store and retrieve workflow records by id and by owner.
"""

import logging
import sqlite3
from datetime import datetime
from typing import List, Optional

from src.workflows.models import Workflow

from .base import DB_PATH

logger = logging.getLogger(__name__)

WORKFLOW_COLUMNS = [
    "id", "owner_id", "template_id", "name", "status", "stage", "file_name",
    "original_text", "document_type", "jurisdiction", "fields_json",
    "conversation_json", "created_at", "completed_at",
]


def save_workflow(workflow: Workflow, db_path: str = DB_PATH) -> bool:
    """
    Inserts or updates a workflow record.

    Args:
        workflow: The workflow to persist
        db_path: Path to the SQLite database file

    Returns:
        bool: True if successful, False otherwise
    """
    record = workflow.to_record()
    updated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    conn = None
    try:
        conn = sqlite3.connect(db_path)
        cursor = conn.cursor()

        cursor.execute("SELECT id FROM workflows WHERE id = ?", (workflow.id,))
        existing = cursor.fetchone()

        if existing:
            assignments = ", ".join(f"{col} = ?" for col in WORKFLOW_COLUMNS if col != "id")
            values = [record[col] for col in WORKFLOW_COLUMNS if col != "id"]
            cursor.execute(
                f"UPDATE workflows SET {assignments}, updated_at = ? WHERE id = ?",
                values + [updated_at, workflow.id],
            )
        else:
            columns = ", ".join(WORKFLOW_COLUMNS + ["updated_at"])
            placeholders = ", ".join("?" for _ in range(len(WORKFLOW_COLUMNS) + 1))
            cursor.execute(
                f"INSERT INTO workflows ({columns}) VALUES ({placeholders})",
                [record[col] for col in WORKFLOW_COLUMNS] + [updated_at],
            )

        conn.commit()
        logger.info(f"Saved workflow {workflow.id} ({workflow.status}, stage {workflow.stage})")
        return True
    except sqlite3.Error as e:
        logger.error(f"Database error saving workflow {workflow.id}: {e}")
        return False
    finally:
        if conn:
            conn.close()


def _row_to_workflow(row: sqlite3.Row) -> Workflow:
    return Workflow.from_record({col: row[col] for col in WORKFLOW_COLUMNS})


def load_workflow(workflow_id: str, db_path: str = DB_PATH) -> Optional[Workflow]:
    """
    Loads a workflow by id.

    Returns:
        The Workflow if found, None otherwise
    """
    conn = None
    try:
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        cursor = conn.cursor()

        cursor.execute(f"SELECT {', '.join(WORKFLOW_COLUMNS)} FROM workflows WHERE id = ?", (workflow_id,))
        row = cursor.fetchone()
        return _row_to_workflow(row) if row else None
    except sqlite3.Error as e:
        logger.error(f"Database error loading workflow {workflow_id}: {e}")
        return None
    finally:
        if conn:
            conn.close()


def load_workflows_for_owner(owner_id: Optional[str], db_path: str = DB_PATH) -> List[Workflow]:
    """
    Loads every workflow belonging to an owner, newest first.

    Args:
        owner_id: Owner identifier; None loads workflows saved without an owner
    """
    conn = None
    try:
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        cursor = conn.cursor()

        cursor.execute(f"""
        SELECT {', '.join(WORKFLOW_COLUMNS)} FROM workflows
        WHERE owner_id IS ?
        ORDER BY created_at DESC
        """, (owner_id,))
        return [_row_to_workflow(row) for row in cursor.fetchall()]
    except sqlite3.Error as e:
        logger.error(f"Database error loading workflows for owner {owner_id}: {e}")
        return []
    finally:
        if conn:
            conn.close()


def delete_workflow(workflow_id: str, db_path: str = DB_PATH) -> bool:
    """
    Deletes a workflow record.

    Returns:
        bool: True if a row was deleted, False otherwise
    """
    conn = None
    try:
        conn = sqlite3.connect(db_path)
        cursor = conn.cursor()

        cursor.execute("DELETE FROM workflows WHERE id = ?", (workflow_id,))
        conn.commit()

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted workflow {workflow_id}")
        return deleted
    except sqlite3.Error as e:
        logger.error(f"Database error deleting workflow {workflow_id}: {e}")
        return False
    finally:
        if conn:
            conn.close()
