"""
Database base module - contains DB path constants and initialization.
This module provides the foundation for all database operations.
"""

import logging
import os
import sqlite3

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

# Define database connection path
DB_PATH = os.getenv("DOC_ASSIST_DB_PATH") or os.path.join("data", "workflows.db")


def get_connection(db_path: str = DB_PATH) -> sqlite3.Connection:
    """
    Creates and returns a database connection.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        sqlite3.Connection: Database connection object
    """
    conn = sqlite3.connect(db_path)
    return conn


def init_db(db_path: str = DB_PATH):
    """
    Initializes the SQLite database. Creates all required tables if they don't exist.

    Tables created:
    - workflows: One row per document workflow, fields and conversation as JSON
    """
    conn = None
    try:
        db_dir = os.path.dirname(db_path)
        if db_dir and not os.path.exists(db_dir):
            os.makedirs(db_dir)

        conn = sqlite3.connect(db_path)
        cursor = conn.cursor()

        cursor.execute("""
        CREATE TABLE IF NOT EXISTS workflows (
            id TEXT PRIMARY KEY,
            owner_id TEXT,
            template_id TEXT NOT NULL,
            name TEXT NOT NULL,
            status TEXT NOT NULL,
            stage TEXT NOT NULL,
            file_name TEXT,
            original_text TEXT,
            document_type TEXT,
            jurisdiction TEXT,
            fields_json TEXT NOT NULL,
            conversation_json TEXT NOT NULL,
            created_at TEXT NOT NULL,
            completed_at TEXT,
            updated_at TEXT NOT NULL
        )
        """)

        cursor.execute("CREATE INDEX IF NOT EXISTS idx_workflows_owner ON workflows (owner_id)")

        conn.commit()
        logger.info(f"Database '{db_path}' initialized with all required tables.")
    except sqlite3.Error as e:
        logger.error(f"Error initializing database: {e}")
    finally:
        if conn:
            conn.close()
