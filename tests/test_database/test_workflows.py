"""
Unit tests for workflow persistence (src/utils/db/workflows.py).
"""

import sqlite3
from datetime import datetime

import pytest

from src.utils.db import (
    delete_workflow,
    get_connection,
    load_workflow,
    load_workflows_for_owner,
    save_workflow,
)
from src.workflows.models import ConversationTurn


@pytest.mark.database
class TestSaveWorkflow:

    def test_insert_and_load(self, temp_db_path, workflow_factory, field_factory):
        workflow = workflow_factory(
            owner_id="user-1",
            fields=[field_factory("Salary", type="number", value="95000")],
            conversation=[ConversationTurn(role="user", text="95000")],
        )

        assert save_workflow(workflow, db_path=str(temp_db_path)) is True

        loaded = load_workflow(workflow.id, db_path=str(temp_db_path))
        assert loaded == workflow

    def test_update_existing(self, temp_db_path, workflow_factory, field_factory):
        workflow = workflow_factory(fields=[field_factory("Salary", type="number")])
        save_workflow(workflow, db_path=str(temp_db_path))

        workflow.fields[0].value = "95000"
        workflow.status = "completed"
        assert save_workflow(workflow, db_path=str(temp_db_path)) is True

        loaded = load_workflow(workflow.id, db_path=str(temp_db_path))
        assert loaded.fields[0].value == "95000"
        assert loaded.is_completed

        conn = get_connection(str(temp_db_path))
        try:
            count = conn.execute("SELECT COUNT(*) FROM workflows").fetchone()[0]
        finally:
            conn.close()
        assert count == 1

    def test_save_without_table_fails(self, tmp_path, workflow_factory):
        db_path = tmp_path / "empty.db"
        sqlite3.connect(str(db_path)).close()
        assert save_workflow(workflow_factory(), db_path=str(db_path)) is False


@pytest.mark.database
class TestLoadWorkflows:

    def test_missing_workflow(self, temp_db_path):
        assert load_workflow("wf_missing", db_path=str(temp_db_path)) is None

    def test_by_owner_newest_first(self, temp_db_path, workflow_factory):
        older = workflow_factory(owner_id="user-1", created_at=datetime(2024, 1, 1, 9, 0))
        newer = workflow_factory(owner_id="user-1", created_at=datetime(2024, 2, 1, 9, 0))
        other = workflow_factory(owner_id="user-2")
        for workflow in (older, newer, other):
            save_workflow(workflow, db_path=str(temp_db_path))

        loaded = load_workflows_for_owner("user-1", db_path=str(temp_db_path))
        assert [w.id for w in loaded] == [newer.id, older.id]

    def test_workflows_without_owner(self, temp_db_path, workflow_factory):
        anonymous = workflow_factory()
        save_workflow(anonymous, db_path=str(temp_db_path))
        save_workflow(workflow_factory(owner_id="user-1"), db_path=str(temp_db_path))

        loaded = load_workflows_for_owner(None, db_path=str(temp_db_path))
        assert [w.id for w in loaded] == [anonymous.id]

    def test_unknown_owner(self, temp_db_path):
        assert load_workflows_for_owner("nobody", db_path=str(temp_db_path)) == []


@pytest.mark.database
class TestDeleteWorkflow:

    def test_delete(self, temp_db_path, workflow_factory):
        workflow = workflow_factory()
        save_workflow(workflow, db_path=str(temp_db_path))

        assert delete_workflow(workflow.id, db_path=str(temp_db_path)) is True
        assert load_workflow(workflow.id, db_path=str(temp_db_path)) is None

    def test_delete_missing(self, temp_db_path):
        assert delete_workflow("wf_missing", db_path=str(temp_db_path)) is False
