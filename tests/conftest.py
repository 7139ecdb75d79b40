"""
Pytest configuration and fixtures for Legal Document Assistant tests.

This module provides shared fixtures for all tests, including database setup,
sample documents, field and workflow factories, and a fixed clock.
"""

import pytest
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

from src.utils.db import init_db
from src.workflows.models import Field, Workflow


# ============================================================================
# PATH FIXTURES
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the root directory of the project."""
    return Path(__file__).parent.parent


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def temp_db_path(tmp_path):
    """
    Create an isolated test database in a temporary directory.

    Yields:
        Path: Path to the temporary test database
    """
    db_dir = tmp_path / "test_db"
    db_dir.mkdir(parents=True, exist_ok=True)
    db_path = db_dir / "test_workflows.db"

    init_db(str(db_path))

    yield db_path


# ============================================================================
# SAMPLE DOCUMENT FIXTURES
# ============================================================================

@pytest.fixture
def employment_text():
    """Employment agreement with a salary and a start date placeholder."""
    return (
        "EMPLOYMENT AGREEMENT\n\n"
        "This agreement is governed by the laws of the State of California.\n"
        "The Employee shall receive an annual salary of [Salary] payable monthly.\n"
        "Employment begins on [Start Date].\n"
    )


@pytest.fixture
def incorporation_text():
    """Certificate of incorporation using every placeholder syntax."""
    return (
        "CERTIFICATE OF INCORPORATION\n\n"
        "The name of the corporation is [Company Name], a Delaware corporation.\n"
        "The registered office is located at {Registered Address}.\n"
        "The corporation is authorized to issue __Authorized Shares__ shares.\n"
        "Notices shall be sent to [Contact Email].\n"
        "Incorporator signature: ________\n"
    )


@pytest.fixture
def today():
    return date(2024, 3, 15)


@pytest.fixture
def fixed_clock():
    """A clock that advances one second per call, starting at a fixed time."""
    state = {"now": datetime(2024, 3, 15, 9, 0, 0)}

    def clock():
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return clock


# ============================================================================
# FACTORY FIXTURES
# ============================================================================

@pytest.fixture
def field_factory():
    """
    Factory for Field objects with sensible defaults.

    Usage:
        field = field_factory("Salary", type="number")
    """
    counter = {"n": 0}

    def _make(placeholder: str, label: Optional[str] = None, **overrides) -> Field:
        data = {
            "id": f"field_{counter['n']}",
            "placeholder": placeholder,
            "label": label or placeholder,
            "type": "text",
            "confidence": 0.9,
        }
        data.update(overrides)
        counter["n"] += 1
        return Field(**data)

    return _make


@pytest.fixture
def workflow_factory():
    """
    Factory for Workflow objects.

    Usage:
        workflow = workflow_factory(fields=[...], owner_id="user-1")
    """
    counter = {"n": 0}

    def _make(**overrides) -> Workflow:
        data = {
            "id": f"wf_test{counter['n']}",
            "template_id": "custom-doc",
            "name": "Custom Document",
        }
        data.update(overrides)
        counter["n"] += 1
        return Workflow(**data)

    return _make


# ============================================================================
# PYTEST HOOKS
# ============================================================================

def pytest_configure(config):
    """Configure pytest at startup."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "database: mark test as a database test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
