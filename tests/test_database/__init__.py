"""
Database unit tests for the Legal Document Assistant.

Test modules:
- test_workflows.py: Workflow save, load, list by owner and delete

To run all database tests:
    pytest tests/test_database/ -v

To run with coverage:
    pytest tests/test_database/ --cov=src.utils.db --cov-report=html
"""
