"""
Unit tests for the workflow core (src/workflows/).

Test modules:
- test_dialogue.py: The one-field-at-a-time completion dialogue
- test_workflow.py: Workflow creation, extraction and rendering
- test_models.py: Workflow model helpers and record round trip
"""
