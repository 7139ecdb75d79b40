"""
Document completion workflows.

Modules:
- models: Field, ConversationTurn and Workflow data model
- errors: error types raised and reported by the workflow core
- workflow: workflow creation, field extraction and final rendering
- dialogue: the one-field-at-a-time completion dialogue
"""
