"""
Error types for the document assistant workflow.

Everything here is recoverable except DialogueStateError, which signals
malformed internal state (for example a dialogue started with no fields).
"""

from dataclasses import dataclass


class DocumentAssistantError(Exception):
    """Base class for all document assistant errors."""


class ExtractionError(DocumentAssistantError):
    """Raised when the scanner receives non-text input or an empty document."""


class ValidationError(DocumentAssistantError):
    """An answer failed its field's type rule."""

    def __init__(self, message: str, field_id: str = None):
        super().__init__(message)
        self.message = message
        self.field_id = field_id


class NoActiveFieldError(DocumentAssistantError):
    """An answer was submitted while no field was awaiting one."""


class DialogueStateError(DocumentAssistantError):
    """The dialogue engine was asked to run against an unusable workflow."""


@dataclass(frozen=True)
class RenderSubstitutionConflict:
    """Two placeholders whose bracketed forms overlap during rendering."""
    placeholder: str
    contained_in: str

    def describe(self) -> str:
        return f"Placeholder '{self.placeholder}' is contained in '{self.contained_in}'"
