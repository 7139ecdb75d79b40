"""
Dialogue Engine

Collects a value for every field of a workflow, one field at a time, in list
order. The engine keeps an explicit cursor (active_field_id) instead of
re-reading the conversation to find out which field an answer belongs to.

Usage:
    engine = DialogueEngine(workflow, on_complete=save_workflow)
    engine.start()                      # asks for the first unanswered field
    result = engine.submit_answer("95000")
    if result.outcome == "invalid":
        ...                             # same field is still active
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Literal, Optional, Tuple

from src.llm.validation import validate_field_value
from src.workflows.errors import DialogueStateError, NoActiveFieldError, ValidationError
from src.workflows.models import ConversationTurn, Field, Workflow

logger = logging.getLogger(__name__)

Outcome = Literal["accepted", "invalid", "completed", "no_active_field"]

SUGGESTION_PROMPT = "Would you like to use this suggestion, or provide your own value?"
VALUE_PROMPT = "Please provide the value for this field."
COMPLIANCE_PASSED = "Legal compliance check: Passed"
COMPLETION_MESSAGE = (
    "**Document Complete!**\n\n"
    "All fields have been successfully filled and validated. Your document is ready for:\n\n"
    "- Preview & Download\n"
    "- E-signature (if configured)\n"
    "- Payment processing (if applicable)\n\n"
    "Would you like to proceed to review?"
)
NO_ACTIVE_FIELD_MESSAGE = "No field is waiting for an answer."


@dataclass
class DialogueResult:
    outcome: Outcome
    field_id: Optional[str] = None
    error: Optional[str] = None


class DialogueEngine:
    """Drives the one-field-at-a-time completion dialogue for a single workflow."""

    def __init__(self, workflow: Workflow,
                 on_complete: Optional[Callable[[Workflow], object]] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.workflow = workflow
        self.active_field_id: Optional[str] = None
        self._on_complete = on_complete
        self._clock = clock
        self._finalized = workflow.is_completed

    # -- state --------------------------------------------------------------

    @property
    def active_field(self) -> Optional[Field]:
        if self.active_field_id is None:
            return None
        field = self.workflow.get_field(self.active_field_id)
        if field is None:
            raise DialogueStateError(f"Active field '{self.active_field_id}' is not in workflow {self.workflow.id}")
        return field

    @property
    def is_complete(self) -> bool:
        return self.workflow.is_completed

    def progress(self) -> Tuple[int, int]:
        """(answered, total) field counts."""
        fields = self.workflow.fields
        return sum(1 for f in fields if f.is_filled), len(fields)

    def _require_active_field(self) -> Field:
        field = self.active_field
        if field is None:
            raise NoActiveFieldError(NO_ACTIVE_FIELD_MESSAGE)
        return field

    def _append(self, role: str, text: str, field_id: Optional[str] = None) -> ConversationTurn:
        turn = ConversationTurn(role=role, text=text, timestamp=self._clock(), field_id=field_id)
        self.workflow.conversation.append(turn)
        return turn

    # -- operations ---------------------------------------------------------

    def start(self) -> Optional[Field]:
        """
        Enters the dialogue stage and asks for the first unanswered field.

        Raises:
            DialogueStateError: if the workflow has no fields at all
        """
        if not self.workflow.fields:
            raise DialogueStateError(f"Workflow {self.workflow.id} has no fields to complete")
        if self.is_complete:
            return None

        self.workflow.stage = "dialogue"
        next_field = self.workflow.next_unfilled_field()
        if next_field is None:
            self._complete()
            return None
        self.ask_for_field(next_field)
        return next_field

    def ask_for_field(self, field: Field) -> ConversationTurn:
        """Presents a field to the user and makes it the active field."""
        parts = [f"**{field.label}**"]
        if field.suggestion:
            parts.append(f"Suggestion: \"{field.suggestion}\"")
        if field.advisory_note:
            parts.append(f"Legal Note: {field.advisory_note}")
        parts.append(SUGGESTION_PROMPT if field.suggestion else VALUE_PROMPT)

        self.active_field_id = field.id
        return self._append("assistant", "\n\n".join(parts), field_id=field.id)

    def submit_answer(self, raw_input: Optional[str]) -> DialogueResult:
        """
        Records an answer for the active field.

        Invalid answers leave the same field active. A valid answer is stored
        trimmed, then the next unanswered field is asked for, or the workflow
        moves to review once none remain. With no active field nothing is
        changed and the outcome is "no_active_field".
        """
        try:
            field = self._require_active_field()
        except NoActiveFieldError as e:
            logger.info(f"Ignoring answer for workflow {self.workflow.id}: {e}")
            return DialogueResult("no_active_field", error=str(e))

        answer = (raw_input or "").strip()
        self._append("user", answer)

        try:
            self._validate(field, answer)
        except ValidationError as e:
            self._append(
                "assistant",
                f"Validation Error\n\n{e.message}\n\nPlease try again with a valid {field.label}.",
            )
            return DialogueResult("invalid", field_id=field.id, error=e.message)

        field.value = answer
        confirmation = f"Perfect! I've recorded \"{answer}\" for {field.label}."
        if field.advisory_note:
            confirmation += f"\n\n{COMPLIANCE_PASSED}"
        self._append("assistant", confirmation)

        next_field = self.workflow.next_unfilled_field()
        if next_field is not None:
            self.ask_for_field(next_field)
            return DialogueResult("accepted", field_id=field.id)

        self._complete()
        return DialogueResult("completed", field_id=field.id)

    def use_suggestion(self) -> DialogueResult:
        """Answers the active field with its suggestion."""
        field = self.active_field
        if field is None:
            return DialogueResult("no_active_field", error=NO_ACTIVE_FIELD_MESSAGE)
        if not field.suggestion:
            return DialogueResult("invalid", field_id=field.id, error="There is no suggestion for this field.")
        return self.submit_answer(field.suggestion)

    def resume(self) -> Optional[Field]:
        """
        Picks a saved workflow back up. The pending question is only asked
        again when it is not already the last turn of the conversation.
        """
        if self.is_complete or not self.workflow.fields:
            return None
        next_field = self.workflow.next_unfilled_field()
        if next_field is None:
            self._complete()
            return None
        self.workflow.stage = "dialogue"
        conversation = self.workflow.conversation
        if conversation and conversation[-1].field_id == next_field.id:
            self.active_field_id = next_field.id
            return next_field
        self.ask_for_field(next_field)
        return next_field

    def restart(self) -> Optional[Field]:
        """Clears every answer and the conversation, then starts again."""
        for field in self.workflow.fields:
            field.value = ""
        self.workflow.conversation.clear()
        self.workflow.status = "in_progress"
        self.workflow.completed_at = None
        self.active_field_id = None
        self._finalized = False
        return self.start()

    # -- internals ----------------------------------------------------------

    def _validate(self, field: Field, answer: str) -> None:
        result = validate_field_value(answer, field.type)
        if not result.valid:
            raise ValidationError(result.error, field_id=field.id)

    def _complete(self) -> None:
        if any(not f.is_filled for f in self.workflow.fields):
            raise DialogueStateError(f"Workflow {self.workflow.id} cannot complete with empty fields")

        self.active_field_id = None
        self._append("assistant", COMPLETION_MESSAGE)
        self.workflow.stage = "review"
        self.workflow.status = "completed"
        self.workflow.completed_at = self._clock()
        logger.info(f"Workflow {self.workflow.id} completed with {len(self.workflow.fields)} fields.")

        if self._on_complete is not None and not self._finalized:
            self._finalized = True
            self._on_complete(self.workflow)
