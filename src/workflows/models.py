"""
Data model for document workflows.

- Field: one classified placeholder and its collected value
- ConversationTurn: one message in the completion dialogue
- Workflow: a single document run from upload to review

Workflow.to_record() flattens a workflow for the persistence layer
(src.utils.db.workflows); Workflow.from_record() rebuilds it.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field as PydanticField, field_validator


FieldType = Literal["text", "email", "date", "number", "textarea"]
FIELD_TYPES = ("text", "email", "date", "number", "textarea")

TurnRole = Literal["assistant", "user"]
WorkflowStatus = Literal["in_progress", "completed"]
WorkflowStage = Literal["upload", "extract", "dialogue", "review"]


class FieldClassification(BaseModel):
    """What the classifier knows about a placeholder (no id, placeholder or value)."""
    label: str = PydanticField(..., description="Human readable field name")
    type: FieldType = PydanticField("text", description="Expected answer type")
    confidence: float = PydanticField(0.75, ge=0.0, le=1.0, description="Advisory confidence score")
    context: str = PydanticField("", description="Text surrounding the placeholder")
    suggestion: Optional[str] = PydanticField(None, description="Default value offered to the user")
    validation_rule: str = PydanticField("Required field", description="Human readable validation rule")
    advisory_note: Optional[str] = PydanticField(None, description="Legal note shown with the question")

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, v):
        """Keep confidence inside [0, 1]."""
        if v is None:
            return 0.75
        try:
            v = float(v)
            return max(0.0, min(1.0, v))
        except (ValueError, TypeError):
            return 0.75


class Field(FieldClassification):
    """A placeholder field in a workflow."""
    id: str
    placeholder: str
    value: str = ""

    @property
    def is_filled(self) -> bool:
        return bool(self.value)

    @classmethod
    def from_classification(cls, field_id: str, placeholder: str,
                            classification: FieldClassification) -> "Field":
        return cls(id=field_id, placeholder=placeholder, **classification.model_dump())


class ConversationTurn(BaseModel):
    role: TurnRole
    text: str
    timestamp: datetime = PydanticField(default_factory=datetime.now)
    field_id: Optional[str] = None


class Workflow(BaseModel):
    """One document completion run."""
    id: str
    template_id: str
    name: str
    status: WorkflowStatus = "in_progress"
    stage: WorkflowStage = "upload"
    owner_id: Optional[str] = None
    file_name: Optional[str] = None
    original_text: str = ""
    document_type: Optional[str] = None
    jurisdiction: Optional[str] = None
    fields: List[Field] = PydanticField(default_factory=list)
    conversation: List[ConversationTurn] = PydanticField(default_factory=list)
    created_at: datetime = PydanticField(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    def get_field(self, field_id: str) -> Optional[Field]:
        return next((f for f in self.fields if f.id == field_id), None)

    def next_unfilled_field(self) -> Optional[Field]:
        """First field in list order that still lacks a value."""
        return next((f for f in self.fields if not f.is_filled), None)

    def field_values(self) -> Dict[str, str]:
        """Placeholder -> collected value, for downstream collaborators."""
        return {f.placeholder: f.value for f in self.fields}

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    def to_record(self) -> Dict[str, Any]:
        """Flatten into scalars plus JSON strings for storage."""
        return {
            "id": self.id,
            "template_id": self.template_id,
            "name": self.name,
            "status": self.status,
            "stage": self.stage,
            "owner_id": self.owner_id,
            "file_name": self.file_name,
            "original_text": self.original_text,
            "document_type": self.document_type,
            "jurisdiction": self.jurisdiction,
            "fields_json": json.dumps([f.model_dump(mode="json") for f in self.fields]),
            "conversation_json": json.dumps([t.model_dump(mode="json") for t in self.conversation]),
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Workflow":
        data = dict(record)
        fields = json.loads(data.pop("fields_json", None) or "[]")
        conversation = json.loads(data.pop("conversation_json", None) or "[]")
        return cls(fields=fields, conversation=conversation, **data)
