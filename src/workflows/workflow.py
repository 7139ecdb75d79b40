"""
Workflow lifecycle: creation from a template, document extraction and the
final rendered document.

Stages: upload -> extract -> dialogue -> review. The dialogue stage itself is
driven by src.workflows.dialogue.DialogueEngine.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Dict, List, Optional

from src.llm.client import llm_classifier_enabled
from src.llm.confidence import average_confidence
from src.llm.extraction import classify_placeholder, classify_placeholder_via_llm
from src.utils.doc_filler import completed_filename, render_document
from src.utils.template_utils import detect_document_type, detect_jurisdiction, scan_placeholders
from src.workflows.errors import ExtractionError
from src.workflows.models import ConversationTurn, Field, FieldClassification, Workflow

logger = logging.getLogger(__name__)

Classifier = Callable[[str, str], FieldClassification]

WORKFLOW_TEMPLATES: List[Dict] = [
    {
        "id": "incorporation",
        "name": "Delaware C-Corp Formation",
        "description": "Form a Delaware C-Corporation with assisted document generation",
        "estimated_time": "15 min",
        "documents": ["Certificate of Incorporation", "Bylaws", "Stock Purchase Agreement"],
    },
    {
        "id": "employee-agreement",
        "name": "Employee Agreement",
        "description": "Generate compliant employment agreements with equity provisions",
        "estimated_time": "10 min",
        "documents": ["Employment Agreement", "Proprietary Information Agreement"],
    },
    {
        "id": "custom-doc",
        "name": "Custom Document",
        "description": "Upload any legal document and complete it field by field",
        "estimated_time": "5-20 min",
        "documents": ["Your uploaded document"],
    },
]


def get_workflow_template(template_id: str) -> Optional[Dict]:
    return next((t for t in WORKFLOW_TEMPLATES if t["id"] == template_id), None)


def start_workflow(template_id: str, owner_id: Optional[str] = None) -> Workflow:
    """Creates an empty workflow in the upload stage."""
    template = get_workflow_template(template_id)
    if template is None:
        raise ValueError(f"Unknown workflow template: {template_id}")
    return Workflow(
        id=f"wf_{uuid.uuid4().hex[:12]}",
        template_id=template_id,
        name=template["name"],
        owner_id=owner_id,
    )


def default_classifier() -> Classifier:
    return classify_placeholder_via_llm if llm_classifier_enabled() else classify_placeholder


def extract_fields(text, classifier: Optional[Classifier] = None) -> List[Field]:
    """
    Scans the text and classifies every placeholder, in scan order.

    Non-text input or an empty document yields no fields rather than an error.
    """
    classifier = classifier or default_classifier()
    try:
        placeholders = scan_placeholders(text)
    except ExtractionError as e:
        logger.warning(f"No fields extracted: {e}")
        return []

    return [
        Field.from_classification(f"field_{idx}", placeholder, classifier(placeholder, text))
        for idx, placeholder in enumerate(placeholders)
    ]


def build_analysis_summary(fields: List[Field], text: str) -> str:
    """Assistant message shown once extraction has finished."""
    if not fields:
        return (
            "Analysis Complete\n\n"
            "I couldn't find any placeholder fields in this document. "
            "Placeholders can be written as [Field], {Field}, __Field__ or a blank line ___."
        )
    return (
        "Analysis Complete!\n\n"
        f"I've processed your document and identified {len(fields)} fields.\n\n"
        "Key findings:\n"
        f"- Document type: {detect_document_type(text)}\n"
        f"- Jurisdiction detected: {detect_jurisdiction(text)}\n"
        f"- Average confidence: {round(average_confidence(fields) * 100)}%\n\n"
        "Let's complete these fields together."
    )


def load_document(workflow: Workflow, text: str, file_name: Optional[str] = None,
                  classifier: Optional[Classifier] = None) -> List[Field]:
    """
    Attaches document text to a workflow and extracts its fields.

    The field list is built completely before it is attached, so a classifier
    failure leaves the workflow as it was.
    """
    fields = extract_fields(text, classifier=classifier)

    workflow.original_text = text if isinstance(text, str) else ""
    workflow.file_name = file_name
    workflow.fields = fields
    workflow.stage = "extract"
    if workflow.original_text:
        workflow.document_type = detect_document_type(workflow.original_text)
        workflow.jurisdiction = detect_jurisdiction(workflow.original_text)
    workflow.conversation.append(
        ConversationTurn(role="assistant", text=build_analysis_summary(fields, workflow.original_text),
                         timestamp=datetime.now())
    )
    logger.info(f"Workflow {workflow.id}: extracted {len(fields)} fields from {file_name or 'pasted text'}")
    return fields


def final_text(workflow: Workflow) -> str:
    return render_document(workflow.original_text, workflow.fields)


def download_name(workflow: Workflow) -> str:
    return completed_filename(workflow.file_name or workflow.name)
