"""
Unit tests for workflow creation, extraction and rendering (src/workflows/workflow.py).
"""

import pytest
from unittest.mock import Mock, patch

from src.workflows.dialogue import DialogueEngine
from src.workflows.models import FieldClassification
from src.workflows.workflow import (
    WORKFLOW_TEMPLATES,
    build_analysis_summary,
    default_classifier,
    download_name,
    extract_fields,
    final_text,
    get_workflow_template,
    load_document,
    start_workflow,
)
from src.llm.extraction import classify_placeholder, classify_placeholder_via_llm


@pytest.mark.unit
class TestStartWorkflow:

    def test_templates(self):
        assert [t["id"] for t in WORKFLOW_TEMPLATES] == ["incorporation", "employee-agreement", "custom-doc"]
        assert get_workflow_template("employee-agreement")["name"] == "Employee Agreement"
        assert get_workflow_template("missing") is None

    def test_new_workflow(self):
        workflow = start_workflow("incorporation", owner_id="user-1")
        assert workflow.id.startswith("wf_")
        assert workflow.name == "Delaware C-Corp Formation"
        assert workflow.owner_id == "user-1"
        assert workflow.stage == "upload"
        assert workflow.status == "in_progress"
        assert workflow.fields == []

    def test_ids_are_unique(self):
        assert start_workflow("custom-doc").id != start_workflow("custom-doc").id

    def test_unknown_template(self):
        with pytest.raises(ValueError):
            start_workflow("lease")


@pytest.mark.unit
class TestExtractFields:

    def test_fields_in_scan_order(self, incorporation_text):
        fields = extract_fields(incorporation_text, classifier=classify_placeholder)

        assert [f.id for f in fields] == ["field_0", "field_1", "field_2", "field_3", "field_4"]
        assert [f.placeholder for f in fields] == [
            "Company Name", "Contact Email", "Registered Address", "Authorized Shares", "Field_4",
        ]
        assert [f.type for f in fields] == ["text", "email", "textarea", "number", "text"]
        assert all(f.value == "" for f in fields)

    def test_empty_document_yields_no_fields(self):
        assert extract_fields("", classifier=classify_placeholder) == []

    def test_non_text_yields_no_fields(self):
        assert extract_fields(None, classifier=classify_placeholder) == []

    def test_custom_classifier(self):
        classifier = Mock(return_value=FieldClassification(label="X", confidence=0.5))
        fields = extract_fields("[A] [B]", classifier=classifier)
        assert [f.label for f in fields] == ["X", "X"]
        assert classifier.call_count == 2

    @patch('src.workflows.workflow.llm_classifier_enabled')
    def test_default_classifier_selection(self, mock_enabled):
        mock_enabled.return_value = False
        assert default_classifier() is classify_placeholder
        mock_enabled.return_value = True
        assert default_classifier() is classify_placeholder_via_llm


@pytest.mark.unit
class TestLoadDocument:

    def test_load_document(self, employment_text):
        workflow = start_workflow("employee-agreement")
        fields = load_document(workflow, employment_text, file_name="offer.docx", classifier=classify_placeholder)

        assert len(fields) == 2
        assert workflow.fields == fields
        assert workflow.stage == "extract"
        assert workflow.file_name == "offer.docx"
        assert workflow.document_type == "Employment Agreement"
        assert workflow.jurisdiction == "California"
        summary = workflow.conversation[-1].text
        assert "identified 2 fields" in summary
        assert "Jurisdiction detected: California" in summary
        assert "Average confidence: 92%" in summary

    def test_document_without_placeholders(self):
        workflow = start_workflow("custom-doc")
        fields = load_document(workflow, "Nothing to fill in.", classifier=classify_placeholder)
        assert fields == []
        assert "couldn't find any placeholder fields" in workflow.conversation[-1].text

    def test_classifier_failure_leaves_workflow_unchanged(self, employment_text):
        workflow = start_workflow("custom-doc")
        classifier = Mock(side_effect=RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            load_document(workflow, employment_text, classifier=classifier)
        assert workflow.fields == []
        assert workflow.stage == "upload"
        assert workflow.conversation == []


def test_build_analysis_summary_empty():
    assert build_analysis_summary([], "").startswith("Analysis Complete\n\n")


@pytest.mark.integration
class TestEndToEnd:
    """Upload, extract, answer every field and render."""

    def test_employment_agreement(self, employment_text):
        workflow = start_workflow("employee-agreement")
        load_document(workflow, employment_text, file_name="offer.docx", classifier=classify_placeholder)

        engine = DialogueEngine(workflow)
        engine.start()
        assert engine.submit_answer("abc").outcome == "invalid"
        assert engine.submit_answer("95000").outcome == "accepted"
        assert engine.submit_answer("2024-04-01").outcome == "completed"

        rendered = final_text(workflow)
        assert "annual salary of 95000 payable monthly" in rendered
        assert "Employment begins on 2024-04-01." in rendered
        assert "[" not in rendered
        assert download_name(workflow) == "offer_completed.txt"

    def test_download_name_without_file(self):
        workflow = start_workflow("incorporation")
        assert download_name(workflow) == "Delaware C-Corp Formation_completed.txt"
