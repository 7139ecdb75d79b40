"""
Shared constants and types for field classification.

This module contains:
- FieldTemplate: the classification attached to a placeholder keyword
- FIELD_TEMPLATES: the ordered keyword table used by the keyword classifier
- FALLBACK_*: values for placeholders that match no keyword
- Confidence thresholds: Constants for categorizing confidence levels

The keyword table is a list, not a dict: lookup walks it in declared order and
the first keyword contained in the placeholder wins. A placeholder such as
"Company Name" therefore classifies as "company", not "name".
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class FieldTemplate:
    """Classification applied to any placeholder containing the keyword."""
    label: str
    type: str
    suggestion: Optional[str]
    validation_rule: str
    advisory_note: Optional[str]
    confidence: float
    suggest_today: bool = False


FIELD_TEMPLATES: List[Tuple[str, FieldTemplate]] = [
    ("company", FieldTemplate(
        label="Company Legal Name",
        type="text",
        suggestion="YourStartup, Inc.",
        validation_rule="Must include entity type (Inc., LLC, Corp.)",
        advisory_note="This will be your registered legal entity name",
        confidence=0.95,
    )),
    ("name", FieldTemplate(
        label="Full Legal Name",
        type="text",
        suggestion="John Doe",
        validation_rule="First and Last name required",
        advisory_note="Must match government-issued ID",
        confidence=0.90,
    )),
    ("date", FieldTemplate(
        label="Effective Date",
        type="date",
        suggestion=None,
        validation_rule="Must be a valid date",
        advisory_note="This is when the agreement becomes legally binding",
        confidence=0.93,
        suggest_today=True,
    )),
    ("address", FieldTemplate(
        label="Legal Address",
        type="textarea",
        suggestion="123 Main St, San Francisco, CA 94105",
        validation_rule="Complete street address required",
        advisory_note="This will be your registered business address",
        confidence=0.88,
    )),
    ("email", FieldTemplate(
        label="Email Address",
        type="email",
        suggestion="contact@yourcompany.com",
        validation_rule="Must be valid email format",
        advisory_note="Official communication address",
        confidence=0.97,
    )),
    ("shares", FieldTemplate(
        label="Number of Shares",
        type="number",
        suggestion="10000000",
        validation_rule="Must be a positive integer",
        advisory_note="Standard is 10M authorized shares for startups",
        confidence=0.92,
    )),
    ("salary", FieldTemplate(
        label="Annual Salary",
        type="number",
        suggestion="120000",
        validation_rule="Must be positive number",
        advisory_note="Ensure compliance with minimum wage laws",
        confidence=0.91,
    )),
]


# Placeholders that match no keyword
FALLBACK_LABEL = "Custom Field"
FALLBACK_VALIDATION_RULE = "Required field"
FALLBACK_ADVISORY_NOTE = "Please verify this information carefully"
FALLBACK_CONFIDENCE = 0.75

# Language-model classifications that pass validation
LLM_CONFIDENCE = 0.85


# Constants for confidence thresholds
CONFIDENCE_HIGH = 0.9  # Green indicator
CONFIDENCE_MEDIUM = 0.8  # Yellow indicator
CONFIDENCE_LOW = 0.5  # Red indicator - needs review
