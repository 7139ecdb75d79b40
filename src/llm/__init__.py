"""
Field classification and validation for the Legal Document Assistant.

Architecture:
    - client: optional Gemini client used by the language-model classifier
    - constants: ordered keyword table, fallback values, confidence thresholds
    - confidence: advisory confidence helpers for display
    - validation: answer validation by field type, classifier response checks
    - extraction: keyword and language-model placeholder classifiers

Usage:
    >>> from src.llm import classify_placeholder, validate_field_value
    >>> classify_placeholder("salary", "... a salary of [salary] ...").type
    'number'
    >>> validate_field_value("abc", "number").valid
    False
"""

# Client configuration and model access
from .client import (
    configure_gemini_client,
    get_generative_model,
    llm_classifier_enabled,
)

# Constants and keyword table
from .constants import (
    CONFIDENCE_HIGH,
    CONFIDENCE_MEDIUM,
    CONFIDENCE_LOW,
    FieldTemplate,
    FIELD_TEMPLATES,
)

# Confidence helpers
from .confidence import (
    get_confidence_level,
    average_confidence,
    confidence_breakdown,
    format_confidence,
)

# Validation
from .validation import (
    ValidationResult,
    validate_field_value,
    validate_classification,
)

# Classification
from .extraction import (
    classify_placeholder,
    classify_placeholder_via_llm,
)

__all__ = [
    "configure_gemini_client",
    "get_generative_model",
    "llm_classifier_enabled",

    "CONFIDENCE_HIGH",
    "CONFIDENCE_MEDIUM",
    "CONFIDENCE_LOW",
    "FieldTemplate",
    "FIELD_TEMPLATES",

    "get_confidence_level",
    "average_confidence",
    "confidence_breakdown",
    "format_confidence",

    "ValidationResult",
    "validate_field_value",
    "validate_classification",

    "classify_placeholder",
    "classify_placeholder_via_llm",
]
