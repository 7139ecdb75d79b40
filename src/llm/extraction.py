"""
Field Classification Module

Turns a placeholder token into a FieldClassification (label, input type,
default suggestion, validation rule, advisory note, confidence, context).

Classification Strategies:
1. Keyword table (classify_placeholder): deterministic, always available.
   The token is lower-cased and checked against FIELD_TEMPLATES in declared
   order; the first contained keyword wins. Unmatched tokens become a generic
   text field.
2. Language model (classify_placeholder_via_llm): asks Gemini for the same
   classification and falls back to the keyword table whenever the client is
   unavailable, the call fails or the response does not validate.

Both strategies take the token and the full document text and return the same
type, so the dialogue engine and renderer never know which one ran.
"""

import logging
import re
from datetime import date
from typing import Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, Field

from src.utils.template_utils import extract_placeholder_context
from src.workflows.models import FieldClassification, FieldType

from .client import get_generative_model
from .constants import (
    FIELD_TEMPLATES,
    FALLBACK_LABEL,
    FALLBACK_VALIDATION_RULE,
    FALLBACK_ADVISORY_NOTE,
    FALLBACK_CONFIDENCE,
    LLM_CONFIDENCE,
)
from .validation import validate_classification

logger = logging.getLogger(__name__)

LABEL_STRIP_REGEX = re.compile(r"[_\[\]{}]")


def _fallback_label(placeholder: str) -> str:
    return LABEL_STRIP_REGEX.sub("", placeholder).strip() or FALLBACK_LABEL


def classify_placeholder(placeholder: str, text: str, today: Optional[date] = None) -> FieldClassification:
    """
    Classifies a placeholder with the keyword table.

    Args:
        placeholder: The trimmed placeholder token
        text: Full document text, used for the context snippet
        today: Date used for date suggestions (defaults to the current date)

    Returns:
        FieldClassification for the first matching keyword, or a generic text field
    """
    lower = placeholder.lower()
    context = extract_placeholder_context(text, placeholder)

    for keyword, template in FIELD_TEMPLATES:
        if keyword in lower:
            suggestion = template.suggestion
            if template.suggest_today:
                suggestion = (today or date.today()).isoformat()
            return FieldClassification(
                label=template.label,
                type=template.type,
                confidence=template.confidence,
                context=context,
                suggestion=suggestion,
                validation_rule=template.validation_rule,
                advisory_note=template.advisory_note,
            )

    return FieldClassification(
        label=_fallback_label(placeholder),
        type="text",
        confidence=FALLBACK_CONFIDENCE,
        context=context,
        suggestion=None,
        validation_rule=FALLBACK_VALIDATION_RULE,
        advisory_note=FALLBACK_ADVISORY_NOTE,
    )


class LLMFieldClassification(BaseModel):
    """Shape the language model is asked to return for one placeholder."""
    label: str = Field(..., description="Short human readable name for the field, e.g. 'Company Legal Name'")
    type: FieldType = Field(..., description="Input type: text, email, date, number or textarea")
    suggestion: Optional[str] = Field(None, description="A sensible default value, or null")
    validation_rule: str = Field(FALLBACK_VALIDATION_RULE, description="One sentence describing what a valid answer looks like")
    advisory_note: Optional[str] = Field(None, description="One sentence of legal guidance for the person filling the field, or null")


CLASSIFICATION_PROMPT = """You are a legal document analyzer helping a user complete a legal document.
The document contains the placeholder "{placeholder}". The text around it is:

{context}

Describe the value this placeholder expects.
- Pick the input type that best fits the value.
- Only suggest a default if one is obvious for this kind of document.

{format_instructions}
"""


def classify_placeholder_via_llm(placeholder: str, text: str, today: Optional[date] = None) -> FieldClassification:
    """
    Classifies a placeholder with the Gemini model, falling back to the keyword table.

    Args:
        placeholder: The trimmed placeholder token
        text: Full document text
        today: Date passed through to the keyword fallback

    Returns:
        FieldClassification, never None
    """
    fallback = classify_placeholder(placeholder, text, today=today)

    model = get_generative_model()
    if model is None:
        logger.info(f"LLM client not configured; keyword classification for '{placeholder}'.")
        return fallback

    parser = PydanticOutputParser(pydantic_object=LLMFieldClassification)
    prompt = PromptTemplate(
        template=CLASSIFICATION_PROMPT,
        input_variables=["placeholder", "context"],
        partial_variables={"format_instructions": parser.get_format_instructions()},
    ).format(placeholder=placeholder, context=fallback.context or "(placeholder not found verbatim)")

    try:
        response = model.generate_content(prompt)
        parsed = parser.parse(response.text)
    except OutputParserException as e:
        logger.warning(f"Could not parse LLM classification for '{placeholder}': {e}")
        return fallback
    except Exception as e:
        logger.warning(f"LLM classification failed for '{placeholder}': {e}")
        return fallback

    errors = validate_classification(parsed.model_dump())
    if errors:
        logger.warning(f"Rejected LLM classification for '{placeholder}': {errors}")
        return fallback

    return FieldClassification(
        label=parsed.label.strip(),
        type=parsed.type,
        confidence=LLM_CONFIDENCE,
        context=fallback.context,
        suggestion=parsed.suggestion,
        validation_rule=parsed.validation_rule,
        advisory_note=parsed.advisory_note,
    )
