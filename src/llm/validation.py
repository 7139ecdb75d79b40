"""
Answer Validation Module

Checks a user's answer against the type of the field it is meant for. Rules:

- empty or whitespace-only answers are always rejected
- email: a simple local@domain.tld shape
- number: parseable as a finite number and strictly greater than zero
- date: parseable as a full calendar date (year, month and day all given)
- text, textarea and anything else: any non-empty answer

There are no cross-field rules; advisory notes (e.g. minimum wage for a salary)
are shown to the user but never enforced here.

Functions:
    - validate_field_value: Validates a raw answer for a field type
    - validate_classification: Validates a classifier response before it is used
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil import parser as date_parser

from src.workflows.models import FIELD_TYPES


EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def _is_positive_number(value: str) -> bool:
    # float() accepts digit separators like "1_000"
    if "_" in value:
        return False
    try:
        number = float(value)
    except ValueError:
        return False
    return math.isfinite(number) and number > 0


# Two defaults that differ in year, month and day. A value only names a full
# calendar date when both parses agree on it.
DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _is_date(value: str) -> bool:
    try:
        parsed = [date_parser.parse(value, default=default).date() for default in DATE_DEFAULTS]
    except (ValueError, OverflowError):
        return False
    return parsed[0] == parsed[1]


def validate_field_value(value: Optional[str], field_type: str) -> ValidationResult:
    """
    Validates a raw answer against a field type.

    Args:
        value: The answer as typed by the user
        field_type: One of text, email, date, number, textarea

    Returns:
        ValidationResult with valid=False and a user-facing error on failure
    """
    if value is None or not value.strip():
        return ValidationResult(False, "This field cannot be empty.")

    value = value.strip()

    if field_type == "email":
        if not EMAIL_REGEX.match(value):
            return ValidationResult(False, "Please provide a valid email address.")
    elif field_type == "number":
        if not _is_positive_number(value):
            return ValidationResult(False, "Please provide a valid positive number.")
    elif field_type == "date":
        if not _is_date(value):
            return ValidationResult(False, "Please provide a valid date.")

    return ValidationResult(True)


def validate_classification(response_data: Dict[str, Any]) -> Dict[str, List[str]]:
    """
    Validates a classifier response against the field classification shape.

    Args:
        response_data: Parsed classifier response

    Returns:
        A dictionary of errors by key, empty if all valid
    """
    errors = {}

    label = response_data.get("label")
    if not isinstance(label, str) or not label.strip():
        errors.setdefault("label", []).append("Missing label")

    field_type = response_data.get("type")
    if field_type not in FIELD_TYPES:
        errors.setdefault("type", []).append(f"Expected one of {', '.join(FIELD_TYPES)}, got: {field_type}")

    suggestion = response_data.get("suggestion")
    if suggestion is not None and not isinstance(suggestion, str):
        errors.setdefault("suggestion", []).append(f"Expected string, got: {type(suggestion).__name__}")

    return errors
