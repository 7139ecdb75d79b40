import logging
import re
from typing import List

from src.workflows.errors import ExtractionError

logger = logging.getLogger(__name__)

# Scanned independently, in this order, over the same text. The blank pattern
# has no capture group; its matches get synthetic Field_<n> names.
PLACEHOLDER_PATTERNS = [
    ("bracket", re.compile(r"\[([^\]]+)\]")),
    ("brace", re.compile(r"\{([^}]+)\}")),
    ("underscore", re.compile(r"__([^_]+)__")),
    ("blank", re.compile(r"___+")),
]

CONTEXT_RADIUS = 100

DOCUMENT_TYPE_KEYWORDS = [
    (("incorporation", "certificate"), "Certificate of Incorporation"),
    (("employment", "employee"), "Employment Agreement"),
    (("nda", "confidential"), "Non-Disclosure Agreement"),
]
DEFAULT_DOCUMENT_TYPE = "Legal Document"

JURISDICTION_KEYWORDS = [
    ("delaware", "Delaware"),
    ("california", "California"),
    ("new york", "New York"),
]
DEFAULT_JURISDICTION = "Not specified"


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise ExtractionError(f"Expected document text, got {type(text).__name__}")
    if not text.strip():
        raise ExtractionError("Document is empty")
    return text


def _synthetic_name(n: int, taken) -> str:
    while f"Field_{n}" in taken:
        n += 1
    return f"Field_{n}"


def scan_placeholders(text: str) -> List[str]:
    """
    Returns the distinct placeholder tokens in the text, in scan order.

    Supports [Token], {Token}, __Token__ and bare blanks of three or more
    underscores. Blanks, and tokens that trim to nothing, are named
    Field_<n> where n is the number of distinct tokens found so far, moved
    up past any name the document already uses.
    """
    _require_text(text)
    placeholders: List[str] = []
    seen = set()

    for _, regex in PLACEHOLDER_PATTERNS:
        for match in regex.finditer(text):
            token = match.group(1).strip() if regex.groups else ""
            if not token:
                token = _synthetic_name(len(placeholders), seen)
            if token not in seen:
                seen.add(token)
                placeholders.append(token)

    logger.info(f"Found {len(placeholders)} unique placeholders.")
    return placeholders


def extract_placeholder_context(text: str, placeholder: str, radius: int = CONTEXT_RADIUS) -> str:
    """
    Snippet of up to `radius` characters either side of the first verbatim
    occurrence of the placeholder, wrapped in ellipses.

    The trimmed token is searched, not the original match span: the snippet
    may come from an earlier, unbracketed mention of the same word, and
    synthetic Field_<n> names never match, returning "".
    """
    index = text.find(placeholder)
    if index == -1:
        return ""

    start = max(0, index - radius)
    end = min(len(text), index + len(placeholder) + radius)
    return "..." + text[start:end].strip() + "..."


def detect_document_type(text: str) -> str:
    lower = text.lower()
    for keywords, document_type in DOCUMENT_TYPE_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return document_type
    return DEFAULT_DOCUMENT_TYPE


def detect_jurisdiction(text: str) -> str:
    lower = text.lower()
    for keyword, jurisdiction in JURISDICTION_KEYWORDS:
        if keyword in lower:
            return jurisdiction
    return DEFAULT_JURISDICTION
