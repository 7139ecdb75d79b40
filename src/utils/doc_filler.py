import logging
import re
from pathlib import Path
from typing import Iterable, List
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from src.workflows.errors import RenderSubstitutionConflict

logger = logging.getLogger(__name__)

# Placeholder syntaxes that are substituted on render. Bare blanks are not:
# their synthetic Field_<n> names never appear in the text.
RENDER_WRAPPERS = [("[", "]"), ("{", "}"), ("__", "__")]

SUPPORTED_EXTENSIONS = (".docx", ".txt")


def find_substitution_conflicts(fields: Iterable) -> List[RenderSubstitutionConflict]:
    """Pairs of filled fields where one placeholder is contained in another."""
    filled = [f for f in fields if f.value]
    conflicts = []
    for inner in filled:
        for outer in filled:
            if inner is not outer and inner.placeholder != outer.placeholder and inner.placeholder in outer.placeholder:
                conflicts.append(RenderSubstitutionConflict(inner.placeholder, outer.placeholder))
    return conflicts


def render_document(text: str, fields: Iterable) -> str:
    """
    Substitutes collected values into the original text.

    Every [token], {token} and __token__ of each filled field is replaced,
    globally, in a single pass: inserted values are never scanned again, so
    an answer that itself looks like a placeholder is kept as typed. The
    alternation tries longer forms first, so a short token never eats into a
    longer one that contains it; such overlaps are still logged as warnings.
    Fields without a value leave the text untouched.
    """
    fields = list(fields)
    for conflict in find_substitution_conflicts(fields):
        logger.warning(f"Substitution conflict: {conflict.describe()}; rendering longest first.")

    filled = [f for f in fields if f.value]
    if not filled:
        return text

    by_wrapped_form = {}
    for field in filled:
        for opening, closing in RENDER_WRAPPERS:
            by_wrapped_form.setdefault(f"{opening}{field.placeholder}{closing}", field)
    pattern = re.compile("|".join(re.escape(form) for form in sorted(by_wrapped_form, key=len, reverse=True)))

    replaced = set()

    def substitute(match):
        field = by_wrapped_form[match.group(0)]
        replaced.add(field.placeholder)
        return field.value

    result = pattern.sub(substitute, text)
    for field in filled:
        if field.placeholder not in replaced:
            logger.warning(f"Placeholder '{field.placeholder}' not found in document; value not inserted.")
    return result


def completed_filename(file_name: str) -> str:
    """'agreement.docx' -> 'agreement_completed.txt'"""
    stem = Path(file_name or "document").stem or "document"
    return f"{stem}_completed.txt"


def read_document_text(path: str) -> str:
    """
    Reads the plain text of a .docx or .txt document.

    For .docx files, body paragraphs come first, followed by the text of each
    table cell, one per line.

    Raises:
        FileNotFoundError: if the path does not exist
        ValueError: for unsupported formats and files that cannot be decoded
        or opened as a Word document
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file format: {suffix}. Use DOCX or TXT.")

    if suffix == ".txt":
        return file_path.read_text(encoding="utf-8")

    try:
        doc = Document(str(file_path))
    except (PackageNotFoundError, BadZipFile, KeyError) as e:
        raise ValueError(f"Could not read Word document {file_path.name}: {e}") from e
    lines = [para.text for para in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell.text.strip():
                    lines.append(cell.text)
    logger.info(f"Read {len(lines)} lines from {file_path.name}")
    return "\n".join(lines)


def save_completed_document(text: str, output_path: str) -> str:
    path = Path(output_path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Successfully created completed document: {path}")
    return str(path)
