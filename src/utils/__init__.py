"""
Utility modules for the Legal Document Assistant.
"""

from . import db
from . import doc_filler
from . import template_utils
