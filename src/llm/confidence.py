"""
Confidence Helpers Module

Confidence scores attached to classified fields are advisory only: they are
shown next to each field in the review step and summarised after extraction,
but no validation or dialogue decision depends on them.

Scores range from 0.0 (no confidence) to 1.0 (high confidence).
"""

from typing import Dict, Iterable

from .constants import CONFIDENCE_HIGH, CONFIDENCE_MEDIUM


def get_confidence_level(confidence: float) -> str:
    """
    Returns the confidence level category based on score.

    Args:
        confidence: Float between 0.0 and 1.0

    Returns:
        str: 'high', 'medium', or 'low'
    """
    if confidence >= CONFIDENCE_HIGH:
        return 'high'
    elif confidence >= CONFIDENCE_MEDIUM:
        return 'medium'
    else:
        return 'low'


def average_confidence(fields: Iterable) -> float:
    """Mean confidence of the given fields, 0.0 when there are none."""
    scores = [f.confidence for f in fields]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def confidence_breakdown(fields: Iterable) -> Dict[str, int]:
    """Counts fields per confidence level for the review summary."""
    breakdown = {'high': 0, 'medium': 0, 'low': 0}
    for f in fields:
        breakdown[get_confidence_level(f.confidence)] += 1
    return breakdown


def format_confidence(confidence: float) -> str:
    """Percentage string used in the UI, e.g. '92% confidence'."""
    return f"{round(confidence * 100)}% confidence"
