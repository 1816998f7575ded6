#!/usr/bin/env python3
"""
Match Reasons - Human-readable explanations derived from factor scores.

Each factor has fixed thresholds: above the matching threshold yields a
positive reason, below the mismatch threshold a negative one.
"""

from typing import List, Optional

from matching.scorer.models import FactorScores

MATCHING_THRESHOLDS = {
    'skills': 0.7,
    'experience': 0.8,
    'education': 0.8,
    'location': 0.9,
    'ai_semantic': 0.7,
}

MISMATCH_THRESHOLDS = {
    'skills': 0.3,
    'experience': 0.4,
    'education': 0.4,
    'location': 0.3,
}

MATCHING_REASONS = {
    'skills': "Strong skills alignment with job requirements",
    'experience': "Extensive relevant work experience",
    'education': "Educational background matches requirements",
    'location': "Perfect location match or remote-friendly",
    'ai_semantic': "AI analysis shows strong semantic compatibility",
}

MISMATCH_REASONS = {
    'skills': "Limited skills match with job requirements",
    'experience': "Insufficient relevant work experience",
    'education': "Educational background doesn't align with requirements",
    'location': "Location mismatch may require relocation",
}


def _factor_values(factors: FactorScores, location_score: Optional[float]) -> dict:
    values = factors.as_dict()
    if location_score is not None:
        values['location'] = location_score
    return values


def generate_matching_reasons(factors: FactorScores, location_score: Optional[float] = None) -> List[str]:
    """
    Positive reasons, in factor order.

    location_score overrides the composite location factor; callers pass the
    raw geographic score so the reason reflects the location alone.
    """
    values = _factor_values(factors, location_score)
    return [
        MATCHING_REASONS[name]
        for name, threshold in MATCHING_THRESHOLDS.items()
        if values.get(name) is not None and values[name] > threshold
    ]


def generate_mismatch_reasons(factors: FactorScores, location_score: Optional[float] = None) -> List[str]:
    values = _factor_values(factors, location_score)
    return [
        MISMATCH_REASONS[name]
        for name, threshold in MISMATCH_THRESHOLDS.items()
        if values.get(name) is not None and values[name] < threshold
    ]
