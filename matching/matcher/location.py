#!/usr/bin/env python3
"""
Location / Cultural Fit - Geographic match plus bio keyword affinity.
"""

from typing import Optional
import logging

from matching.matcher.models import CulturalFitScore
from matching.models import Candidate, Job
from matching.utils import NEUTRAL_SCORE

logger = logging.getLogger(__name__)

REMOTE_KEYWORD = "remote"
SAME_REGION_SCORE = 0.7
DIFFERENT_LOCATION_SCORE = 0.2

BIO_KEYWORDS = ("team", "collaborative", "innovative", "passionate", "dedicated")

LOCATION_WEIGHT = 0.6
BIO_WEIGHT = 0.4


def _region(location: str) -> Optional[str]:
    parts = location.split(",")
    if len(parts) < 2:
        return None
    return parts[-1].strip().lower()


def score_location(candidate_city: Optional[str], job_location: Optional[str]) -> float:
    """
    Remote jobs score 1.0 whatever the candidate's city. Otherwise an exact
    city match is 1.0, the same trailing region ("Austin, TX" / "Dallas, TX")
    0.7 and anything else 0.2. Missing data on either side is neutral.
    """
    if job_location and REMOTE_KEYWORD in job_location.lower():
        return 1.0

    if not candidate_city or not candidate_city.strip() or not job_location or not job_location.strip():
        return NEUTRAL_SCORE

    if candidate_city.strip().lower() == job_location.strip().lower():
        return 1.0

    candidate_region = _region(candidate_city)
    if candidate_region and candidate_region == _region(job_location):
        return SAME_REGION_SCORE

    return DIFFERENT_LOCATION_SCORE


def score_bio(bio: Optional[str]) -> float:
    """Fraction of the positive keywords present in the bio."""
    if not bio or not bio.strip():
        return NEUTRAL_SCORE
    lower = bio.lower()
    hits = sum(1 for keyword in BIO_KEYWORDS if keyword in lower)
    return hits / len(BIO_KEYWORDS)


def evaluate_cultural_fit(candidate: Candidate, job: Job) -> CulturalFitScore:
    location_score = score_location(candidate.city, job.location)
    bio_score = score_bio(candidate.bio)
    return CulturalFitScore(
        weighted_score=LOCATION_WEIGHT * location_score + BIO_WEIGHT * bio_score,
        location_score=location_score,
        bio_score=bio_score,
    )
