#!/usr/bin/env python3
"""
Experience Evaluator - Duration, relevance and recency of work history.

Relevance is keyword based: an entry is relevant when its position contains
the job title, or its description mentions one of the required skills.
"""

import re
from datetime import date
from typing import List, Optional, Sequence
import logging

from matching.matcher.models import ExperienceMatchScore, RelevantExperience
from matching.models import Experience, Job
from matching.utils import NEUTRAL_SCORE, contains_ci, months_between, resolve_today, years_between

logger = logging.getLogger(__name__)

DURATION_WEIGHT = 0.4
RELEVANCE_WEIGHT = 0.4
RECENCY_WEIGHT = 0.2

# Relevant entries needed for a full relevance score
RELEVANT_ENTRIES_FOR_FULL_SCORE = 3
RECENT_YEARS = 5
NO_EXPERIENCE_SCORE = 0.2

REQUIRED_YEARS_PATTERNS = [
    re.compile(r'(\d+)\+?\s*years?', re.IGNORECASE),
    re.compile(r'(\d+)\+?\s*yrs?', re.IGNORECASE),
]


def extract_required_experience(description: Optional[str]) -> int:
    """
    Pull a required-years figure out of free text.

    "5+ years of Java" -> 5, "3 yrs" -> 3. Returns 0 when nothing matches.
    """
    if not description:
        return 0
    for pattern in REQUIRED_YEARS_PATTERNS:
        match = pattern.search(description)
        if match:
            return int(match.group(1))
    return 0


def resolve_required_years(job: Job) -> int:
    """Explicit required years when set, else the figure in the description."""
    if job.required_experience_years is not None:
        return job.required_experience_years
    return extract_required_experience(job.description)


def calculate_total_years(experiences: Sequence[Experience], today: Optional[date] = None) -> float:
    """Sum of whole months worked across all entries, in years."""
    today = resolve_today(today)
    total_months = 0
    for exp in experiences:
        end = exp.end_date or today
        total_months += max(0, months_between(exp.start_date, end))
    return total_months / 12


def relevance_reason(experience: Experience, job: Job) -> Optional[str]:
    """Why an entry is relevant to the job, or None when it is not."""
    title = (job.title or "").strip()
    if title and contains_ci(experience.position, title):
        return "Position matches job title"

    if experience.description:
        for skill in job.required_skills:
            if contains_ci(experience.description, skill):
                return f"Description mentions required skill: {skill}"
    return None


def find_relevant_experiences(experiences: Sequence[Experience], job: Job) -> List[RelevantExperience]:
    relevant = []
    for exp in experiences:
        reason = relevance_reason(exp, job)
        if reason:
            relevant.append(RelevantExperience(experience=exp, reason=reason))
    return relevant


def evaluate_experience(
    experiences: Sequence[Experience],
    job: Job,
    today: Optional[date] = None
) -> ExperienceMatchScore:
    """
    Score a candidate's work history against a job.

    weighted = 0.4*duration + 0.4*relevance + 0.2*recency, where duration is
    total years over required years (0.5 when nothing is required), relevance
    saturates at three relevant entries, and recency is the share of relevant
    entries that ended within the last five years. No history at all scores
    0.2.

    Args:
        experiences: Candidate work history
        job: Job being matched
        today: Reference date for ongoing entries; defaults to date.today()
    """
    experiences = list(experiences or [])
    required_years = resolve_required_years(job)

    if not experiences:
        return ExperienceMatchScore(weighted_score=NO_EXPERIENCE_SCORE, required_years=required_years)

    today = resolve_today(today)
    total_years = calculate_total_years(experiences, today)
    relevant = find_relevant_experiences(experiences, job)

    if required_years > 0:
        duration_score = min(1.0, total_years / required_years)
    else:
        duration_score = NEUTRAL_SCORE

    relevance_score = min(1.0, len(relevant) / RELEVANT_ENTRIES_FOR_FULL_SCORE)

    if relevant:
        recent = sum(
            1 for r in relevant
            if years_between(r.experience.end_date or today, today) <= RECENT_YEARS
        )
        recency_score = recent / len(relevant)
    else:
        recency_score = 0.0

    weighted = (
        DURATION_WEIGHT * duration_score
        + RELEVANCE_WEIGHT * relevance_score
        + RECENCY_WEIGHT * recency_score
    )

    logger.debug(
        f"Experience: {total_years:.1f}y of {required_years}y required, "
        f"{len(relevant)} relevant, weighted={weighted:.2f}"
    )

    return ExperienceMatchScore(
        weighted_score=weighted,
        total_years=total_years,
        required_years=required_years,
        duration_score=duration_score,
        relevance_score=relevance_score,
        recency_score=recency_score,
        relevant_experiences=tuple(relevant),
    )
