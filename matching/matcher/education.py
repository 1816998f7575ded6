#!/usr/bin/env python3
"""
Education Evaluator - Degree level against a requirement read from the job text.
"""

from typing import Optional, Sequence, Tuple
import logging

from matching.matcher.models import DegreeLevel, EducationMatchScore
from matching.models import Education, Job

logger = logging.getLogger(__name__)

SECTION_MARKERS = ("education", "degree", "qualification")
SECTION_LENGTH = 300

NO_EDUCATION_SCORE = 0.3
NO_REQUIREMENT_SCORE = 0.7
UNSPECIFIED_DEGREE_SCORE = 0.6

# score by candidate level, per required level
REQUIREMENT_SCORES = {
    DegreeLevel.DOCTORATE: {
        DegreeLevel.DOCTORATE: 1.0,
        DegreeLevel.MASTER: 0.7,
        DegreeLevel.BACHELOR: 0.5,
        DegreeLevel.NONE: 0.2,
    },
    DegreeLevel.MASTER: {
        DegreeLevel.DOCTORATE: 1.0,
        DegreeLevel.MASTER: 1.0,
        DegreeLevel.BACHELOR: 0.7,
        DegreeLevel.NONE: 0.3,
    },
    DegreeLevel.BACHELOR: {
        DegreeLevel.DOCTORATE: 1.0,
        DegreeLevel.MASTER: 1.0,
        DegreeLevel.BACHELOR: 1.0,
        DegreeLevel.NONE: 0.4,
    },
}

DEGREE_LEVEL_SCORES = {
    DegreeLevel.DOCTORATE: 1.0,
    DegreeLevel.MASTER: 0.8,
    DegreeLevel.BACHELOR: 0.6,
    DegreeLevel.NONE: 0.5,
}


def extract_requirement_section(description: Optional[str]) -> Optional[str]:
    """
    Return the ~300 characters following the education marker, or None.

    The marker position is the largest of the first occurrences of
    "education", "degree" and "qualification".
    """
    if not description:
        return None
    lower = description.lower()
    index = max(lower.find(marker) for marker in SECTION_MARKERS)
    if index == -1:
        return None
    return description[index:index + SECTION_LENGTH]


def required_degree_level(section: Optional[str]) -> Optional[DegreeLevel]:
    if not section:
        return None
    lower = section.lower()
    if "phd" in lower or "doctorate" in lower:
        return DegreeLevel.DOCTORATE
    if "master" in lower:
        return DegreeLevel.MASTER
    if "bachelor" in lower:
        return DegreeLevel.BACHELOR
    return None


def degree_level(degree: Optional[str]) -> DegreeLevel:
    """Classify a free-text degree name."""
    lower = (degree or "").lower()
    if "phd" in lower or "doctor" in lower:
        return DegreeLevel.DOCTORATE
    if "master" in lower or "mba" in lower:
        return DegreeLevel.MASTER
    if "bachelor" in lower:
        return DegreeLevel.BACHELOR
    return DegreeLevel.NONE


def highest_education(educations: Sequence[Education]) -> Tuple[Optional[Education], DegreeLevel]:
    best = None
    best_level = DegreeLevel.NONE
    for edu in educations:
        level = degree_level(edu.degree)
        if best is None or level > best_level:
            best, best_level = edu, level
    return best, best_level


def evaluate_education(educations: Sequence[Education], job: Job) -> EducationMatchScore:
    """
    Score a candidate's education against the degree level the job asks for.

    Meeting or exceeding the requirement scores 1.0 with partial credit below
    it. A description with an education section but no recognisable degree
    scores 0.6, no section at all 0.7, and no education records 0.3.
    """
    educations = list(educations or [])
    section = extract_requirement_section(job.description)
    required = required_degree_level(section)

    if not educations:
        return EducationMatchScore(
            weighted_score=NO_EDUCATION_SCORE,
            required_level=required,
            requirement_section_found=section is not None,
        )

    best, level = highest_education(educations)

    if section is None:
        score = NO_REQUIREMENT_SCORE
    elif required is None:
        score = UNSPECIFIED_DEGREE_SCORE
    else:
        score = REQUIREMENT_SCORES[required][level]

    logger.debug(f"Education: required={required}, candidate={level.name}, score={score}")

    return EducationMatchScore(
        weighted_score=score,
        required_level=required,
        candidate_level=level,
        requirement_section_found=section is not None,
        degree_level_score=DEGREE_LEVEL_SCORES[level],
        highest_education=best,
    )
