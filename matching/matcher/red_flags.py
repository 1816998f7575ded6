#!/usr/bin/env python3
"""
Red Flag Detector - Employment gaps and implausible skill claims.

Produces a RedFlagReport whose penalty_multiplier is applied to the
composite score: 0.7 with any red flag, 0.9 with warnings only.
"""

from typing import List, Sequence
import logging

from matching.matcher.models import EmploymentGap, RedFlagReport
from matching.models import Experience, Skill
from matching.utils import months_between

logger = logging.getLogger(__name__)

# Gaps longer than this many months are recorded at all
MIN_GAP_MONTHS = 1
WARNING_GAP_MONTHS = 3
RED_FLAG_GAP_MONTHS = 6
OVERCLAIM_PROFICIENCY = 9

NO_EXPERIENCE_FLAG = "Candidate claims skills but has no work experience"


def detect_employment_gaps(experiences: Sequence[Experience]) -> List[EmploymentGap]:
    """Gaps between consecutive entries, ordered by start date."""
    ordered = sorted(experiences, key=lambda e: e.start_date)
    gaps = []
    for prev, current in zip(ordered, ordered[1:]):
        if prev.end_date is None:
            continue
        months = months_between(prev.end_date, current.start_date)
        if months > MIN_GAP_MONTHS:
            gaps.append(EmploymentGap(start=prev.end_date, end=current.start_date, months=months))
    return gaps


def detect_red_flags(experiences: Sequence[Experience], skills: Sequence[Skill]) -> RedFlagReport:
    experiences = list(experiences or [])
    skills = list(skills or [])
    red_flags: List[str] = []
    warnings: List[str] = []

    gaps = detect_employment_gaps(experiences)
    for gap in gaps:
        if gap.months > RED_FLAG_GAP_MONTHS:
            red_flags.append(gap.message)
        elif gap.months > WARNING_GAP_MONTHS:
            warnings.append(gap.message)

    if skills and not experiences:
        red_flags.append(NO_EXPERIENCE_FLAG)

    for skill in skills:
        if skill.proficiency > OVERCLAIM_PROFICIENCY:
            warnings.append(
                f"Extremely high proficiency claimed for skill: {skill.name} ({skill.proficiency}/10)"
            )

    if red_flags or warnings:
        logger.debug(f"Red flags: {len(red_flags)}, warnings: {len(warnings)}")

    return RedFlagReport(
        red_flags=tuple(red_flags),
        warnings=tuple(warnings),
        employment_gaps=tuple(gaps),
    )
