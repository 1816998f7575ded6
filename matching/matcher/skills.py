#!/usr/bin/env python3
"""
Skill Matcher - Map each required skill to the best candidate skill.

Matching is case-insensitive: an exact name match wins; otherwise the
highest-proficiency candidate skill whose name contains (or is contained in)
the required skill counts as a partial match.
"""

from typing import List, Optional, Sequence
import logging

from matching.matcher.models import SkillMatchDetail, SkillMatchScore, SkillMatchType
from matching.models import MAX_PROFICIENCY, Skill
from matching.utils import NEUTRAL_SCORE

logger = logging.getLogger(__name__)

COVERAGE_WEIGHT = 0.4
PROFICIENCY_WEIGHT = 0.4
EXACT_WEIGHT = 0.2


def _normalize(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def _find_exact(required: str, candidate_skills: Sequence[Skill]) -> Optional[Skill]:
    for skill in candidate_skills:
        if _normalize(skill.name) == required:
            return skill
    return None


def _find_partial(required: str, candidate_skills: Sequence[Skill]) -> Optional[Skill]:
    best = None
    for skill in candidate_skills:
        name = _normalize(skill.name)
        if required in name or name in required:
            if best is None or skill.proficiency > best.proficiency:
                best = skill
    return best


def match_skill(required_skill: str, candidate_skills: Sequence[Skill]) -> SkillMatchDetail:
    """Match a single required skill against the candidate's skills."""
    required = _normalize(required_skill)
    if not required:
        return SkillMatchDetail(required_skill, None, False, 0.0, SkillMatchType.NONE)

    exact = _find_exact(required, candidate_skills)
    if exact is not None:
        return SkillMatchDetail(
            required_skill, exact.name, True,
            exact.proficiency / MAX_PROFICIENCY, SkillMatchType.EXACT
        )

    partial = _find_partial(required, candidate_skills)
    if partial is not None:
        return SkillMatchDetail(
            required_skill, partial.name, True,
            partial.proficiency / MAX_PROFICIENCY, SkillMatchType.PARTIAL
        )

    return SkillMatchDetail(required_skill, None, False, 0.0, SkillMatchType.NONE)


def match_skills(required_skills: Sequence[str], candidate_skills: Sequence[Skill]) -> SkillMatchScore:
    """
    Score how well a candidate's skills cover a job's required skills.

    Args:
        required_skills: Skill tags from the job post
        candidate_skills: The candidate's self-rated skills

    Returns:
        SkillMatchScore with weighted = 0.4*coverage + 0.4*mean proficiency
        of matched skills + 0.2*exact ratio. A candidate with no skills scores
        0.0; a job with no requirements scores a neutral 0.5.
    """
    candidate_skills = list(candidate_skills or [])
    required_skills = list(required_skills or [])

    if not candidate_skills:
        return SkillMatchScore(weighted_score=0.0)

    if not required_skills:
        return SkillMatchScore(
            weighted_score=NEUTRAL_SCORE,
            coverage=NEUTRAL_SCORE,
            mean_proficiency=NEUTRAL_SCORE,
            exact_ratio=NEUTRAL_SCORE,
        )

    details: List[SkillMatchDetail] = [match_skill(r, candidate_skills) for r in required_skills]
    matched = [d for d in details if d.matched]
    total = len(details)

    coverage = len(matched) / total
    mean_proficiency = sum(d.proficiency_score for d in matched) / len(matched) if matched else 0.0
    exact_ratio = sum(1 for d in details if d.match_type == SkillMatchType.EXACT) / total

    weighted = (
        COVERAGE_WEIGHT * coverage
        + PROFICIENCY_WEIGHT * mean_proficiency
        + EXACT_WEIGHT * exact_ratio
    )

    logger.debug(
        f"Skills: {len(matched)}/{total} matched, coverage={coverage:.2f}, "
        f"proficiency={mean_proficiency:.2f}, exact={exact_ratio:.2f}"
    )

    return SkillMatchScore(
        weighted_score=weighted,
        coverage=coverage,
        mean_proficiency=mean_proficiency,
        exact_ratio=exact_ratio,
        details=tuple(details),
    )
