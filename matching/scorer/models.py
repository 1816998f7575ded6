#!/usr/bin/env python3
"""
Scoring Models - Immutable match results.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from matching.matcher.models import (
    CulturalFitScore,
    EducationMatchScore,
    ExperienceMatchScore,
    RedFlagReport,
    SkillMatchScore,
)


@dataclass(frozen=True)
class FactorScores:
    """Per-factor sub-scores, each in [0, 1]. ai_semantic is None when not scored."""
    skills: float
    experience: float
    education: float
    location: float
    ai_semantic: Optional[float] = None

    def as_dict(self) -> Dict[str, float]:
        scores = {
            'skills': self.skills,
            'experience': self.experience,
            'education': self.education,
            'location': self.location,
        }
        if self.ai_semantic is not None:
            scores['ai_semantic'] = self.ai_semantic
        return scores


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MatchResult:
    """
    Explainable compatibility score for one candidate/job pair.

    subject_id is the entity the search was run for and counterpart_id the
    entity being ranked: for a candidate search the job is the subject.
    Results are never updated; re-scoring produces a new one.
    """
    subject_id: Any
    counterpart_id: Any
    candidate_id: Any
    job_id: Any
    total_score: float
    factor_scores: FactorScores
    matching_reasons: Tuple[str, ...] = ()
    mismatch_reasons: Tuple[str, ...] = ()
    red_flags: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    penalty_multiplier: float = 1.0
    skill_match: Optional[SkillMatchScore] = None
    experience_match: Optional[ExperienceMatchScore] = None
    education_match: Optional[EducationMatchScore] = None
    cultural_fit: Optional[CulturalFitScore] = None
    red_flag_report: Optional[RedFlagReport] = None
    evaluated_at: datetime = field(default_factory=_utcnow)

    @property
    def has_red_flags(self) -> bool:
        return bool(self.red_flags)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def with_subject(self, subject_id: Any, counterpart_id: Any) -> "MatchResult":
        """Copy of this result oriented for a different search direction."""
        return replace(self, subject_id=subject_id, counterpart_id=counterpart_id)
