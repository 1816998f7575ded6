#!/usr/bin/env python3
"""
Scoring Service - Score one candidate against one job.

Runs every evaluator, the optional semantic scorer and the red-flag
detector, then combines them into an explainable MatchResult:
- Skills, experience, education: matcher sub-scores
- Location: cultural fit (0.6 location + 0.4 bio)
- AI semantic: optional; without a scorer its weight is redistributed
- Red flags: multiplicative penalty on the weighted total

Pure with respect to its inputs: no I/O beyond the optional scorer call
and no state kept between calls.
"""

from datetime import date
from typing import Any, Optional
import logging

from matching.config_loader import ScoreWeights
from matching.exceptions import InvalidInputError
from matching.matcher.education import evaluate_education
from matching.matcher.experience import evaluate_experience
from matching.matcher.location import evaluate_cultural_fit
from matching.matcher.red_flags import detect_red_flags
from matching.matcher.semantic import (
    SemanticScorer,
    build_candidate_profile,
    compute_semantic_score,
    job_text,
)
from matching.matcher.skills import match_skills
from matching.models import Candidate, Job
from matching.scorer import composite, reasons
from matching.scorer.models import FactorScores, MatchResult

logger = logging.getLogger(__name__)


def _require(entity: Any, kind: str) -> None:
    if entity is None:
        raise InvalidInputError(f"{kind} is required")
    if getattr(entity, 'id', None) is None:
        raise InvalidInputError(f"{kind} has no id")


def failed_result(candidate_id: Any, job_id: Any, error: Exception) -> MatchResult:
    """Lowest-confidence result for a pair that could not be scored."""
    return MatchResult(
        subject_id=job_id,
        counterpart_id=candidate_id,
        candidate_id=candidate_id,
        job_id=job_id,
        total_score=0.0,
        factor_scores=FactorScores(skills=0.0, experience=0.0, education=0.0, location=0.0),
        mismatch_reasons=(f"Scoring failed: {error}",),
        penalty_multiplier=0.0,
    )


class ScoringService:
    """
    Composite scorer for candidate/job pairs.

    Args:
        weights: Factor weights; defaults to 0.35/0.25/0.15/0.10/0.15
        semantic_scorer: Optional AI scorer (job text, profile text) -> [0, 1]
        today: Reference date for experience durations; defaults to date.today()
    """

    def __init__(
        self,
        weights: Optional[ScoreWeights] = None,
        semantic_scorer: Optional[SemanticScorer] = None,
        today: Optional[date] = None
    ):
        self.weights = weights or ScoreWeights()
        self.semantic_scorer = semantic_scorer
        self.today = today

        # Fail at construction rather than on the first pair
        if self.semantic_enabled or self.weights.ai_semantic is None:
            self.weights.normalized()
        else:
            self.weights.without_semantic()

    @property
    def semantic_enabled(self) -> bool:
        return self.semantic_scorer is not None and self.weights.ai_semantic is not None

    def score(self, candidate: Candidate, job: Job) -> MatchResult:
        """
        Score a candidate against a job.

        The result is oriented as a candidate search (subject is the job);
        use MatchResult.with_subject for the other direction.

        Raises:
            InvalidInputError: candidate or job is missing
        """
        _require(job, "Job")
        _require(candidate, "Candidate")

        skill_match = match_skills(job.required_skills, candidate.skills)
        experience_match = evaluate_experience(candidate.experiences, job, today=self.today)
        education_match = evaluate_education(candidate.educations, job)
        cultural_fit = evaluate_cultural_fit(candidate, job)
        red_flag_report = detect_red_flags(candidate.experiences, candidate.skills)

        ai_score = None
        if self.semantic_enabled:
            ai_score = compute_semantic_score(
                self.semantic_scorer,
                job_text(job),
                build_candidate_profile(candidate),
            )

        factors = FactorScores(
            skills=skill_match.weighted_score,
            experience=experience_match.weighted_score,
            education=education_match.weighted_score,
            location=cultural_fit.weighted_score,
            ai_semantic=ai_score,
        )

        penalty = red_flag_report.penalty_multiplier
        total = composite.calculate_total_score(factors, self.weights, penalty)

        logger.debug(
            f"Candidate {candidate.id} / job {job.id}: skills={factors.skills:.2f}, "
            f"experience={factors.experience:.2f}, education={factors.education:.2f}, "
            f"location={factors.location:.2f}, ai={ai_score if ai_score is not None else 'N/A'}, "
            f"penalty={penalty}, total={total:.3f}"
        )

        return MatchResult(
            subject_id=job.id,
            counterpart_id=candidate.id,
            candidate_id=candidate.id,
            job_id=job.id,
            total_score=total,
            factor_scores=factors,
            matching_reasons=tuple(reasons.generate_matching_reasons(factors, cultural_fit.location_score)),
            mismatch_reasons=tuple(reasons.generate_mismatch_reasons(factors, cultural_fit.location_score)),
            red_flags=red_flag_report.red_flags,
            warnings=red_flag_report.warnings,
            penalty_multiplier=penalty,
            skill_match=skill_match,
            experience_match=experience_match,
            education_match=education_match,
            cultural_fit=cultural_fit,
            red_flag_report=red_flag_report,
        )
