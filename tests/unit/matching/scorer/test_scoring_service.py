#!/usr/bin/env python3
"""
Unit tests for ScoringService, including the end-to-end candidate scenarios.
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from matching.config_loader import ScoreWeights
from matching.exceptions import InvalidInputError
from matching.models import Candidate
from matching.scorer.ranking import rank
from matching.scorer.service import ScoringService, failed_result
from tests import TODAY, make_experience, make_skill


class TestEndToEndScenario:

    def test_strong_candidate_scores_high(self, scoring_service, job, candidate_a):
        result = scoring_service.score(candidate_a, job)

        assert result.total_score > 0.85
        assert result.red_flags == ()
        assert result.penalty_multiplier == 1.0
        assert result.factor_scores.ai_semantic is None
        assert "Strong skills alignment with job requirements" in result.matching_reasons
        assert "Extensive relevant work experience" in result.matching_reasons
        assert "Perfect location match or remote-friendly" in result.matching_reasons

    def test_weak_candidate_scores_low(self, scoring_service, job, candidate_b):
        result = scoring_service.score(candidate_b, job)

        assert result.total_score < 0.3
        assert "Limited skills match with job requirements" in result.mismatch_reasons
        assert "Insufficient relevant work experience" in result.mismatch_reasons
        assert "Candidate claims skills but has no work experience" in result.red_flags
        assert result.penalty_multiplier == 0.7

    def test_weak_candidate_excluded_from_ranking(self, scoring_service, job, candidate_a, candidate_b):
        results = [scoring_service.score(c, job) for c in (candidate_b, candidate_a)]
        ranked = rank(results, min_score=0.3, limit=10)

        assert [r.candidate_id for r in ranked] == [candidate_a.id]

    def test_strong_candidate_with_failing_ai_scorer(self, job, candidate_a):
        scorer = MagicMock(side_effect=TimeoutError("LLM timed out"))
        service = ScoringService(semantic_scorer=scorer, today=TODAY)

        result = service.score(candidate_a, job)

        assert result.factor_scores.ai_semantic == 0.5
        assert result.total_score > 0.85
        scorer.assert_called_once()

    def test_scoring_is_deterministic(self, scoring_service, job, candidate_a, candidate_b):
        for candidate in (candidate_a, candidate_b):
            first = scoring_service.score(candidate, job)
            second = scoring_service.score(candidate, job)
            assert first.total_score == second.total_score
            assert first.factor_scores == second.factor_scores
            assert first is not second


class TestScoringService:

    def test_gap_red_flag_applies_penalty(self, job):
        candidate = Candidate(
            id=7,
            skills=[make_skill("Java", 8)],
            experiences=[
                make_experience(date(2019, 1, 1), date(2019, 6, 1), description="Java"),
                make_experience(date(2020, 6, 1), date(2021, 1, 1), description="Java"),
            ],
        )
        service = ScoringService(today=TODAY)
        result = service.score(candidate, job)

        assert result.red_flags == ("Employment gap of 12 months from 2019-06-01 to 2020-06-01",)
        assert result.penalty_multiplier == 0.7

        unpenalized = service.score(Candidate(id=8, skills=candidate.skills,
                                              experiences=candidate.experiences[:1]), job)
        assert unpenalized.red_flags == ()

    def test_semantic_scorer_receives_job_text_and_profile(self, job, candidate_a):
        scorer = MagicMock(return_value=0.9)
        result = ScoringService(semantic_scorer=scorer, today=TODAY).score(candidate_a, job)

        job_description, profile = scorer.call_args[0]
        assert job_description == job.description
        assert profile.startswith("Name: Ada Lovelace")
        assert result.factor_scores.ai_semantic == 0.9
        assert "AI analysis shows strong semantic compatibility" in result.matching_reasons

    def test_scorer_ignored_when_weight_disabled(self, job, candidate_a):
        scorer = MagicMock(return_value=0.9)
        weights = ScoreWeights(ai_semantic=None)
        result = ScoringService(weights=weights, semantic_scorer=scorer, today=TODAY).score(candidate_a, job)

        scorer.assert_not_called()
        assert result.factor_scores.ai_semantic is None

    def test_result_orientation_and_timestamp(self, scoring_service, job, candidate_a):
        result = scoring_service.score(candidate_a, job)

        assert result.subject_id == job.id
        assert result.counterpart_id == candidate_a.id
        assert result.evaluated_at.tzinfo is not None

        flipped = result.with_subject(candidate_a.id, job.id)
        assert flipped.subject_id == candidate_a.id
        assert flipped.total_score == result.total_score

    def test_missing_inputs_fail_fast(self, scoring_service, job, candidate_a):
        with pytest.raises(InvalidInputError):
            scoring_service.score(None, job)
        with pytest.raises(InvalidInputError):
            scoring_service.score(candidate_a, None)
        with pytest.raises(InvalidInputError):
            scoring_service.score(Candidate(id=None), job)

    def test_all_zero_weights_rejected(self):
        weights = ScoreWeights(skills=0, experience=0, education=0, location=0, ai_semantic=None)
        with pytest.raises(InvalidInputError):
            ScoringService(weights=weights)

    def test_ai_only_weights_rejected_without_scorer(self):
        weights = ScoreWeights(skills=0, experience=0, education=0, location=0, ai_semantic=1.0)
        with pytest.raises(InvalidInputError):
            ScoringService(weights=weights, today=TODAY)

    def test_ai_only_weights_accepted_with_scorer(self, job, candidate_a):
        weights = ScoreWeights(skills=0, experience=0, education=0, location=0, ai_semantic=1.0)
        service = ScoringService(weights=weights, semantic_scorer=lambda j, p: 0.8, today=TODAY)

        result = service.score(candidate_a, job)
        assert result.total_score == pytest.approx(0.8 * result.penalty_multiplier)

    def test_failed_result(self):
        result = failed_result(3, 9, RuntimeError("bad data"))
        assert result.total_score == 0.0
        assert result.mismatch_reasons == ("Scoring failed: bad data",)
