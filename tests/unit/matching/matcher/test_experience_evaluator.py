#!/usr/bin/env python3
"""
Unit tests for the experience evaluator.
"""

from datetime import date

import pytest

from matching.matcher.experience import (
    calculate_total_years,
    evaluate_experience,
    extract_required_experience,
    resolve_required_years,
)
from tests import TODAY, make_experience, make_job


class TestExtractRequiredExperience:

    @pytest.mark.parametrize("text,expected", [
        ("Looking for 5+ years of Java", 5),
        ("At least 3 years experience", 3),
        ("Minimum 2 yrs in backend roles", 2),
        ("1 year of SQL", 1),
        ("No specific experience needed", 0),
        ("", 0),
        (None, 0),
    ])
    def test_extraction(self, text, expected):
        assert extract_required_experience(text) == expected

    def test_explicit_years_win_over_description(self):
        job = make_job(required_experience_years=2, description="7+ years required")
        assert resolve_required_years(job) == 2

    def test_description_used_when_years_missing(self):
        job = make_job(required_experience_years=None, description="7+ years required")
        assert resolve_required_years(job) == 7


class TestTotalYears:

    def test_sums_whole_months(self):
        experiences = [
            make_experience(date(2020, 1, 1), date(2021, 7, 1)),
            make_experience(date(2022, 1, 1), date(2022, 7, 1)),
        ]
        assert calculate_total_years(experiences, TODAY) == pytest.approx(2.0)

    def test_ongoing_runs_until_today(self):
        experiences = [make_experience(date(2023, 1, 15), None)]
        assert calculate_total_years(experiences, TODAY) == pytest.approx(2.0)


class TestEvaluateExperience:

    def test_no_experience_scores_point_two(self):
        result = evaluate_experience([], make_job(), today=TODAY)
        assert result.weighted_score == pytest.approx(0.2)
        assert result.duration_score == 0.0
        assert result.relevant_experiences == ()

    def test_relevance_by_title(self):
        experiences = [make_experience(date(2022, 1, 1), None, position="Senior Backend Developer")]
        result = evaluate_experience(experiences, make_job(), today=TODAY)

        assert len(result.relevant_experiences) == 1
        assert result.relevant_experiences[0].reason == "Position matches job title"

    def test_relevance_by_skill_in_description(self):
        experiences = [make_experience(date(2022, 1, 1), None, position="Engineer",
                                       description="Maintained spring services")]
        result = evaluate_experience(experiences, make_job(), today=TODAY)

        assert result.relevant_experiences[0].reason == "Description mentions required skill: Spring"

    def test_irrelevant_entry(self):
        experiences = [make_experience(date(2022, 1, 1), None, position="Chef",
                                       description="Cooked pasta")]
        result = evaluate_experience(experiences, make_job(), today=TODAY)

        assert result.relevant_experiences == ()
        assert result.relevance_score == 0.0
        assert result.recency_score == 0.0

    def test_full_score(self):
        experiences = [
            make_experience(date(2021, 1, 15), date(2022, 1, 15), description="Java"),
            make_experience(date(2022, 1, 15), date(2023, 1, 15), description="Spring"),
            make_experience(date(2023, 1, 15), None, description="SQL"),
        ]
        result = evaluate_experience(experiences, make_job(required_experience_years=3), today=TODAY)

        assert result.total_years == pytest.approx(4.0)
        assert result.duration_score == 1.0
        assert result.relevance_score == 1.0
        assert result.recency_score == 1.0
        assert result.weighted_score == pytest.approx(1.0)

    def test_zero_required_years_is_neutral_duration(self):
        experiences = [make_experience(date(2024, 1, 15), None, description="Java")]
        result = evaluate_experience(experiences, make_job(required_experience_years=0), today=TODAY)

        assert result.duration_score == 0.5
        # 0.4*0.5 + 0.4*(1/3) + 0.2*1
        assert result.weighted_score == pytest.approx(0.2 + 0.4 / 3 + 0.2)

    def test_old_experience_is_not_recent(self):
        experiences = [
            make_experience(date(2010, 1, 1), date(2013, 1, 1), description="Java"),
            make_experience(date(2023, 1, 15), None, description="Java"),
        ]
        result = evaluate_experience(experiences, make_job(), today=TODAY)
        assert result.recency_score == pytest.approx(0.5)

    def test_duration_is_partial_below_requirement(self):
        experiences = [make_experience(date(2023, 1, 15), None, description="Java")]
        result = evaluate_experience(experiences, make_job(required_experience_years=4), today=TODAY)
        assert result.duration_score == pytest.approx(0.5)
