#!/usr/bin/env python3
"""
Matcher Models - Per-factor score breakdowns produced by the evaluators.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Optional, Tuple

from matching.models import Education, Experience


class SkillMatchType(str, Enum):
    EXACT = "EXACT"
    PARTIAL = "PARTIAL"
    NONE = "NONE"


@dataclass(frozen=True)
class SkillMatchDetail:
    """Outcome for one required skill."""
    required_skill: str
    matched_skill: Optional[str]
    matched: bool
    proficiency_score: float
    match_type: SkillMatchType


@dataclass(frozen=True)
class SkillMatchScore:
    weighted_score: float
    coverage: float = 0.0
    mean_proficiency: float = 0.0
    exact_ratio: float = 0.0
    details: Tuple[SkillMatchDetail, ...] = ()

    @property
    def matched_count(self) -> int:
        return sum(1 for d in self.details if d.matched)

    @property
    def missing_skills(self) -> Tuple[str, ...]:
        return tuple(d.required_skill for d in self.details if not d.matched)


@dataclass(frozen=True)
class RelevantExperience:
    experience: Experience
    reason: str


@dataclass(frozen=True)
class ExperienceMatchScore:
    weighted_score: float
    total_years: float = 0.0
    required_years: int = 0
    duration_score: float = 0.0
    relevance_score: float = 0.0
    recency_score: float = 0.0
    relevant_experiences: Tuple[RelevantExperience, ...] = ()


class DegreeLevel(IntEnum):
    """Ordered so that a higher value is a higher degree."""
    NONE = 0
    BACHELOR = 1
    MASTER = 2
    DOCTORATE = 3


@dataclass(frozen=True)
class EducationMatchScore:
    weighted_score: float
    required_level: Optional[DegreeLevel] = None
    candidate_level: DegreeLevel = DegreeLevel.NONE
    requirement_section_found: bool = False
    degree_level_score: float = 0.0
    highest_education: Optional[Education] = None


@dataclass(frozen=True)
class CulturalFitScore:
    weighted_score: float
    location_score: float
    bio_score: float


@dataclass(frozen=True)
class EmploymentGap:
    start: date
    end: date
    months: int

    @property
    def message(self) -> str:
        return f"Employment gap of {self.months} months from {self.start.isoformat()} to {self.end.isoformat()}"


@dataclass(frozen=True)
class RedFlagReport:
    red_flags: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    employment_gaps: Tuple[EmploymentGap, ...] = ()

    @property
    def has_red_flags(self) -> bool:
        return bool(self.red_flags)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def penalty_multiplier(self) -> float:
        if self.red_flags:
            return 0.7
        if self.warnings:
            return 0.9
        return 1.0
