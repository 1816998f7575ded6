#!/usr/bin/env python3
"""
Matching Models - Read-only input data consumed by the scoring engine.

Candidates and jobs are owned by the external data layer; the engine
never mutates them.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Optional

from matching.exceptions import InvalidInputError

MIN_PROFICIENCY = 1
MAX_PROFICIENCY = 10


class SkillLevel(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


SKILL_LEVEL_PROFICIENCY = {
    SkillLevel.BEGINNER: 3,
    SkillLevel.INTERMEDIATE: 5,
    SkillLevel.ADVANCED: 8,
    SkillLevel.EXPERT: 10,
}


def _check_dates(kind: str, start: Optional[date], end: Optional[date]) -> None:
    if start is not None and end is not None and end < start:
        raise InvalidInputError(f"{kind} ends ({end}) before it starts ({start})")


@dataclass(frozen=True)
class Skill:
    """A self-rated skill; proficiency is on a 1-10 scale."""
    name: str
    proficiency: int
    category: Optional[str] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidInputError("Skill name must not be empty")
        if not MIN_PROFICIENCY <= self.proficiency <= MAX_PROFICIENCY:
            raise InvalidInputError(
                f"Proficiency for {self.name!r} must be in "
                f"[{MIN_PROFICIENCY}, {MAX_PROFICIENCY}], got {self.proficiency}"
            )

    @classmethod
    def from_level(cls, name: str, level: Any, category: Optional[str] = None) -> "Skill":
        """Build a skill from a BEGINNER/INTERMEDIATE/ADVANCED/EXPERT level."""
        try:
            skill_level = SkillLevel(str(getattr(level, 'value', level)).upper())
        except ValueError:
            raise InvalidInputError(f"Unknown skill level {level!r} for {name!r}")
        return cls(name=name, proficiency=SKILL_LEVEL_PROFICIENCY[skill_level], category=category)


@dataclass(frozen=True)
class Experience:
    """
    Work history entry. end_date=None means the position is ongoing.

    end_date takes precedence over is_current: a dated entry is scored as
    ended even when flagged current, and is_current is carried as recorded.
    """
    company: Optional[str]
    position: Optional[str]
    start_date: date
    end_date: Optional[date] = None
    description: Optional[str] = None
    is_current: bool = False

    def __post_init__(self):
        if self.start_date is None:
            raise InvalidInputError("Experience start_date is required")
        _check_dates("Experience", self.start_date, self.end_date)

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None


@dataclass(frozen=True)
class Education:
    institution: Optional[str]
    degree: Optional[str]
    field_of_study: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self):
        _check_dates("Education", self.start_date, self.end_date)


@dataclass(frozen=True)
class Candidate:
    id: Any
    skills: List[Skill] = field(default_factory=list)
    experiences: List[Experience] = field(default_factory=list)
    educations: List[Education] = field(default_factory=list)
    bio: Optional[str] = None
    city: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else f"Candidate {self.id}"


@dataclass(frozen=True)
class Job:
    """Job post. location containing "remote" marks it remote-friendly."""
    id: Any
    title: str
    description: str = ""
    required_skills: List[str] = field(default_factory=list)
    required_experience_years: Optional[int] = None
    location: Optional[str] = None

    def __post_init__(self):
        if self.required_experience_years is not None and self.required_experience_years < 0:
            raise InvalidInputError(
                f"required_experience_years must be >= 0, got {self.required_experience_years}"
            )

    @property
    def is_remote(self) -> bool:
        return bool(self.location) and "remote" in self.location.lower()
