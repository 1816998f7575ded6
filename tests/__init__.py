#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against in-memory data or an in-memory SQLite database:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Builders below create engine inputs with sensible defaults so each test
only spells out the fields it cares about.
"""

from datetime import date
from typing import Any, List, Optional

from matching.models import Candidate, Education, Experience, Job, Skill

# Fixed reference date so experience durations never drift
TODAY = date(2025, 1, 15)


def make_skill(name: str, proficiency: int = 5, category: Optional[str] = None) -> Skill:
    return Skill(name=name, proficiency=proficiency, category=category)


def make_experience(
    start: date,
    end: Optional[date] = None,
    position: str = "Software Engineer",
    company: str = "Acme",
    description: Optional[str] = None
) -> Experience:
    return Experience(
        company=company,
        position=position,
        start_date=start,
        end_date=end,
        description=description,
        is_current=end is None,
    )


def make_job(
    job_id: Any = 1,
    title: str = "Backend Developer",
    required_skills: Optional[List[str]] = None,
    required_experience_years: Optional[int] = 3,
    location: Optional[str] = "Austin, TX",
    description: str = (
        "We are hiring a Backend Developer to build Java services. "
        "Qualifications: degree required, Bachelor or higher in Computer Science."
    )
) -> Job:
    return Job(
        id=job_id,
        title=title,
        description=description,
        required_skills=["Java", "Spring", "SQL"] if required_skills is None else required_skills,
        required_experience_years=required_experience_years,
        location=location,
    )


def strong_candidate(candidate_id: Any = 101) -> Candidate:
    """Java/Spring/SQL developer in Austin with four years of contiguous relevant work."""
    return Candidate(
        id=candidate_id,
        first_name="Ada",
        last_name="Lovelace",
        skills=[make_skill("Java", 9), make_skill("Spring", 8), make_skill("SQL", 6)],
        experiences=[
            make_experience(date(2021, 1, 15), date(2022, 1, 15), "Junior Developer",
                            description="Built Java services"),
            make_experience(date(2022, 1, 15), date(2023, 1, 15), "Software Engineer",
                            description="Spring Boot APIs"),
            make_experience(date(2023, 1, 15), None, "Backend Developer",
                            description="SQL tuning and on-call"),
        ],
        educations=[Education(institution="UT Austin", degree="Bachelor of Science",
                              field_of_study="Computer Science")],
        bio="Passionate and dedicated engineer, collaborative team player",
        city="Austin, TX",
    )


def weak_candidate(candidate_id: Any = 202) -> Candidate:
    """Python-only candidate with no work history or education."""
    return Candidate(
        id=candidate_id,
        first_name="Bob",
        last_name="Smith",
        skills=[make_skill("Python", 9)],
    )
