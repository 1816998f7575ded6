import logging
from typing import Any, List, Optional, Set

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import (
    User, Skill, Experience, Education,
    JobPost, JobApplication,
    JOB_SEEKER, JOB_STATUS_ACTIVE
)
from database.repositories.base import BaseRepository
from matching import models as engine
from matching.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class ProfileRepository(BaseRepository):
    """
    Read-only InputProvider over the portal tables.

    Only JOB_SEEKER users are candidates and only ACTIVE job posts are
    listed. Rows that cannot be mapped (a skill without any rating, an
    experience without a start date) are logged and left out rather than
    failing the whole profile.
    """

    # ------------------------------------------------------------------
    # Row -> engine model mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _to_skill(row: Skill) -> Optional[engine.Skill]:
        try:
            if row.proficiency is not None:
                return engine.Skill(name=row.name, proficiency=row.proficiency, category=row.category)
            if row.proficiency_level:
                return engine.Skill.from_level(row.name, row.proficiency_level, category=row.category)
        except InvalidInputError as e:
            logger.warning(f"Skipping skill {row.id} for user {row.user_id}: {e}")
            return None
        logger.warning(f"Skipping skill {row.id} for user {row.user_id}: no proficiency recorded")
        return None

    @staticmethod
    def _to_experience(row: Experience) -> Optional[engine.Experience]:
        try:
            return engine.Experience(
                company=row.company,
                position=row.position,
                start_date=row.start_date,
                end_date=row.end_date,
                description=row.description,
                is_current=bool(row.is_current),
            )
        except InvalidInputError as e:
            logger.warning(f"Skipping experience {row.id} for user {row.user_id}: {e}")
            return None

    @staticmethod
    def _to_education(row: Education) -> Optional[engine.Education]:
        try:
            return engine.Education(
                institution=row.institution,
                degree=row.degree,
                field_of_study=row.field_of_study,
                start_date=row.start_date,
                end_date=row.end_date,
            )
        except InvalidInputError as e:
            logger.warning(f"Skipping education {row.id} for user {row.user_id}: {e}")
            return None

    @classmethod
    def to_candidate(cls, user: User) -> engine.Candidate:
        skills = [cls._to_skill(s) for s in user.skills]
        experiences = [cls._to_experience(e) for e in user.experiences]
        educations = [cls._to_education(e) for e in user.educations]
        return engine.Candidate(
            id=user.id,
            skills=[s for s in skills if s is not None],
            experiences=[e for e in experiences if e is not None],
            educations=[e for e in educations if e is not None],
            bio=user.bio,
            city=user.city,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    @staticmethod
    def to_job(post: JobPost) -> engine.Job:
        return engine.Job(
            id=post.id,
            title=post.title,
            description=post.description or "",
            required_skills=list(post.tech_stack or []),
            required_experience_years=post.required_experience_years,
            location=post.location,
        )

    # ------------------------------------------------------------------
    # InputProvider
    # ------------------------------------------------------------------

    def _candidate_query(self):
        return (
            select(User)
            .where(User.role == JOB_SEEKER, User.is_active.is_(True))
            .options(
                selectinload(User.skills),
                selectinload(User.experiences),
                selectinload(User.educations),
            )
        )

    def get_job(self, job_id: Any) -> Optional[engine.Job]:
        post = self.db.get(JobPost, job_id)
        return self.to_job(post) if post is not None else None

    def get_candidate(self, candidate_id: Any) -> Optional[engine.Candidate]:
        stmt = self._candidate_query().where(User.id == candidate_id)
        user = self._one_or_none(stmt)
        return self.to_candidate(user) if user is not None else None

    def list_jobs(self) -> List[engine.Job]:
        stmt = select(JobPost).where(JobPost.status == JOB_STATUS_ACTIVE).order_by(JobPost.id)
        return [self.to_job(p) for p in self._all(stmt)]

    def list_candidates(self) -> List[engine.Candidate]:
        stmt = self._candidate_query().order_by(User.id)
        return [self.to_candidate(u) for u in self._all(stmt)]

    def applied_candidate_ids(self, job_id: Any) -> Set[Any]:
        stmt = select(JobApplication.user_id).where(JobApplication.job_post_id == job_id)
        return set(self._all(stmt))

    def applied_job_ids(self, candidate_id: Any) -> Set[Any]:
        stmt = select(JobApplication.job_post_id).where(JobApplication.user_id == candidate_id)
        return set(self._all(stmt))
