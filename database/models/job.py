from sqlalchemy import Column, Integer, Text, ForeignKey, TIMESTAMP, JSON, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base

JOB_STATUS_ACTIVE = 'ACTIVE'


class JobPost(Base):
    __tablename__ = 'job_post'

    id = Column(Integer, primary_key=True, autoincrement=True)
    employer_id = Column(Integer, ForeignKey('app_user.id', ondelete='SET NULL'))

    title = Column(Text, nullable=False)
    description = Column(Text)
    tech_stack = Column(JSON, nullable=False, default=list)  # list of skill tags
    required_experience_years = Column(Integer)
    location = Column(Text)
    employment_type = Column(Text)  # FULL_TIME|PART_TIME|CONTRACT|INTERNSHIP
    status = Column(Text, nullable=False, default=JOB_STATUS_ACTIVE)  # ACTIVE|INACTIVE|EXPIRED|FILLED
    posted_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    applications = relationship("JobApplication", back_populates="job_post", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_post_status', 'status'),
    )


class JobApplication(Base):
    __tablename__ = 'job_application'

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_post_id = Column(Integer, ForeignKey('job_post.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Integer, ForeignKey('app_user.id', ondelete='CASCADE'), nullable=False)
    status = Column(Text, nullable=False, default='APPLIED')  # APPLIED|REVIEWED|INTERVIEW|REJECTED|ACCEPTED
    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    job_post = relationship("JobPost", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('job_post_id', 'user_id', name='uq_job_application_job_user'),
    )
