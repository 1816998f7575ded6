from sqlalchemy import Column, Integer, Text, Boolean, Date, ForeignKey, TIMESTAMP, Index, func
from sqlalchemy.orm import relationship

from .base import Base

JOB_SEEKER = 'JOB_SEEKER'
EMPLOYER = 'EMPLOYER'


class User(Base):
    """
    Portal account. Only JOB_SEEKER users are matched as candidates.
    """
    __tablename__ = 'app_user'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True)
    email = Column(Text, unique=True)
    role = Column(Text, nullable=False, default=JOB_SEEKER)  # JOB_SEEKER|EMPLOYER|ADMIN
    first_name = Column(Text)
    last_name = Column(Text)
    bio = Column(Text)
    city = Column(Text)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    skills = relationship("Skill", back_populates="user", cascade="all, delete-orphan", order_by="Skill.id")
    experiences = relationship("Experience", back_populates="user", cascade="all, delete-orphan", order_by="Experience.id")
    educations = relationship("Education", back_populates="user", cascade="all, delete-orphan", order_by="Education.id")

    __table_args__ = (
        Index('idx_app_user_role', 'role'),
    )


class Skill(Base):
    __tablename__ = 'skill'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('app_user.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    category = Column(Text)
    # Either a 1-10 rating or a BEGINNER|INTERMEDIATE|ADVANCED|EXPERT level
    proficiency = Column(Integer)
    proficiency_level = Column(Text)

    user = relationship("User", back_populates="skills")


class Experience(Base):
    __tablename__ = 'experience'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('app_user.id', ondelete='CASCADE'), nullable=False)
    company = Column(Text)
    position = Column(Text)
    description = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)
    is_current = Column(Boolean, nullable=False, default=False)

    user = relationship("User", back_populates="experiences")


class Education(Base):
    __tablename__ = 'education'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('app_user.id', ondelete='CASCADE'), nullable=False)
    institution = Column(Text)
    degree = Column(Text)
    field_of_study = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)

    user = relationship("User", back_populates="educations")
