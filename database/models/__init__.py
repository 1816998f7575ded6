from .base import Base
from .user import User, Skill, Experience, Education, JOB_SEEKER, EMPLOYER
from .job import JobPost, JobApplication, JOB_STATUS_ACTIVE

__all__ = [
    'Base',
    'User',
    'Skill',
    'Experience',
    'Education',
    'JobPost',
    'JobApplication',
    'JOB_SEEKER',
    'EMPLOYER',
    'JOB_STATUS_ACTIVE',
]
