"""Candidate/job compatibility scoring engine."""
from matching.config_loader import ScoreWeights, ResultPolicy, AppConfig, load_config
from matching.exceptions import (
    MatchingException, InvalidInputError, ExternalScorerUnavailableError,
    JobNotFoundError, CandidateNotFoundError
)
from matching.models import Skill, SkillLevel, Experience, Education, Candidate, Job
from matching.scorer import ScoringService, MatchResult, FactorScores, rank
from matching.orchestrator import MatchingOrchestrator, InputProvider, InMemoryProvider

__all__ = [
    'ScoreWeights', 'ResultPolicy', 'AppConfig', 'load_config',
    'MatchingException', 'InvalidInputError', 'ExternalScorerUnavailableError',
    'JobNotFoundError', 'CandidateNotFoundError',
    'Skill', 'SkillLevel', 'Experience', 'Education', 'Candidate', 'Job',
    'ScoringService', 'MatchResult', 'FactorScores', 'rank',
    'MatchingOrchestrator', 'InputProvider', 'InMemoryProvider'
]
