"""Matcher Module - Per-factor evaluators for candidate/job compatibility."""
from matching.matcher.models import (
    SkillMatchType, SkillMatchDetail, SkillMatchScore,
    RelevantExperience, ExperienceMatchScore,
    DegreeLevel, EducationMatchScore, CulturalFitScore,
    EmploymentGap, RedFlagReport
)
from matching.matcher.skills import match_skills
from matching.matcher.experience import evaluate_experience, extract_required_experience
from matching.matcher.education import evaluate_education
from matching.matcher.location import score_location, score_bio, evaluate_cultural_fit
from matching.matcher.red_flags import detect_red_flags
from matching.matcher.semantic import (
    SemanticScorer, LLMSemanticScorer, EmbeddingSemanticScorer,
    build_candidate_profile, compute_semantic_score
)

__all__ = [
    'match_skills', 'evaluate_experience', 'extract_required_experience',
    'evaluate_education', 'score_location', 'score_bio', 'evaluate_cultural_fit',
    'detect_red_flags', 'build_candidate_profile', 'compute_semantic_score',
    'SemanticScorer', 'LLMSemanticScorer', 'EmbeddingSemanticScorer',
    'SkillMatchType', 'SkillMatchDetail', 'SkillMatchScore',
    'RelevantExperience', 'ExperienceMatchScore',
    'DegreeLevel', 'EducationMatchScore', 'CulturalFitScore',
    'EmploymentGap', 'RedFlagReport'
]
