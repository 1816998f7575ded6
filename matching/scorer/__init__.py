"""Scorer Module - Composite scoring, reasons and ranking."""
from matching.scorer.models import FactorScores, MatchResult
from matching.scorer.composite import calculate_total_score, calculate_weighted_score
from matching.scorer.reasons import generate_matching_reasons, generate_mismatch_reasons
from matching.scorer.ranking import rank
from matching.scorer.service import ScoringService, failed_result

__all__ = [
    'ScoringService', 'MatchResult', 'FactorScores',
    'calculate_total_score', 'calculate_weighted_score',
    'generate_matching_reasons', 'generate_mismatch_reasons',
    'rank', 'failed_result'
]
