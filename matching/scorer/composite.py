#!/usr/bin/env python3
"""
Composite Score - Weighted sum of factor scores with the red-flag penalty.

Formula: clamp01(sum(w_i * s_i) * penalty_multiplier), with weights
normalized to sum to 1.0.
"""

from typing import Dict
import logging

from matching.config_loader import ScoreWeights
from matching.scorer.models import FactorScores
from matching.utils import clamp01

logger = logging.getLogger(__name__)


def effective_weights(weights: ScoreWeights, factors: FactorScores) -> Dict[str, float]:
    """
    Normalized weights for the factors that were actually scored.

    When there is no ai_semantic score its weight is spread proportionally
    over the other four factors.
    """
    if factors.ai_semantic is None and weights.ai_semantic is not None:
        weights = weights.without_semantic()
    return weights.normalized().as_dict()


def calculate_weighted_score(factors: FactorScores, weights: ScoreWeights) -> float:
    """Weighted sum before any penalty."""
    w = effective_weights(weights, factors)
    scores = factors.as_dict()
    return sum(w[name] * scores.get(name, 0.0) for name in w)


def calculate_total_score(
    factors: FactorScores,
    weights: ScoreWeights,
    penalty_multiplier: float = 1.0
) -> float:
    """
    Combine factor scores into the final total in [0, 1].

    Args:
        factors: Per-factor sub-scores
        weights: Factor weights (normalized here if they do not sum to 1.0)
        penalty_multiplier: From the red-flag report (0.7, 0.9 or 1.0)
    """
    base = calculate_weighted_score(factors, weights)
    total = clamp01(base * max(0.0, penalty_multiplier))
    logger.debug(f"Composite: base={base:.3f} x penalty={penalty_multiplier} -> {total:.3f}")
    return total
