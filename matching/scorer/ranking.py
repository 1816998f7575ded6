from typing import Iterable, List, Optional
import logging

from matching.exceptions import InvalidInputError
from matching.scorer.models import MatchResult

logger = logging.getLogger(__name__)


def rank(results: Iterable[MatchResult], min_score: float, limit: Optional[int] = None) -> List[MatchResult]:
    """
    Keep results scoring strictly above min_score, best first, at most limit.

    The sort is stable, so equal totals keep their input order.
    """
    qualifying = [r for r in results if r.total_score > min_score]
    ordered = sorted(qualifying, key=lambda r: r.total_score, reverse=True)
    if limit is not None:
        if limit < 0:
            raise InvalidInputError(f"limit must be >= 0, got {limit}")
        ordered = ordered[:limit]
    logger.debug(f"Ranked {len(qualifying)} results above {min_score}, returning {len(ordered)}")
    return ordered
