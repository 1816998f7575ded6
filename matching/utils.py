import logging
import math
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 0.5


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def clamp01(x: float) -> float:
    """Clamp a score to [0, 1], mapping NaN to 0.0."""
    if math.isnan(x):
        logger.error("Score is NaN, clamping to 0.0")
        return 0.0
    return clamp(x, 0.0, 1.0)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end (negative if end < start).

    2019-06-01 -> 2020-06-01 is 12 months; 2019-06-15 -> 2020-06-01 is 11.
    """
    diff = relativedelta(end, start)
    return diff.years * 12 + diff.months


def years_between(start: date, end: date) -> int:
    """Whole calendar years from start to end."""
    return relativedelta(end, start).years


def resolve_today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def contains_ci(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive substring test; False when either side is empty."""
    if not haystack or not needle:
        return False
    needle_lower = needle.lower().strip()
    if not needle_lower:
        return False
    return needle_lower in haystack.lower()
