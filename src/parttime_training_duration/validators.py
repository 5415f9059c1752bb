"""
Range checks for the calculator inputs.

Every validator answers yes/no. Nothing is clamped or corrected here;
clamping only happens later for values that already passed.
"""

import math
from typing import Optional, Tuple

from parttime_training_duration.config import DEFAULT_POLICY
from parttime_training_duration.models import PolicyConfig


def as_finite_number(raw) -> Optional[float]:
    """
    Interpret a number or numeric string as a finite float.

    Returns None for empty strings, None, booleans, unparsable text,
    NaN and infinities.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def is_fulltime_hours_valid(hours, policy: PolicyConfig = DEFAULT_POLICY) -> bool:
    value = as_finite_number(hours)
    if value is None:
        return False
    return policy.fulltime_min_hours <= value <= policy.fulltime_max_hours


def is_parttime_hours_valid(hours, fulltime_hours, policy: PolicyConfig = DEFAULT_POLICY) -> bool:
    """
    The 50% rule: part-time hours must be at least half of the full-time
    hours and strictly below them (otherwise it is not part-time).
    """
    value = as_finite_number(hours)
    full = as_finite_number(fulltime_hours)
    if value is None or full is None or full <= 0:
        return False
    return policy.min_parttime_factor * full <= value < full


def is_regular_duration_valid(months, policy: PolicyConfig = DEFAULT_POLICY) -> bool:
    value = as_finite_number(months)
    if value is None:
        return False
    return policy.duration_min_months <= value <= policy.duration_max_months


def parttime_hours_bounds(fulltime_hours, policy: PolicyConfig = DEFAULT_POLICY) -> Tuple[float, float]:
    """
    Return (lower_inclusive, upper_exclusive) part-time hours for the given
    full-time hours. Falls back to the policy's minimum full-time week when
    the full-time value is unusable.
    """
    full = as_finite_number(fulltime_hours)
    if full is None or full <= 0:
        full = policy.fulltime_min_hours
    return policy.min_parttime_factor * full, full
