import logging
import math
from typing import Iterable, Optional, Tuple

from parttime_training_duration.catalog import ReductionCatalog
from parttime_training_duration.config import DEFAULT_CATALOG, DEFAULT_POLICY
from parttime_training_duration.models import (
    CalculationResult,
    DeltaDirection,
    ErrorCode,
    FormValues,
    PolicyConfig,
    ReductionBreakdown,
    ReductionSummary,
    Rounding,
)
from parttime_training_duration.validators import (
    as_finite_number,
    is_fulltime_hours_valid,
    is_parttime_hours_valid,
    is_regular_duration_valid,
)

logger = logging.getLogger(__name__)


def _months(value) -> float:
    """Non-negative month count; anything unusable counts as no reduction."""
    number = as_finite_number(value)
    if number is None or number < 0:
        return 0
    return number


def resolve_rounding(mode) -> Rounding:
    try:
        return Rounding(mode)
    except ValueError:
        logger.debug("Unknown rounding mode %r, falling back to round", mode)
        return Rounding.ROUND


def summarize_qualification_selection(
    selection: Optional[Iterable[str]],
    catalog: ReductionCatalog = DEFAULT_CATALOG,
    category_cap: float = DEFAULT_POLICY.qualification_category_cap,
) -> ReductionSummary:
    """
    Sum the reduction months of all selected qualification reasons.

    The selection has set semantics: picking the same reason twice does
    not count twice. Unknown codes contribute nothing.

    Returns:
        ReductionSummary with the raw sum and the sum clamped to the
        qualification category cap.
    """
    if selection is None:
        codes = set()
    elif isinstance(selection, str):
        codes = {selection}
    else:
        codes = set(selection)

    raw_total = sum(catalog.lookup_qualification_reduction(code) for code in codes)
    capped_total = min(raw_total, max(0, category_cap))

    if raw_total > capped_total:
        logger.debug(
            "Qualification reductions %s exceed category cap %s", raw_total, category_cap
        )

    return ReductionSummary(raw_total=raw_total, capped_total=capped_total)


def aggregate_reductions(
    degree_months,
    manual_months,
    qualification_capped_months,
    max_total_reduction,
) -> float:
    """
    Combine all reduction sources into one bounded total.

    Degree and manual reductions are not capped on their own; only the
    global ceiling limits them. The qualification part arrives already
    category-capped.
    """
    total = _months(degree_months) + _months(manual_months) + _months(qualification_capped_months)
    return min(total, _months(max_total_reduction))


def apply_rounding(value: float, rounding=Rounding.ROUND) -> int:
    mode = resolve_rounding(rounding)
    if mode == Rounding.CEIL:
        return math.ceil(value)
    if mode == Rounding.FLOOR:
        return math.floor(value)
    # half-up, 2.5 -> 3
    return math.floor(value + 0.5)


def convert_duration(
    full_duration_months: float,
    weekly_full: float,
    weekly_part: float,
    total_reduction: float,
    min_duration_months: float,
    rounding=Rounding.ROUND,
) -> int:
    """
    Convert the full-time duration into the part-time duration.

    Steps:
      1. ratio = full-time hours / part-time hours
      2. stretch the regular duration by that ratio
      3. round once, according to the rounding policy
      4. subtract the (already capped) total reduction
      5. never go below the minimum duration

    Unusable hours (missing, NaN, zero or negative) leave the full-time
    duration unchanged instead of raising.
    """
    full_months = _echo_months(full_duration_months)
    full = as_finite_number(weekly_full)
    part = as_finite_number(weekly_part)
    if full is None or part is None or full <= 0 or part <= 0:
        return full_months

    ratio = full / part
    raw_part_months = full_months * ratio
    rounded_part_months = apply_rounding(raw_part_months, rounding)
    reduced_months = rounded_part_months - _months(total_reduction)
    floored_months = max(reduced_months, _months(min_duration_months))
    # Only a fractional reduction or floor leaves a fraction here; it is
    # resolved with the same rounding mode, whole months pass unchanged.
    return apply_rounding(floored_months, rounding)


def _echo_months(value) -> int:
    number = as_finite_number(value)
    if number is None:
        return 0
    return max(0, int(number))


def _factor(weekly_full, weekly_part) -> float:
    full = as_finite_number(weekly_full)
    part = as_finite_number(weekly_part)
    if full is None or part is None or full <= 0:
        return 0.0
    return part / full


def _rejected(form: FormValues, code: ErrorCode, cap_exceeded: bool) -> CalculationResult:
    fulltime_months = _echo_months(form.full_duration_months)
    logger.debug("Calculation rejected with %s for %r", code.value, form)
    return CalculationResult(
        allowed=False,
        parttime_final_months=fulltime_months,
        fulltime_months=fulltime_months,
        delta_months=0,
        delta_direction=DeltaDirection.SAME,
        error_code=code,
        factor=_factor(form.weekly_full, form.weekly_part),
        qualification_cap_exceeded=cap_exceeded,
    )


def calculate(form: FormValues, policy: PolicyConfig = DEFAULT_POLICY) -> CalculationResult:
    """
    Decide whether the part-time arrangement is allowed and how long it lasts.

    Validation runs in a fixed order and stops at the first failure:
      1. full-time hours      -> invalidHours
      2. part-time hours      -> minFactor
      3. regular duration     -> invalidHours

    A rejected result echoes the full-time duration unchanged. An accepted
    result carries the final part-time duration and its delta to the
    full-time duration. This function never raises.
    """
    qualification_raw = _months(form.qualification_reduction_raw_months)
    qualification_capped = min(qualification_raw, max(0, policy.qualification_category_cap))
    cap_exceeded = qualification_raw > qualification_capped

    if not is_fulltime_hours_valid(form.weekly_full, policy):
        return _rejected(form, ErrorCode.INVALID_HOURS, cap_exceeded)
    if not is_parttime_hours_valid(form.weekly_part, form.weekly_full, policy):
        return _rejected(form, ErrorCode.MIN_FACTOR, cap_exceeded)
    if not is_regular_duration_valid(form.full_duration_months, policy):
        # duration shares the coarse hours error class
        return _rejected(form, ErrorCode.INVALID_HOURS, cap_exceeded)

    weekly_full = as_finite_number(form.weekly_full)
    weekly_part = as_finite_number(form.weekly_part)
    # whole months only, so the conversion and the echoed delta agree
    full_duration = _echo_months(form.full_duration_months)

    total_reduction = aggregate_reductions(
        form.degree_reduction_months,
        form.manual_reduction_months,
        qualification_capped,
        form.max_total_reduction,
    )
    parttime_final_months = convert_duration(
        full_duration,
        weekly_full,
        weekly_part,
        total_reduction,
        _months(form.min_duration_months),
        form.rounding,
    )

    fulltime_months = full_duration
    delta_months = parttime_final_months - fulltime_months
    if delta_months > 0:
        direction = DeltaDirection.LONGER
    elif delta_months < 0:
        direction = DeltaDirection.SHORTER
    else:
        direction = DeltaDirection.SAME

    return CalculationResult(
        allowed=True,
        parttime_final_months=parttime_final_months,
        fulltime_months=fulltime_months,
        delta_months=delta_months,
        delta_direction=direction,
        error_code=None,
        factor=weekly_part / weekly_full,
        raw_parttime_months=full_duration * (weekly_full / weekly_part),
        total_reduction_months=total_reduction,
        qualification_cap_exceeded=cap_exceeded,
        legal_hint=total_reduction > policy.legal_hint_threshold,
    )


def build_reduction_breakdown(
    degree_id: Optional[str] = None,
    manual_months=0,
    selection: Optional[Iterable[str]] = None,
    policy: PolicyConfig = DEFAULT_POLICY,
    catalog: ReductionCatalog = DEFAULT_CATALOG,
) -> ReductionBreakdown:
    """
    Resolve catalog keys into a per-source reduction breakdown.

    Used by presentation layers that show where each month came from.
    """
    degree = catalog.lookup_degree_reduction(degree_id)
    manual = _months(manual_months)
    summary = summarize_qualification_selection(
        selection, catalog, policy.qualification_category_cap
    )
    total_raw = degree + manual + summary.capped_total
    total = aggregate_reductions(degree, manual, summary.capped_total, policy.max_total_reduction)

    return ReductionBreakdown(
        degree=degree,
        manual=manual,
        qualification=summary.capped_total,
        qualification_raw=summary.raw_total,
        total_raw=total_raw,
        total=total,
        cap_exceeded=summary.exceeds_cap or total_raw > total,
        label_key=catalog.degree_label_key(degree_id),
    )


def form_values_from_selection(
    weekly_full,
    weekly_part,
    full_duration_months,
    degree_id: Optional[str] = None,
    manual_months=0,
    selection: Optional[Iterable[str]] = None,
    rounding=Rounding.ROUND,
    policy: PolicyConfig = DEFAULT_POLICY,
    catalog: ReductionCatalog = DEFAULT_CATALOG,
) -> FormValues:
    """Build a FormValues snapshot from catalog keys instead of raw months."""
    breakdown = build_reduction_breakdown(degree_id, manual_months, selection, policy, catalog)
    return FormValues(
        weekly_full=weekly_full,
        weekly_part=weekly_part,
        full_duration_months=full_duration_months,
        degree_reduction_months=breakdown.degree,
        manual_reduction_months=breakdown.manual,
        qualification_reduction_raw_months=breakdown.qualification_raw,
        school_degree_label_key=breakdown.label_key,
        max_total_reduction=policy.max_total_reduction,
        min_duration_months=policy.min_duration_months,
        rounding=resolve_rounding(rounding),
    )


def split_years_months(months) -> Tuple[int, int]:
    """36 -> (3, 0), 42 -> (3, 6)."""
    total = _echo_months(months)
    return total // 12, total % 12
