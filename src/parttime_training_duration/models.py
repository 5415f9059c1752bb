from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class Rounding(str, Enum):
    ROUND = "round"
    CEIL = "ceil"
    FLOOR = "floor"


class ErrorCode(str, Enum):
    INVALID_HOURS = "invalidHours"
    MIN_FACTOR = "minFactor"


class DeltaDirection(str, Enum):
    LONGER = "longer"
    SHORTER = "shorter"
    SAME = "same"


@dataclass(frozen=True)
class PolicyConfig:
    """
    Statutory bounds and caps for the part-time calculation.

    These values come from §7a BBiG / §27b HwO practice and the chamber
    guidelines; they are not specific to any one apprentice.
    """
    fulltime_min_hours: float = 35.0
    fulltime_max_hours: float = 48.0
    min_parttime_factor: float = 0.5       # the 50% rule
    duration_min_months: int = 12
    duration_max_months: int = 48
    max_total_reduction: int = 12          # global reduction ceiling
    min_duration_months: int = 18          # floor after all reductions
    qualification_category_cap: int = 6
    legal_hint_threshold: int = 6          # §8 BBiG note above this total

    def __post_init__(self):
        if self.fulltime_min_hours <= 0 or self.fulltime_min_hours > self.fulltime_max_hours:
            raise ValueError("fulltime hour bounds are inconsistent")
        if not 0 < self.min_parttime_factor < 1:
            raise ValueError("min_parttime_factor must lie strictly between 0 and 1")
        if self.duration_min_months <= 0 or self.duration_min_months > self.duration_max_months:
            raise ValueError("regular duration bounds are inconsistent")
        if self.max_total_reduction < 0 or self.qualification_category_cap < 0:
            raise ValueError("reduction caps must not be negative")
        if self.min_duration_months <= 0:
            raise ValueError("min_duration_months must be positive")


@dataclass(frozen=True)
class FormValues:
    """
    One immutable snapshot of the calculator form.

    Built by the caller on every input change. All numeric fields are
    expected to be numbers already; see `sanitize.coerce_form_values`
    for turning raw form strings into this shape.
    """
    weekly_full: float
    weekly_part: float
    full_duration_months: float
    degree_reduction_months: float = 0
    manual_reduction_months: float = 0
    qualification_reduction_raw_months: float = 0
    school_degree_label_key: Optional[str] = None
    max_total_reduction: int = 12
    min_duration_months: int = 18
    rounding: Rounding = Rounding.ROUND


@dataclass(frozen=True)
class ReductionSummary:
    raw_total: int
    capped_total: int

    @property
    def exceeds_cap(self) -> bool:
        return self.raw_total > self.capped_total


@dataclass(frozen=True)
class ReductionBreakdown:
    """
    Per-source view of the reductions that went into one calculation.

    `qualification` is already category-capped, `total` is globally capped.
    """
    degree: float
    manual: float
    qualification: float
    qualification_raw: float
    total_raw: float
    total: float
    cap_exceeded: bool
    label_key: Optional[str] = None


@dataclass(frozen=True)
class CalculationResult:
    allowed: bool
    parttime_final_months: int
    fulltime_months: int
    delta_months: int
    delta_direction: DeltaDirection
    error_code: Optional[ErrorCode] = None
    # audit trail
    factor: float = 0.0                    # weekly_part / weekly_full
    raw_parttime_months: float = 0.0       # before rounding and reductions
    total_reduction_months: float = 0.0
    qualification_cap_exceeded: bool = False
    legal_hint: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["delta_direction"] = self.delta_direction.value
        data["error_code"] = self.error_code.value if self.error_code else None
        return data
