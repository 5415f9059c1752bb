import math
from dataclasses import replace

import pandas as pd

from parttime_training_duration.calculations import calculate
from parttime_training_duration.config import DEFAULT_POLICY
from parttime_training_duration.models import FormValues, PolicyConfig
from parttime_training_duration.validators import parttime_hours_bounds


def parttime_hour_steps(fulltime_hours, step: float = 0.5, policy: PolicyConfig = DEFAULT_POLICY):
    """
    All part-time hour values on a `step` grid that satisfy the 50% rule
    for the given full-time hours.
    """
    if not math.isfinite(step) or step <= 0:
        raise ValueError("step must be a positive number of hours")

    lower, upper = parttime_hours_bounds(fulltime_hours, policy)
    n = math.ceil(lower / step)
    values = []
    while n * step < upper:
        values.append(n * step)
        n += 1
    return values


def build_duration_table(
    form: FormValues,
    step: float = 0.5,
    policy: PolicyConfig = DEFAULT_POLICY,
) -> pd.DataFrame:
    """
    Compare the part-time duration across every allowed weekly workload.

    Everything except the part-time hours is taken from `form`. One row
    per part-time hour value, ordered by hours.
    """
    data = []

    for hours in parttime_hour_steps(form.weekly_full, step, policy):
        result = calculate(replace(form, weekly_part=hours), policy)
        data.append(
            {
                "Part-time hours": hours,
                "Factor": result.factor,
                "Allowed": result.allowed,
                "Part-time duration (months)": result.parttime_final_months,
                "Full-time duration (months)": result.fulltime_months,
                "Delta (months)": result.delta_months,
                "Direction": result.delta_direction.value,
            }
        )

    df = pd.DataFrame(
        data,
        columns=[
            "Part-time hours",
            "Factor",
            "Allowed",
            "Part-time duration (months)",
            "Full-time duration (months)",
            "Delta (months)",
            "Direction",
        ],
    )
    return df
