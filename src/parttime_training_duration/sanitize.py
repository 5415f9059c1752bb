"""
Caller-side coercion of raw form input.

Form fields arrive as strings while the user types ("40", "37,5", "").
This module turns them into the strictly numeric `FormValues` the
calculation engine expects. Nothing here raises: unusable input becomes
a fallback value which the validators then reject.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping

from parttime_training_duration.calculations import calculate, resolve_rounding
from parttime_training_duration.catalog import ReductionCatalog
from parttime_training_duration.config import DEFAULT_CATALOG, DEFAULT_POLICY
from parttime_training_duration.models import CalculationResult, FormValues, PolicyConfig
from parttime_training_duration.validators import as_finite_number

_DECIMAL_PATTERN = re.compile(r"^\d+(\.\d?)?$")


@dataclass(frozen=True)
class SanitizedInput:
    ok: bool
    text: str


def sanitize_positive_decimal(raw: Any) -> SanitizedInput:
    """
    Normalise a raw input into a positive decimal with at most one
    decimal digit.

    Steps:
      1. empty / None is fine while typing -> ok, ""
      2. comma becomes dot (German decimal separator)
      3. drop everything except digits and the first dot
      4. keep at most one digit after the dot

    Returns:
        SanitizedInput(ok, text); text is "" when not ok.
    """
    if raw is None:
        return SanitizedInput(ok=True, text="")

    text = str(raw).strip()
    if text == "":
        return SanitizedInput(ok=True, text="")

    text = text.replace(",", ".")
    text = re.sub(r"[^\d.]", "", text)

    first_dot = text.find(".")
    if first_dot != -1:
        before = text[:first_dot]
        after = text[first_dot + 1:].replace(".", "")[:1]
        text = f"{before}.{after}"

    if not _DECIMAL_PATTERN.match(text):
        return SanitizedInput(ok=False, text="")

    return SanitizedInput(ok=True, text=text)


def to_number(raw: Any, fallback: float = 0.0) -> float:
    if isinstance(raw, str):
        raw = raw.strip().replace(",", ".")
    value = as_finite_number(raw)
    return fallback if value is None else value


def coerce_form_values(
    raw: Mapping[str, Any],
    policy: PolicyConfig = DEFAULT_POLICY,
    catalog: ReductionCatalog = DEFAULT_CATALOG,
) -> FormValues:
    """
    Build a FormValues snapshot from a raw form mapping.

    Keys follow the FormValues field names. A `school_degree_id` key is
    resolved through the catalog when no explicit
    `degree_reduction_months` is given.
    """
    degree_id = raw.get("school_degree_id") or None
    if raw.get("degree_reduction_months") in (None, ""):
        degree_months = catalog.lookup_degree_reduction(degree_id)
    else:
        degree_months = to_number(raw.get("degree_reduction_months"))

    label_key = raw.get("school_degree_label_key") or catalog.degree_label_key(degree_id)

    return FormValues(
        weekly_full=to_number(raw.get("weekly_full")),
        weekly_part=to_number(raw.get("weekly_part")),
        full_duration_months=to_number(raw.get("full_duration_months")),
        degree_reduction_months=degree_months,
        manual_reduction_months=to_number(raw.get("manual_reduction_months")),
        qualification_reduction_raw_months=to_number(
            raw.get("qualification_reduction_raw_months")
        ),
        school_degree_label_key=label_key,
        max_total_reduction=int(to_number(raw.get("max_total_reduction"), policy.max_total_reduction)),
        min_duration_months=int(to_number(raw.get("min_duration_months"), policy.min_duration_months)),
        rounding=resolve_rounding(raw.get("rounding") or "round"),
    )


def calculate_from_raw(
    raw: Mapping[str, Any],
    policy: PolicyConfig = DEFAULT_POLICY,
    catalog: ReductionCatalog = DEFAULT_CATALOG,
) -> CalculationResult:
    return calculate(coerce_form_values(raw, policy, catalog), policy)
