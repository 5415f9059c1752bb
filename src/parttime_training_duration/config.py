
# config.py

from parttime_training_duration.catalog import ReductionCatalog
from parttime_training_duration.models import PolicyConfig, Rounding

# Bounds and caps as applied by the chambers (IHK/HWK) today.
DEFAULT_POLICY = PolicyConfig(
    fulltime_min_hours=35.0,
    fulltime_max_hours=48.0,
    min_parttime_factor=0.5,
    duration_min_months=12,
    duration_max_months=48,
    max_total_reduction=12,
    min_duration_months=18,
    qualification_category_cap=6,
    legal_hint_threshold=6,
)


# School-leaving certificates and the reduction they usually justify.
SCHOOL_DEGREE_REDUCTIONS = {
    "hs": 0,     # Hauptschulabschluss
    "mr": 6,     # Mittlere Reife / Realschulabschluss
    "fhr": 12,   # Fachhochschulreife
    "abi": 12,   # Abitur
}

SCHOOL_DEGREE_LABEL_KEYS = {
    degree_id: f"reductionOptions.{degree_id}" for degree_id in SCHOOL_DEGREE_REDUCTIONS
}

# Other recognised reasons (§8 BBiG). Each one is capped by the
# qualification category cap before it enters the global cap.
QUALIFICATION_REDUCTIONS = {
    "familyCare": 12,
    "ageOver21": 12,
    "schoolIntermediate": 6,
    "schoolAdvanced": 12,
    "completedTraining": 12,
    "vocationalFoundation": 12,
    "vocationalExperience": 12,
    "academic": 12,
    "foreignRecognition": 12,
}

DEFAULT_CATALOG = ReductionCatalog(
    degree_months=SCHOOL_DEGREE_REDUCTIONS,
    qualification_months=QUALIFICATION_REDUCTIONS,
    degree_label_keys=SCHOOL_DEGREE_LABEL_KEYS,
)


# Form defaults, keeps the calculator stable on the first render.
DEFAULT_FULLTIME_HOURS = 40.0
DEFAULT_PARTTIME_HOURS = 30.0
DEFAULT_DURATION_MONTHS = 36
DEFAULT_ROUNDING = Rounding.ROUND
