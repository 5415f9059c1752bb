from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class ReductionCatalog:
    """
    Reference table of reduction months.

    degree_months:
        school-degree id -> months granted for that school-leaving certificate.
    qualification_months:
        qualification-reason code -> months granted for that reason.
    degree_label_keys:
        optional school-degree id -> translation key used by the UI.

    The mappings are copied into read-only proxies so a catalog can be
    shared between callers without anyone mutating it.
    """
    degree_months: Mapping[str, float]
    qualification_months: Mapping[str, float]
    degree_label_keys: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("degree_months", "qualification_months", "degree_label_keys"):
            table = dict(getattr(self, name))
            if name != "degree_label_keys":
                for key, months in table.items():
                    if months < 0:
                        raise ValueError(f"{name}[{key!r}] must not be negative")
            object.__setattr__(self, name, MappingProxyType(table))

    def lookup_degree_reduction(self, degree_id: Optional[str]) -> float:
        if not degree_id:
            return 0
        return self.degree_months.get(degree_id, 0)

    def lookup_qualification_reduction(self, reason_code: Optional[str]) -> float:
        if not reason_code:
            return 0
        return self.qualification_months.get(reason_code, 0)

    def degree_label_key(self, degree_id: Optional[str]) -> Optional[str]:
        if not degree_id:
            return None
        return self.degree_label_keys.get(degree_id)


def lookup_degree_reduction(degree_id: Optional[str]) -> float:
    from parttime_training_duration.config import DEFAULT_CATALOG

    return DEFAULT_CATALOG.lookup_degree_reduction(degree_id)


def lookup_qualification_reduction(reason_code: Optional[str]) -> float:
    from parttime_training_duration.config import DEFAULT_CATALOG

    return DEFAULT_CATALOG.lookup_qualification_reduction(reason_code)
