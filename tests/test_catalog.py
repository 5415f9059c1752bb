"""Tests for the reduction catalog and policy configuration."""
import pytest

from parttime_training_duration.catalog import (
    ReductionCatalog,
    lookup_degree_reduction,
    lookup_qualification_reduction,
)
from parttime_training_duration.config import DEFAULT_CATALOG
from parttime_training_duration.models import PolicyConfig


class TestDefaultCatalog:

    @pytest.mark.parametrize("degree_id,months", [("hs", 0), ("mr", 6), ("fhr", 12), ("abi", 12)])
    def test_degree_months(self, degree_id, months):
        assert lookup_degree_reduction(degree_id) == months

    def test_qualification_months(self):
        assert lookup_qualification_reduction("familyCare") == 12
        assert lookup_qualification_reduction("schoolIntermediate") == 6

    @pytest.mark.parametrize("key", [None, "", "unknown"])
    def test_unknown_keys_mean_no_reduction(self, key):
        assert lookup_degree_reduction(key) == 0
        assert lookup_qualification_reduction(key) == 0

    def test_label_keys(self):
        assert DEFAULT_CATALOG.degree_label_key("mr") == "reductionOptions.mr"
        assert DEFAULT_CATALOG.degree_label_key(None) is None


class TestCustomCatalog:

    def test_tables_are_supplied_at_construction(self):
        catalog = ReductionCatalog(
            degree_months={"bachelor": 12},
            qualification_months={"care": 3},
        )
        assert catalog.lookup_degree_reduction("bachelor") == 12
        assert catalog.lookup_degree_reduction("abi") == 0
        assert catalog.lookup_qualification_reduction("care") == 3

    def test_tables_are_read_only(self):
        source = {"mr": 6}
        catalog = ReductionCatalog(degree_months=source, qualification_months={})

        with pytest.raises(TypeError):
            catalog.degree_months["mr"] = 24

        source["mr"] = 24
        assert catalog.lookup_degree_reduction("mr") == 6

    def test_negative_months_are_rejected(self):
        with pytest.raises(ValueError):
            ReductionCatalog(degree_months={"mr": -6}, qualification_months={})


class TestPolicyConfig:

    def test_defaults(self):
        policy = PolicyConfig()
        assert policy.max_total_reduction == 12
        assert policy.min_duration_months == 18
        assert policy.qualification_category_cap == 6

    @pytest.mark.parametrize("kwargs", [
        {"min_parttime_factor": 1.0},
        {"fulltime_min_hours": 50},
        {"duration_min_months": 60},
        {"max_total_reduction": -1},
        {"min_duration_months": 0},
    ])
    def test_inconsistent_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            PolicyConfig(**kwargs)
