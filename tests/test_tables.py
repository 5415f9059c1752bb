"""Tests for the part-time comparison table."""
from dataclasses import replace

import pytest

from parttime_training_duration.tables import build_duration_table, parttime_hour_steps


class TestParttimeHourSteps:

    def test_grid_between_half_and_full(self):
        steps = parttime_hour_steps(37)
        assert steps[0] == 18.5
        assert steps[-1] == 36.5
        assert len(steps) == 37

    def test_whole_hour_steps(self):
        assert parttime_hour_steps(40, step=5) == [20, 25, 30, 35]

    @pytest.mark.parametrize("step", [0, -0.5, float("nan"), float("inf")])
    def test_non_positive_step_is_rejected(self, step):
        with pytest.raises(ValueError):
            parttime_hour_steps(40, step=step)

    def test_table_rejects_negative_step(self, baseline_form):
        with pytest.raises(ValueError):
            build_duration_table(baseline_form, step=-0.5)


class TestBuildDurationTable:

    def test_one_row_per_allowed_workload(self, baseline_form):
        df = build_duration_table(baseline_form)

        assert len(df) == 40
        assert df["Allowed"].all()
        assert df["Part-time hours"].iloc[0] == 20
        assert df["Part-time duration (months)"].iloc[0] == 72

    def test_matches_single_calculation(self, baseline_form):
        df = build_duration_table(baseline_form)
        row = df[df["Part-time hours"] == 30].iloc[0]

        assert row["Part-time duration (months)"] == 48
        assert row["Delta (months)"] == 12
        assert row["Direction"] == "longer"

    def test_durations_never_increase_with_hours(self, baseline_form):
        df = build_duration_table(replace(baseline_form, manual_reduction_months=4))
        assert df["Part-time duration (months)"].is_monotonic_decreasing

    def test_invalid_fulltime_rows_are_not_allowed(self, baseline_form):
        df = build_duration_table(replace(baseline_form, weekly_full=60))
        assert not df.empty
        assert not df["Allowed"].any()
